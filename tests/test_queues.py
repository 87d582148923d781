from collections import Counter

import pytest

from tinystl.queues import (
    PriorityQueue,
    Queue,
    is_heap,
    make_heap,
    pop_heap,
    push_heap,
    sort_heap,
)


def _drain(pq):
    out = []
    while not pq.empty():
        out.append(pq.top())
        pq.pop()
    return out


def test_heap_algorithms():
    v = [10, 20, 30, 5, 15]
    make_heap(v)
    assert v == [30, 20, 10, 5, 15]
    pop_heap(v)
    assert v == [20, 15, 10, 5, 30]
    v.pop()
    v.append(99)
    push_heap(v)
    assert v == [99, 20, 10, 5, 15]
    sort_heap(v)
    assert v == [5, 10, 15, 20, 99]


def test_is_heap_and_make_heap():
    v = [9, 5, 2, 6, 4, 1, 3, 8, 7]
    assert not is_heap(v)
    make_heap(v)
    assert is_heap(v)
    assert v[0] == 9
    assert Counter(v) == Counter([9, 5, 2, 6, 4, 1, 3, 8, 7])


def test_custom_less_builds_min_heap():
    v = [5, 3, 8, 1]
    make_heap(v, lambda a, b: a > b)
    assert v[0] == 1
    assert is_heap(v, lambda a, b: a > b)


def test_pop_heap_empty():
    with pytest.raises(IndexError):
        pop_heap([])


def test_priority_queue_from_items():
    arr = [1, 2, 3, 4, 5, 6, 7, 8, 9, 0, -1, -2, -3]
    assert _drain(PriorityQueue(arr)) == sorted(arr, reverse=True)


def test_priority_queue_empty_and_push():
    pq = PriorityQueue()
    assert pq.empty()
    pq.push("zxh")
    assert not pq.empty()
    assert pq.top() == "zxh"


def test_priority_queue_sizes():
    pq = PriorityQueue()
    for i in range(1, 10):
        pq.push(i)
        assert len(pq) == i
    for i in range(len(pq), 0, -1):
        pq.pop()
        assert len(pq) == i - 1


def test_priority_queue_order():
    pq = PriorityQueue()
    for value in (30, 100, 25, 40):
        pq.push(value)
    assert _drain(pq) == [100, 40, 30, 25]


def test_priority_queue_swap():
    foo, bar = PriorityQueue(), PriorityQueue()
    for value in (15, 30, 10):
        foo.push(value)
    for value in (101, 202):
        bar.push(value)
    assert len(foo) == 3 and len(bar) == 2
    foo.swap(bar)
    assert len(foo) == 2 and len(bar) == 3
    assert foo.top() == 202 and bar.top() == 30


def test_priority_queue_empty_errors():
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        pq.top()
    with pytest.raises(IndexError):
        pq.pop()


def test_queue_fifo():
    q = Queue()
    for value in (1, 2, 3):
        q.push(value)
    assert len(q) == 3
    assert q.front() == 1 and q.back() == 3
    q.pop()
    assert q.front() == 2


def test_queue_equality_and_swap():
    a, b = Queue([1, 2]), Queue([3])
    assert a != b
    assert a == Queue([1, 2])
    a.swap(b)
    assert a == Queue([3]) and b == Queue([1, 2])


def test_queue_empty_errors():
    q = Queue()
    assert q.empty()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.back()
    with pytest.raises(IndexError):
        q.pop()