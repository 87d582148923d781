"""A FIFO queue, a priority queue and the max-heap functions behind it."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any

Less = Callable[[Any, Any], bool]


def _sift_down(items: MutableSequence, start: int, end: int, less: Less) -> None:
    root = start
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        if child + 1 < end and less(items[child], items[child + 1]):
            child += 1
        if not less(items[root], items[child]):
            return
        items[root], items[child] = items[child], items[root]
        root = child


def make_heap(items: MutableSequence, less: Less | None = None) -> None:
    """Rearrange ``items`` in place into a heap whose first element is the largest."""
    less = less or operator.lt
    n = len(items)
    for start in reversed(range(n // 2)):
        _sift_down(items, start, n, less)


def push_heap(items: MutableSequence, less: Less | None = None) -> None:
    """Move the last element of ``items`` into its place in the heap before it."""
    less = less or operator.lt
    child = len(items) - 1
    while child > 0:
        parent = (child - 1) // 2
        if not less(items[parent], items[child]):
            return
        items[parent], items[child] = items[child], items[parent]
        child = parent


def _pop_range(items: MutableSequence, end: int, less: Less) -> None:
    items[0], items[end - 1] = items[end - 1], items[0]
    _sift_down(items, 0, end - 1, less)


def pop_heap(items: MutableSequence, less: Less | None = None) -> None:
    """Move the largest element to the end and restore the heap before it."""
    if not items:
        raise IndexError("pop from an empty heap")
    _pop_range(items, len(items), less or operator.lt)


def sort_heap(items: MutableSequence, less: Less | None = None) -> None:
    """Turn the heap ``items`` into an ascending sequence."""
    less = less or operator.lt
    for end in range(len(items), 1, -1):
        _pop_range(items, end, less)


def is_heap(items: MutableSequence, less: Less | None = None) -> bool:
    """Return whether no element of ``items`` is greater than its parent."""
    less = less or operator.lt
    return not any(less(items[(i - 1) // 2], items[i]) for i in range(1, len(items)))


class Queue:
    """First-in, first-out queue."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque = deque(items)

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of an empty queue")
        return self._items[-1]

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> None:
        """Remove the front element."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        self._items.popleft()

    def swap(self, other: Queue) -> None:
        self._items, other._items = other._items, self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return list(self._items) == list(other._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class PriorityQueue:
    """Queue whose top is always its largest element under ``less``."""

    def __init__(self, items: Iterable[Any] = (), less: Less | None = None) -> None:
        self._less = less or operator.lt
        self._heap = list(items)
        make_heap(self._heap, self._less)

    def empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def top(self) -> Any:
        if not self._heap:
            raise IndexError("top of an empty priority queue")
        return self._heap[0]

    def push(self, value: Any) -> None:
        self._heap.append(value)
        push_heap(self._heap, self._less)

    def pop(self) -> None:
        """Remove the top element."""
        pop_heap(self._heap, self._less)
        self._heap.pop()

    def swap(self, other: PriorityQueue) -> None:
        self._heap, other._heap = other._heap, self._heap
        self._less, other._less = other._less, self._less

    def __repr__(self) -> str:
        return f"PriorityQueue({self._heap!r})"