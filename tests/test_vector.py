import pytest

from tinystl.vector import Vector


def test_construct_from_items_sets_capacity_to_size():
    v = Vector([4, 5, 6])
    assert list(v) == [4, 5, 6]
    assert len(v) == 3
    assert v.capacity() == 3


def test_filled():
    v = Vector.filled(4, "x")
    assert list(v) == ["x", "x", "x", "x"]
    assert v.capacity() == 4


def test_filled_negative_raises():
    with pytest.raises(ValueError):
        Vector.filled(-1, 0)


def test_empty_and_clear_keeps_capacity():
    v = Vector([1, 2])
    assert not v.empty()
    v.clear()
    assert v.empty()
    assert v.capacity() == 2


def test_push_back_on_empty_vector_grows_to_one():
    v = Vector()
    v.push_back(7)
    assert list(v) == [7]
    assert v.capacity() == 1


def test_push_back_keeps_capacity_at_least_size():
    v = Vector()
    for i in range(50):
        v.push_back(i)
        assert v.capacity() >= len(v)
    assert list(v) == list(range(50))


def test_capacity_doubles_when_full():
    v = Vector([1, 2, 3])
    v.push_back(4)
    assert v.capacity() == 6


def test_reserve_only_grows():
    v = Vector([1, 2])
    v.reserve(10)
    assert v.capacity() == 10
    v.reserve(5)
    assert v.capacity() == 10
    assert list(v) == [1, 2]


def test_shrink_to_fit():
    v = Vector()
    v.reserve(20)
    v.insert_range(0, [1, 2, 3])
    v.shrink_to_fit()
    assert v.capacity() == len(v)
    assert list(v) == [1, 2, 3]


def test_resize_shrink_and_pad():
    v = Vector([1, 2, 3, 4])
    v.resize(2)
    assert list(v) == [1, 2]
    v.resize(4, 9)
    assert list(v) == [1, 2, 9, 9]


def test_resize_beyond_capacity_sets_capacity_to_size():
    v = Vector([1])
    v.resize(12, 0)
    assert len(v) == 12
    assert v.capacity() == 12


def test_insert_returns_position_and_matches_list():
    v = Vector([1, 2, 3])
    reference = [1, 2, 3]
    pos = v.insert(1, 99)
    reference.insert(1, 99)
    assert pos == 1
    assert v[pos] == 99
    assert list(v) == reference


def test_insert_n_and_range():
    v = Vector(["a", "b"])
    v.insert_n(1, 3, "z")
    assert list(v) == ["a", "z", "z", "z", "b"]
    v.insert_range(0, ["p", "q"])
    assert list(v) == ["p", "q", "a", "z", "z", "z", "b"]
    assert v.capacity() >= len(v)


def test_insert_n_zero_raises():
    with pytest.raises(ValueError):
        Vector([1]).insert_n(0, 0, 5)


def test_insert_out_of_range_raises():
    with pytest.raises(IndexError):
        Vector([1]).insert(3, 5)


def test_erase_and_erase_range():
    v = Vector([0, 1, 2, 3, 4, 5])
    assert v.erase(2) == 2
    assert list(v) == [0, 1, 3, 4, 5]
    assert v.erase_range(1, 3) == 1
    assert list(v) == [0, 4, 5]


def test_erase_range_bad_bounds_raises():
    with pytest.raises(IndexError):
        Vector([1, 2]).erase_range(1, 5)


def test_front_back_and_setitem():
    v = Vector([1, 2, 3])
    v[0] = 10
    assert v.front() == 10
    assert v.back() == 3


def test_front_of_empty_raises():
    with pytest.raises(IndexError):
        Vector().front()


def test_pop_back():
    v = Vector([1, 2])
    v.pop_back()
    assert list(v) == [1]
    v.pop_back()
    with pytest.raises(IndexError):
        v.pop_back()


def test_swap_exchanges_contents_and_capacity():
    a = Vector([1, 2, 3])
    b = Vector(["x"])
    a.swap(b)
    assert list(a) == ["x"] and a.capacity() == 1
    assert list(b) == [1, 2, 3] and b.capacity() == 3


def test_equality():
    assert Vector([1, 2]) == Vector([1, 2])
    assert not (Vector([1, 2]) == Vector([1, 3]))
    assert not (Vector([1]) == Vector([1, 1]))