"""A growable array that tracks its own capacity and grows it the way the container does."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Vector:
    """Sequence of values with an explicit capacity.

    When an insertion needs more room than is left, the capacity becomes
    ``old + max(old, needed)``, or just ``needed`` when it was zero.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self._capacity = len(self._items)

    @classmethod
    def filled(cls, n: int, value: Any = None) -> Vector:
        """Build a vector of ``n`` copies of ``value``."""
        if n < 0:
            raise ValueError("size must not be negative")
        return cls([value] * n)

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return not self._items

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty vector")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of an empty vector")
        return self._items[-1]

    def _new_capacity(self, needed: int) -> int:
        old = self._capacity
        return old + max(old, needed) if old else needed

    def _make_room(self, needed: int) -> None:
        if self._capacity - len(self._items) < needed:
            self._capacity = self._new_capacity(needed)

    def _check_position(self, position: int) -> None:
        if not 0 <= position <= len(self._items):
            raise IndexError("position out of range")

    def resize(self, n: int, value: Any = None) -> None:
        """Shrink to ``n`` elements or pad with ``value`` up to ``n``."""
        if n < 0:
            raise ValueError("size must not be negative")
        size = len(self._items)
        if n < size:
            del self._items[n:]
        elif n > size:
            self._items.extend([value] * (n - size))
            if n > self._capacity:
                self._capacity = n

    def reserve(self, n: int) -> None:
        """Make room for at least ``n`` elements."""
        if n > self._capacity:
            self._capacity = n

    def shrink_to_fit(self) -> None:
        """Drop unused capacity."""
        self._capacity = len(self._items)

    def insert(self, position: int, value: Any) -> int:
        """Insert ``value`` before ``position``; return the position of the new element."""
        self.insert_n(position, 1, value)
        return position

    def insert_n(self, position: int, n: int, value: Any) -> None:
        """Insert ``n`` copies of ``value`` before ``position``."""
        if n <= 0:
            raise ValueError("count of inserted elements must be positive")
        self._check_position(position)
        self._make_room(n)
        self._items[position:position] = [value] * n

    def insert_range(self, position: int, items: Iterable[Any]) -> None:
        """Insert every value of ``items`` before ``position``, keeping their order."""
        self._check_position(position)
        values = list(items)
        self._make_room(len(values))
        self._items[position:position] = values

    def erase(self, position: int) -> int:
        """Remove the element at ``position``; return the position after removal."""
        return self.erase_range(position, position + 1)

    def erase_range(self, first: int, last: int) -> int:
        """Remove elements ``first`` up to but not including ``last``; return ``first``."""
        if not 0 <= first <= last <= len(self._items):
            raise IndexError("range out of bounds")
        del self._items[first:last]
        return first

    def push_back(self, value: Any) -> None:
        self.insert(len(self._items), value)

    def pop_back(self) -> None:
        if not self._items:
            raise IndexError("pop from an empty vector")
        self._items.pop()

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def swap(self, other: Vector) -> None:
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"