"""A fixed-capacity ring buffer that overwrites its oldest element when full."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any


class CircularBuffer:
    """Ring buffer with a fixed number of slots.

    Indexing with ``[]`` addresses the underlying slots directly; iteration
    walks the stored elements from the oldest to the newest.
    """

    def __init__(self, capacity: int, n: int, value: Any = None) -> None:
        if n <= 0:
            raise ValueError("initial element count must be positive")
        self._setup(capacity, [value] * min(n, capacity))

    @classmethod
    def from_iterable(cls, capacity: int, iterable: Iterable[Any]) -> CircularBuffer:
        """Build a buffer from at most ``capacity`` leading items of ``iterable``."""
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        items = list(islice(iterable, capacity))
        if not items:
            raise ValueError("cannot build a buffer from an empty iterable")
        buf = cls.__new__(cls)
        buf._setup(capacity, items)
        return buf

    def _setup(self, capacity: int, items: list[Any]) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots = items + [None] * (capacity - len(items))
        self._head = 0
        self._size = len(items)
        self._tail = (self._size - 1) % capacity

    def _next(self, index: int) -> int:
        return (index + 1) % len(self._slots)

    def copy(self) -> CircularBuffer:
        """Return an independent copy of the buffer."""
        buf = self.__class__.__new__(self.__class__)
        buf._slots = list(self._slots)
        buf._head = self._head
        buf._tail = self._tail
        buf._size = self._size
        return buf

    def full(self) -> bool:
        return self._size == len(self._slots)

    def empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Drop every element."""
        capacity = len(self._slots)
        self._slots = [None] * capacity
        self._head = 0
        self._tail = capacity - 1
        self._size = 0

    def _check_slot(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError("slot index out of range")

    def __getitem__(self, index: int) -> Any:
        self._check_slot(index)
        return self._slots[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_slot(index)
        self._slots[index] = value

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._slots)
        for offset in range(self._size):
            yield self._slots[(self._head + offset) % capacity]

    def front(self) -> Any:
        """Return the oldest element."""
        if self.empty():
            raise IndexError("front of an empty buffer")
        return self._slots[self._head]

    def back(self) -> Any:
        """Return the newest element."""
        if self.empty():
            raise IndexError("back of an empty buffer")
        return self._slots[self._tail]

    def push_back(self, value: Any) -> None:
        """Append ``value``; when full, the oldest element is overwritten."""
        self._tail = self._next(self._tail)
        self._slots[self._tail] = value
        if self._size == len(self._slots):
            self._head = self._next(self._head)
        else:
            self._size += 1

    def pop_front(self) -> None:
        """Remove the oldest element."""
        if self.empty():
            raise IndexError("pop from an empty buffer")
        self._slots[self._head] = None
        self._head = self._next(self._head)
        self._size -= 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        return list(self) == list(other)

    def __str__(self) -> str:
        if self.empty():
            return ""
        return "(" + ", ".join(str(item) for item in self) + ")"

    def __repr__(self) -> str:
        return f"CircularBuffer({len(self._slots)}, {list(self)!r})"