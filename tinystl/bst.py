"""An unbalanced binary search tree that keeps unique values in sorted order."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, TextIO


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Binary search tree of unique values; inserting a duplicate does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        self.update(values)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless an equal value is already stored."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    self._size += 1
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def update(self, values: Iterable[Any]) -> None:
        """Insert every value of ``values`` in turn."""
        for value in values:
            self.insert(value)

    def erase(self, value: Any) -> None:
        """Remove ``value`` if it is stored; otherwise do nothing."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent, node = node, (node.left if value < node.value else node.right)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            # Alternate between successor and predecessor to keep deletions balanced.
            if self._size % 2 == 0:
                parent, victim = node, node.right
                while victim.left is not None:
                    parent, victim = victim, victim.left
            else:
                parent, victim = node, node.left
                while victim.right is not None:
                    parent, victim = victim, victim.right
            node.value = victim.value
            node = victim
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of levels in the tree; zero when empty."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return levels

    def _require_root(self) -> _Node:
        if self._root is None:
            raise ValueError("tree is empty")
        return self._root

    def root(self) -> Any:
        """Value stored at the root."""
        return self._require_root().value

    def find_min(self) -> Any:
        """Smallest stored value."""
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.value

    def find_max(self) -> Any:
        """Largest stored value."""
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.value

    def find(self, value: Any) -> Any:
        """Return the stored value equal to ``value``; raise KeyError if absent."""
        node = self._root
        while node is not None:
            if value == node.value:
                return node.value
            node = node.left if value < node.value else node.right
        raise KeyError(value)

    def __contains__(self, value: object) -> bool:
        try:
            self.find(value)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def preorder(self) -> Iterator[Any]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[Any]:
        reversed_order: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(reversed_order)

    def levelorder(self) -> Iterator[Any]:
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            yield node.value

    @staticmethod
    def _write(values: Iterable[Any], delim: str, file: TextIO | None) -> None:
        out = sys.stdout if file is None else file
        for value in values:
            out.write(f"{value}{delim}")

    def print_preorder(self, delim: str = " ", file: TextIO | None = None) -> None:
        self._write(self.preorder(), delim, file)

    def print_inorder(self, delim: str = " ", file: TextIO | None = None) -> None:
        self._write(self.inorder(), delim, file)

    def print_postorder(self, delim: str = " ", file: TextIO | None = None) -> None:
        self._write(self.postorder(), delim, file)

    def print_levelorder(self, delim: str = " ", file: TextIO | None = None) -> None:
        self._write(self.levelorder(), delim, file)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"