"""A self-balancing (AVL) binary search tree of unique values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from tinystl.bst import BinarySearchTree, _Node


class _AVLNode(_Node):
    __slots__ = ("height",)

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.height = 1


def _height(node: _AVLNode | None) -> int:
    return 0 if node is None else node.height


def _fix_height(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(k2: _AVLNode) -> _AVLNode:
    k1 = k2.left
    k2.left = k1.right
    k1.right = k2
    _fix_height(k2)
    _fix_height(k1)
    return k1


def _rotate_left(k2: _AVLNode) -> _AVLNode:
    k1 = k2.right
    k2.right = k1.left
    k1.left = k2
    _fix_height(k2)
    _fix_height(k1)
    return k1


def _rebalance(node: _AVLNode) -> _AVLNode:
    _fix_height(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1:
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree(BinarySearchTree):
    """Binary search tree kept height-balanced on every insert and erase."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        super().__init__(values)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless an equal value is already stored."""
        self._root = self._insert(self._root, value)

    def update(self, values: Iterable[Any]) -> None:
        """Insert every value from ``values``."""
        for value in values:
            self.insert(value)

    def _insert(self, node: _AVLNode | None, value: Any) -> _AVLNode:
        if node is None:
            self._size += 1
            return _AVLNode(value)
        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node
        return _rebalance(node)

    def erase(self, value: Any) -> None:
        """Remove ``value`` if it is stored; otherwise do nothing."""
        self._root = self._erase(self._root, value)

    def _erase(self, node: _AVLNode | None, value: Any) -> _AVLNode | None:
        if node is None:
            return None
        if value < node.value:
            node.left = self._erase(node.left, value)
        elif value > node.value:
            node.right = self._erase(node.right, value)
        else:
            if node.left is None or node.right is None:
                self._size -= 1
                return node.left if node.left is not None else node.right
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._erase(node.right, successor.value)
        return _rebalance(node)

    def __len__(self) -> int:
        return super().__len__()

    def empty(self) -> bool:
        """True when the tree holds no values."""
        return super().empty()

    def height(self) -> int:
        """Number of levels in the tree; zero when empty."""
        return _height(self._root)

    def root(self) -> Any:
        """The value stored at the root."""
        return super().root()

    def find_min(self) -> Any:
        """The smallest stored value."""
        return super().find_min()

    def find_max(self) -> Any:
        """The largest stored value."""
        return super().find_max()

    def find(self, value: Any) -> Any:
        """Look up ``value`` in the tree."""
        return super().find(value)

    def __contains__(self, value: Any) -> bool:
        return super().__contains__(value)

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def preorder(self) -> Iterator[Any]:
        """Values in pre-order."""
        return super().preorder()

    def inorder(self) -> Iterator[Any]:
        """Values in ascending order."""
        return super().inorder()

    def postorder(self) -> Iterator[Any]:
        """Values in post-order."""
        return super().postorder()

    def levelorder(self) -> Iterator[Any]:
        """Values level by level from the root."""
        return super().levelorder()

    def print_preorder(self, delim=" ", file=None) -> None:
        """Write the pre-order values, each followed by ``delim``."""
        super().print_preorder(delim, file)

    def print_inorder(self, delim=" ", file=None) -> None:
        """Write the in-order values, each followed by ``delim``."""
        super().print_inorder(delim, file)

    def print_postorder(self, delim=" ", file=None) -> None:
        """Write the post-order values, each followed by ``delim``."""
        super().print_postorder(delim, file)

    def print_levelorder(self, delim=" ", file=None) -> None:
        """Write the level-order values, each followed by ``delim``."""
        super().print_levelorder(delim, file)