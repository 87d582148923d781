import io

import pytest

from tinystl.bst import BinarySearchTree


def test_empty_tree():
    bst = BinarySearchTree()
    assert bst.empty()
    assert len(bst) == 0
    assert bst.height() == 0
    assert list(bst) == []


def test_empty_tree_lookups_raise():
    bst = BinarySearchTree()
    with pytest.raises(ValueError):
        bst.root()
    with pytest.raises(ValueError):
        bst.find_min()
    with pytest.raises(ValueError):
        bst.find_max()
    with pytest.raises(KeyError):
        bst.find(1)


def test_duplicates_are_ignored():
    bst = BinarySearchTree([5, 3, 5, 8, 3])
    assert len(bst) == 3
    assert list(bst) == [3, 5, 8]


def test_inorder_is_sorted_unique():
    values = [50, 20, 70, 10, 30, 60, 80, 20, 65, 5]
    bst = BinarySearchTree(values)
    assert list(bst) == sorted(set(values))
    assert len(bst) == len(set(values))


def test_find_min_max_and_contains():
    bst = BinarySearchTree(range(10))
    assert bst.find_min() == 0
    assert bst.find_max() == 9
    assert bst.find(5) == 5
    assert 7 in bst
    assert 10 not in bst
    with pytest.raises(KeyError):
        bst.find(10)


def test_advance_over_iteration():
    bst = BinarySearchTree()
    bst.update(range(10))
    it = iter(bst)
    for _ in range(5):
        next(it)
    assert next(it) == 5


def test_traversal_orders():
    bst = BinarySearchTree([5, 3, 8, 1, 4])
    assert bst.root() == 5
    assert list(bst.preorder()) == [5, 3, 1, 4, 8]
    assert list(bst.inorder()) == [1, 3, 4, 5, 8]
    assert list(bst.postorder()) == [1, 4, 3, 8, 5]
    assert list(bst.levelorder()) == [5, 3, 8, 1, 4]


def test_print_functions_write_with_delimiter():
    bst = BinarySearchTree([5, 3, 8])
    out = io.StringIO()
    bst.print_inorder(",", out)
    assert out.getvalue() == "3,5,8,"
    out = io.StringIO()
    bst.print_preorder(file=out)
    assert out.getvalue() == "5 3 8 "
    out = io.StringIO()
    bst.print_postorder("|", out)
    assert out.getvalue() == "3|8|5|"
    out = io.StringIO()
    bst.print_levelorder(" ", out)
    assert out.getvalue() == "5 3 8 "


def test_height_of_sorted_insert_is_size():
    n = 3000
    bst = BinarySearchTree(range(n))
    assert bst.height() == n
    assert len(bst) == n
    assert list(bst) == list(range(n))


def test_height_of_balanced_insert():
    bst = BinarySearchTree([4, 2, 6, 1, 3, 5, 7])
    assert bst.height() == 3


def test_erase_leaf_and_single_child():
    bst = BinarySearchTree([5, 3, 8, 1])
    bst.erase(1)
    assert list(bst) == [3, 5, 8]
    bst.insert(1)
    bst.erase(3)
    assert list(bst) == [1, 5, 8]
    assert len(bst) == 3


def test_erase_two_children_odd_size_uses_predecessor():
    bst = BinarySearchTree([5, 3, 8, 1, 4, 7, 9])
    bst.erase(5)
    assert bst.root() == 4
    assert list(bst) == [1, 3, 4, 7, 8, 9]


def test_erase_two_children_even_size_uses_successor():
    bst = BinarySearchTree([5, 3, 8, 1])
    bst.erase(5)
    assert bst.root() == 8
    assert list(bst) == [1, 3, 8]


def test_erase_missing_is_noop():
    bst = BinarySearchTree([2, 1, 3])
    bst.erase(42)
    assert list(bst) == [1, 2, 3]
    assert len(bst) == 3


def test_erase_everything_empties_tree():
    values = [50, 20, 70, 10, 30, 60, 80]
    bst = BinarySearchTree(values)
    remaining = sorted(values)
    for value in values:
        bst.erase(value)
        remaining.remove(value)
        assert list(bst) == remaining
        assert len(bst) == len(remaining)
    assert bst.empty()