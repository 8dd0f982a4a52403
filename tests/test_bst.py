import pytest

from treekit.bst import BinarySearchTree, is_bst
from treekit.tree import Node

VALUES = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98]


def _check_links(node):
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            _check_links(child)


def test_is_bst_valid_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    assert is_bst(root) is True


def test_is_bst_deep_violation():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(100, root.left)
    assert is_bst(root) is False


def test_is_bst_rejects_duplicates():
    root = Node(10)
    root.left = Node(10, root)
    assert is_bst(root) is False


def test_is_bst_none_is_false():
    assert is_bst(None) is False


def test_from_iterable_sorted_and_valid():
    tree = BinarySearchTree.from_iterable(VALUES)
    assert list(tree) == sorted(VALUES)
    assert is_bst(tree.root)
    assert tree.root.value == VALUES[0]
    assert len(tree) == len(VALUES)
    _check_links(tree.root)


def test_insert_duplicate_returns_none():
    tree = BinarySearchTree.from_iterable(VALUES)
    assert tree.insert(VALUES[3]) is None
    assert len(tree) == len(VALUES)


def test_from_iterable_skips_duplicates():
    tree = BinarySearchTree.from_iterable([5, 3, 5, 3, 8])
    assert list(tree) == [3, 5, 8]


def test_insert_returns_new_node_with_parent():
    tree = BinarySearchTree()
    root = tree.insert(50)
    assert tree.root is root
    node = tree.insert(30)
    assert node.value == 30
    assert node.parent is root
    assert root.left is node


def test_search():
    tree = BinarySearchTree.from_iterable(VALUES)
    node = tree.search(34)
    assert node is not None and node.value == 34
    assert tree.search(35) is None
    assert BinarySearchTree().search(1) is None
    assert 84 in tree
    assert 85 not in tree


@pytest.mark.parametrize("value", VALUES)
def test_remove_each_value(value):
    tree = BinarySearchTree.from_iterable(VALUES)
    assert tree.remove(value) is True
    expected = sorted(v for v in VALUES if v != value)
    assert list(tree) == expected
    assert is_bst(tree.root)
    assert tree.root.parent is None
    _check_links(tree.root)


def test_remove_two_children_uses_successor():
    tree = BinarySearchTree.from_iterable(VALUES)
    root = tree.root
    tree.remove(VALUES[0])
    assert tree.root is root
    assert root.value == min(v for v in VALUES if v > VALUES[0])


def test_remove_absent_value():
    tree = BinarySearchTree.from_iterable(VALUES)
    assert tree.remove(1000) is False
    assert list(tree) == sorted(VALUES)


def test_remove_only_node_empties_tree():
    tree = BinarySearchTree.from_iterable([7])
    assert tree.remove(7) is True
    assert tree.root is None
    assert len(tree) == 0
    assert list(tree) == []


def test_remove_all_values():
    tree = BinarySearchTree.from_iterable(VALUES)
    for value in VALUES:
        assert tree.remove(value)
    assert tree.root is None