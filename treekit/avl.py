"""Self-balancing AVL trees built on binary search trees."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from treekit.analysis import rotate_left, rotate_right
from treekit.bst import BinarySearchTree, is_bst
from treekit.tree import Node


def _balanced(node: Optional[Node]) -> bool:
    if node is None:
        return True
    if abs(node.balance()) > 1:
        return False
    return _balanced(node.left) and _balanced(node.right)


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a valid AVL tree.

    The tree must be a binary search tree without duplicates in which the
    heights of the two subtrees of every node differ by at most one.
    An empty tree is not an AVL tree.
    """
    if tree is None:
        return False
    return is_bst(tree) and _balanced(tree)


class AVLTree(BinarySearchTree):
    """A binary search tree kept height-balanced after every change."""

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> AVLTree:
        """Build a tree by inserting the values in order, skipping duplicates."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    @classmethod
    def from_sorted(cls, values: Sequence[int]) -> AVLTree:
        """Build a balanced tree from sorted values without any rotation.

        The middle value of each range becomes the root of its subtree.
        """

        def build(parent: Optional[Node], begin: int, last: int) -> Optional[Node]:
            if begin > last:
                return None
            mid = (begin + last) // 2
            node = Node(values[mid], parent)
            node.left = build(node, begin, mid - 1)
            node.right = build(node, mid + 1, last)
            return node

        return cls(build(None, 0, len(values) - 1))

    def insert(self, value: int) -> Optional[Node]:
        """Insert the value and return its new node, or None if already present."""
        node = super().insert(value)
        if node is not None:
            self._retrace(node.parent)
        return node

    def remove(self, value: int) -> bool:
        """Remove the value and rebalance; return True if it was present."""
        node = self.search(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        parent = node.parent
        child = node.left if node.left is not None else node.right
        self._replace(node, child)
        self._retrace(parent)
        return True

    def _retrace(self, node: Optional[Node]) -> None:
        while node is not None:
            node = self._rebalance(node)
            node = node.parent

    def _rebalance(self, node: Node) -> Node:
        factor = node.balance()
        if factor > 1 and node.left is not None:
            if node.left.balance() < 0:
                rotate_left(node.left)
            node = rotate_right(node) or node
        elif factor < -1 and node.right is not None:
            if node.right.balance() > 0:
                rotate_right(node.right)
            node = rotate_left(node) or node
        if node.parent is None:
            self.root = node
        return node