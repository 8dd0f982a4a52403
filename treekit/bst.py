"""Binary search trees with distinct integer values."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Iterator, Optional

from treekit.tree import Node


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree without duplicates.

    An empty tree is not a binary search tree.
    """
    if tree is None:
        return False
    return all(a < b for a, b in pairwise(tree.inorder()))


class BinarySearchTree:
    """A binary search tree that ignores values it already holds."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> BinarySearchTree:
        """Build a tree by inserting the values in order, skipping duplicates."""
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def __iter__(self) -> Iterator[int]:
        if self.root is not None:
            yield from self.root.inorder()

    def __len__(self) -> int:
        return 0 if self.root is None else self.root.size()

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> Optional[Node]:
        """Insert the value and return its new node, or None if already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding the value, or None."""
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def remove(self, value: int) -> bool:
        """Remove the value; return True if it was present.

        A node with two children takes the value of its in-order
        successor, which is then removed from the right subtree.
        """
        node = self.search(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        self._replace(node, child)
        return True

    def _replace(self, node: Node, child: Optional[Node]) -> None:
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None