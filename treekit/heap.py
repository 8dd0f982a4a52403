"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from treekit.analysis import is_complete, levelorder
from treekit.tree import Node


def _ordered(node: Optional[Node]) -> bool:
    if node is None:
        return True
    for child in (node.left, node.right):
        if child is not None and child.value > node.value:
            return False
    return _ordered(node.left) and _ordered(node.right)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is a valid max binary heap.

    The tree must be complete and no child may hold a value greater than
    its parent. An empty tree is not a heap.
    """
    if tree is None:
        return False
    return is_complete(tree) and _ordered(tree)


class MaxHeap:
    """A max binary heap kept as a complete binary tree of nodes."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> MaxHeap:
        """Build a heap by inserting the values in order."""
        heap = cls()
        for value in values:
            heap.insert(value)
        return heap

    def __len__(self) -> int:
        return 0 if self.root is None else self.root.size()

    def __iter__(self) -> Iterator[int]:
        """Yield the values level by level, left to right."""
        return levelorder(self.root)

    def insert(self, value: int) -> Node:
        """Insert the value and return the node that ends up holding it."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        # The binary form of the 1-based position, past its leading 1,
        # spells the path from the root: 0 is left, 1 is right.
        path = bin(self.root.size() + 1)[3:]
        parent = self.root
        for step in path[:-1]:
            child = parent.right if step == "1" else parent.left
            assert child is not None
            parent = child
        node = Node(value, parent)
        if path[-1] == "1":
            parent.right = node
        else:
            parent.left = node
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node