"""Whole-tree queries and rotations on binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from treekit.tree import Node


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that has both nodes in its subtree, or None.

    A node counts as its own ancestor. None is returned when either node
    is None or when the two nodes do not belong to the same tree.
    """
    if first is None or second is None:
        return None
    ancestors = set()
    node: Optional[Node] = first
    while node is not None:
        ancestors.add(id(node))
        node = node.parent
    node = second
    while node is not None:
        if id(node) in ancestors:
            return node
        node = node.parent
    return None


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of the tree level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except the last, filled from the left.

    An empty tree is not complete.
    """
    if tree is None:
        return False
    queue = deque([tree])
    seen_gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                seen_gap = True
            elif seen_gap:
                return False
            else:
                queue.append(child)
    return True


def _relink(old: Node, new: Node) -> None:
    """Put new in the place old held under old's parent."""
    parent = old.parent
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        elif parent.right is old:
            parent.right = new
    old.parent = new


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the subtree left and return its new root.

    Returns None, leaving the tree untouched, when there is no tree or
    no right child to rotate up.
    """
    if tree is None or tree.right is None:
        return None
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    _relink(tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the subtree right and return its new root.

    Returns None, leaving the tree untouched, when there is no tree or
    no left child to rotate up.
    """
    if tree is None or tree.left is None:
        return None
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    _relink(tree, pivot)
    return pivot