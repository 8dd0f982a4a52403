"""Binary tree nodes linked to their parent and children."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer value.

    Every node knows its parent, so a node is also a handle on the
    subtree rooted at it.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return max(
            (child.height() + 1 for child in (self.left, self.right) if child is not None),
            default=0,
        )

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def _children(self) -> Iterator[Node]:
        for child in (self.left, self.right):
            if child is not None:
                yield child

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return 1 + sum(child.size() for child in self._children())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        if self.is_leaf():
            return 1
        return sum(child.leaves() for child in self._children())

    def internal_nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(child.internal_nodes() for child in self._children())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree.

        A missing subtree counts as height 0, a leaf as height 1.
        """

        def levels(node: Optional[Node]) -> int:
            return 0 if node is None else node.height() + 1

        return levels(self.left) - levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        if self.is_leaf():
            return True
        if self.left is None or self.right is None:
            return False
        return self.left.is_full() and self.right.is_full()

    def is_perfect(self) -> bool:
        """Return True if the tree is full and all leaves share one depth."""
        return self._perfect_levels() is not None

    def _perfect_levels(self) -> Optional[int]:
        if self.is_leaf():
            return 1
        if self.left is None or self.right is None:
            return None
        left = self.left._perfect_levels()
        right = self.right._perfect_levels()
        if left is None or left != right:
            return None
        return left + 1

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()