"""Linked binary trees, search trees, AVL trees, max heaps and an ASCII printer."""

__version__ = "0.1.0"
__all__ = ["analysis", "avl", "bst", "heap", "printer", "tree"]