"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from treekit.tree import Node


class _Canvas:
    """Rows of characters that grow on demand."""

    def __init__(self, rows: int) -> None:
        self._rows: List[List[str]] = [[] for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        line = self._rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def write(self, row: int, column: int, text: str) -> None:
        for offset, char in enumerate(text):
            self.put(row, column + offset, char)

    def lines(self) -> List[str]:
        return ["".join(line).rstrip() for line in self._rows]


def _draw(node: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, depth + 1, canvas)
    right = _draw(node.right, offset + left + width, depth + 1, canvas)
    canvas.write(depth, offset + left, label)
    if depth:
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        canvas.write(depth - 1, start, "-" * length)
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    canvas = _Canvas(tree.height() + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))