"""Text rendering of binary trees as connected boxes of values."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .node import Node


def _put(row: list[str], index: int, char: str) -> None:
    if index < 0:
        return
    if index >= len(row):
        row.extend(" " * (index + 1 - len(row)))
    row[index] = char


def _place(
    node: Node, offset: int, depth: int, rows: list[list[str]], is_left: bool
) -> int:
    """Draw the subtree at ``offset`` on row ``depth``; return its width."""
    label = f"({node.value:03d})"
    width = len(label)
    left = _place(node.left, offset, depth + 1, rows, True) if node.left else 0
    right = (
        _place(node.right, offset + left + width, depth + 1, rows, False)
        if node.right
        else 0
    )
    row = rows[depth]
    for i, char in enumerate(label):
        _put(row, offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        for i in range(length):
            _put(above, start + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _edges(tree: Node) -> int:
    depth = 0
    level = [tree]
    while True:
        level = [c for n in level for c in (n.left, n.right) if c is not None]
        if not level:
            return depth
        depth += 1


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one newline-terminated line per level."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_edges(tree) + 1)]
    _place(tree, 0, 0, rows, False)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))