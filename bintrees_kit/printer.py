"""ASCII rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from .node import BinaryTreeNode


def render(tree: BinaryTreeNode | None) -> str:
    """Return the drawing of a tree, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]

    def put(row: int, index: int, char: str) -> None:
        line = rows[row]
        if len(line) <= index:
            line.extend(" " * (index + 1 - len(line)))
        line[index] = char

    def layout(node: BinaryTreeNode | None, offset: int, depth: int) -> int:
        if node is None:
            return 0
        is_left = node.parent is not None and node.parent.left is node
        label = f"({node.value:03d})"
        width = len(label)
        left = layout(node.left, offset, depth + 1)
        right = layout(node.right, offset + left + width, depth + 1)
        for i, char in enumerate(label):
            put(depth, offset + left + i, char)
        if depth:
            if is_left:
                start, span = offset + left + width // 2, width + right
            else:
                start, span = offset - width // 2, left + width
            for i in range(span):
                put(depth - 1, start + i, "-")
            put(depth - 1, offset + left + width // 2, ".")
        return left + width + right

    layout(tree, 0, 0)
    lines = []
    for row in rows:
        text = "".join(row)
        keep = max(len(text.rstrip(" ")), 2)
        lines.append(text.ljust(keep)[:keep])
    return "".join(line + "\n" for line in lines)


def print_tree(tree: BinaryTreeNode | None, file: TextIO | None = None) -> None:
    """Write the drawing of a tree to a stream, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))