"""Text rendering of a binary tree as aligned rows of labelled nodes."""

from __future__ import annotations

import sys
from typing import Optional

from bintree.node import BinaryTreeNode

_MIN_LINE = 2


def _edge_height(tree: BinaryTreeNode) -> int:
    left = 1 + _edge_height(tree.left) if tree.left is not None else 0
    right = 1 + _edge_height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _place(row: list[str], index: int, char: str) -> None:
    if index < 0:
        return
    if index >= len(row):
        row.extend(" " * (index + 1 - len(row)))
    row[index] = char


def _draw(
    tree: Optional[BinaryTreeNode], offset: int, depth: int, rows: list[list[str]]
) -> int:
    """Draw a subtree into rows and return the width it occupies."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, rows)
    right = _draw(tree.right, offset + left + width, depth + 1, rows)

    for i, char in enumerate(label):
        _place(rows[depth], offset + left + i, char)

    if depth:
        above = rows[depth - 1]
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for i in range(count):
            _place(above, start + i, "-")
        _place(above, offset + left + width // 2, ".")

    return left + width + right


def render(tree: Optional[BinaryTreeNode]) -> str:
    """Return the tree drawn as text, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_edge_height(tree) + 1)]
    _draw(tree, 0, 0, rows)
    lines = ("".join(row).rstrip(" ").ljust(_MIN_LINE) for row in rows)
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Optional[BinaryTreeNode]) -> None:
    """Write the rendered tree to standard output."""
    sys.stdout.write(render(tree))