"""Text drawing of a binary tree."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.tree import Node


def _put(row: list[str], start: int, text: str) -> None:
    for index, char in enumerate(text, start):
        if index < 0:
            continue
        if index >= len(row):
            row.extend(" " * (index + 1 - len(row)))
        row[index] = char


def _layout(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    label = f"({node.value:03d})"
    width = len(label)
    is_left = node.parent is not None and node.parent.left is node
    left = _layout(node.left, offset, depth + 1, rows)
    right = _layout(node.right, offset + left + width, depth + 1, rows)
    _put(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        mid = offset + left + width // 2
        if is_left:
            _put(above, mid, "-" * (width + right))
        else:
            _put(above, offset - width // 2, "-" * (left + width))
        _put(above, mid, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, one line per level, without a final newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        full = "".join(row).ljust(2)
        stripped = full.rstrip(" ")
        lines.append(stripped if len(stripped) >= 2 else full[:2])
    return "\n".join(lines)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to a stream, standard output by default."""
    if tree is None:
        return
    out = sys.stdout if file is None else file
    print(render(tree), file=out)