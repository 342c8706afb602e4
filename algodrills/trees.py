"""Binary tree nodes and a vertical-order listing of their values."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def vertical_order(root: Optional[Node]) -> list[list[Any]]:
    """Group values by column, left to right; each column lists children before parents."""
    if root is None:
        return []
    columns: dict[int, list[Any]] = defaultdict(list)
    # Post-order walk: left subtree, right subtree, then the node itself.
    stack: list[tuple[Node, int, bool]] = [(root, 0, False)]
    while stack:
        node, column, expanded = stack.pop()
        if expanded:
            columns[column].append(node.data)
            continue
        stack.append((node, column, True))
        if node.right is not None:
            stack.append((node.right, column + 1, False))
        if node.left is not None:
            stack.append((node.left, column - 1, False))
    return [columns[column] for column in sorted(columns)]