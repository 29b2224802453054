"""Binary trees of integer keys and simple measurements on them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Node", "height", "maximum", "nodes_at_distance", "size"]


@dataclass
class Node:
    """A binary tree node holding an integer key."""

    key: int
    left: Node | None = None
    right: Node | None = None


def _walk(root: Node | None) -> Iterator[tuple[Node, int]]:
    """Yield ``(node, depth)`` pairs in pre-order, left before right."""
    pending: list[tuple[Node, int]] = [(root, 0)] if root is not None else []
    while pending:
        node, depth = pending.pop()
        yield node, depth
        if node.right is not None:
            pending.append((node.right, depth + 1))
        if node.left is not None:
            pending.append((node.left, depth + 1))


def height(root: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    return max((depth + 1 for _, depth in _walk(root)), default=0)


def maximum(root: Node | None) -> int:
    """Return the largest key in the tree."""
    if root is None:
        raise ValueError("maximum() of an empty tree")
    return max(node.key for node, _ in _walk(root))


def nodes_at_distance(root: Node | None, k: int) -> list[int]:
    """Return the keys of the nodes ``k`` edges below ``root``, from left to right."""
    return [node.key for node, depth in _walk(root) if depth == k]


def size(root: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(root))