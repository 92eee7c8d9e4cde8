"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from .node import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return count


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path (0 if empty)."""
    return max(_levels(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def inner_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right's, counted in levels."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _walk(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one depth."""
    if tree is None:
        return False
    leaf_depths = set()
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        if (node.left is None) != (node.right is None):
            return False
        if node.left is None:
            leaf_depths.add(depth)
        else:
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
    return len(leaf_depths) == 1