"""Ancestor queries across binary tree nodes."""

from __future__ import annotations

from typing import Iterator, Optional

from .node import Node


def _lineage(node: Optional[Node]) -> Iterator[Node]:
    """Yield the node itself, then each ancestor up to the root."""
    while node is not None:
        yield node
        node = node.parent


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes.

    A node counts as its own ancestor. Returns None if either node is
    missing or the two nodes do not share a tree.
    """
    if first is None or second is None:
        return None
    seen = {id(node) for node in _lineage(first)}
    return next((node for node in _lineage(second) if id(node) in seen), None)