"""Completeness and max-heap checks on binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .measure import size
from .node import Node


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled, the last one from the left."""
    if tree is None:
        return False
    count = size(tree)
    queue = deque([(tree, 0)])
    while queue:
        node, index = queue.popleft()
        if index >= count:
            return False
        if node.left is not None:
            queue.append((node.left, 2 * index + 1))
        if node.right is not None:
            queue.append((node.right, 2 * index + 2))
    return True


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and no child exceeds its parent."""
    if not is_complete(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.value > node.value:
                return False
            stack.append(child)
    return True