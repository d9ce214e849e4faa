"""Depth-first search over view hierarchy snapshots."""

from __future__ import annotations

from typing import Callable, List, Optional

from .models import TreeNode

Predicate = Callable[[TreeNode], bool]

__all__ = ["Predicate", "find_all", "find_first"]


def find_first(root: TreeNode, predicate: Predicate) -> Optional[TreeNode]:
    """Return the first node matching ``predicate`` in pre-order, or ``None``.

    A parent is tested before its children, so the shallowest left-most
    match wins.
    """
    if predicate(root):
        return root

    for child in root.children:
        found = find_first(child, predicate)
        if found is not None:
            return found

    return None


def find_all(root: TreeNode, predicate: Predicate) -> List[TreeNode]:
    """Return every node matching ``predicate`` in pre-order.

    Children of a matching node are still visited.
    """
    result: List[TreeNode] = []

    if predicate(root):
        result.append(root)

    for child in root.children:
        result.extend(find_all(child, predicate))

    return result
