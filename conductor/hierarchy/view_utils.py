"""Helpers for reasoning about nodes inside a snapshot."""

from __future__ import annotations

from .models import TreeNode
from .predicates import same_element
from .search import find_first


def is_visible(root: TreeNode, node: TreeNode) -> bool:
    """Return ``True`` when ``node`` is currently on screen.

    The node must still exist in ``root`` with the same id, text and bounds
    (its children may have changed), have a non-empty area and overlap the
    root's bounds.
    """
    current = find_first(root, same_element(node))
    if current is None or current.bounds is None:
        return False

    bounds = current.bounds
    if bounds.width() <= 0 or bounds.height() <= 0:
        return False

    if root.bounds is not None and not bounds.intersects(root.bounds):
        return False

    return True
