"""View hierarchy snapshots and the utilities that search them."""

from .models import Bounds, DeviceInfo, Point, TreeNode, UiElement
from .search import Predicate, find_all, find_first

__all__ = [
    "Bounds",
    "DeviceInfo",
    "Point",
    "Predicate",
    "TreeNode",
    "UiElement",
    "find_all",
    "find_first",
]
