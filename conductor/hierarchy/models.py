"""Data models for captured view hierarchies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import ConductorException


@dataclass(frozen=True, slots=True)
class Point:
    """Screen coordinate in pixels."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned rectangle (left, top, right, bottom) in pixel coordinates."""

    left: int
    top: int
    right: int
    bottom: int

    def width(self) -> int:
        """Width in pixels."""
        return self.right - self.left

    def height(self) -> int:
        """Height in pixels."""
        return self.bottom - self.top

    def center(self) -> Point:
        """Center of the rectangle, rounded down to whole pixels."""
        return Point((self.left + self.right) // 2, (self.top + self.bottom) // 2)

    def intersects(self, other: Bounds) -> bool:
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


@dataclass(frozen=True, slots=True)
class TreeNode:
    """One node of a view hierarchy snapshot.

    Nodes are immutable and compare structurally: two snapshots are equal
    when id, text, bounds and the ordered children all match recursively.
    """

    id: Optional[str] = None
    text: Optional[str] = None
    bounds: Optional[Bounds] = None
    children: tuple[TreeNode, ...] = ()


@dataclass(frozen=True, slots=True)
class UiElement:
    """A located node together with the bounds used to interact with it."""

    tree_node: TreeNode
    bounds: Bounds

    def center(self) -> Point:
        return self.bounds.center()

    @classmethod
    def from_tree_node(cls, node: TreeNode) -> UiElement:
        """Wrap ``node``; nodes without bounds cannot be interacted with."""
        if node.bounds is None:
            raise ConductorException(f"Node has no bounds: {node}")
        return cls(tree_node=node, bounds=node.bounds)


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """Basic description of the device behind a driver."""

    platform: str
    serial: str
    model: str = ""
    os_version: str = ""
    width_pixels: int = 0
    height_pixels: int = 0
