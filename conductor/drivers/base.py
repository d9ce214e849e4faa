"""Capability contract every device driver implements."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..hierarchy.models import DeviceInfo, Point, TreeNode


@runtime_checkable
class Driver(Protocol):
    """Blocking device control channel.

    Any call may block on device I/O and may raise on transport failure.
    The engine never retries these failures; they reach the caller as is.
    """

    def name(self) -> str: ...

    def open(self) -> None: ...

    def close(self) -> None: ...

    def device_info(self) -> DeviceInfo: ...

    def content_descriptor(self) -> TreeNode:
        """Capture a fresh snapshot of the current view hierarchy."""
        ...

    def tap(self, point: Point) -> None: ...

    def input_text(self, text: str) -> None: ...

    def scroll_vertical(self) -> None: ...

    def back_press(self) -> None: ...

    def launch_app(self, app_id: str) -> None: ...
