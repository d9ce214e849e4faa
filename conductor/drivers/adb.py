"""Android driver backed by ``adb`` shell commands and ``uiautomator dump``."""

from __future__ import annotations

import re
import shlex

from ..core.logger import log
from ..hierarchy.models import DeviceInfo, Point, TreeNode
from .device import ADBError, Device
from .uiautomator import parse_hierarchy

KEYCODE_BACK = 4


class AdbDriver:
    """``Driver`` implementation for a single Android device or emulator."""

    def __init__(self, device: Device, *, dump_path: str = "/sdcard/window_dump.xml") -> None:
        self.device = device
        self.dump_path = dump_path
        self._screen_size: tuple[int, int] | None = None

    def name(self) -> str:
        return f"Android Device ({self.device.serial})"

    def open(self) -> None:
        """Check the device is online."""
        state = self.device.get_state()
        if state != "device":
            raise ADBError(f"Device {self.device.serial} is not online. State: {state}")
        log.info(f"Connected to {self.name()}")

    def close(self) -> None:
        log.info(f"Closed {self.name()}")

    def device_info(self) -> DeviceInfo:
        model = self.device.shell("getprop ro.product.model").strip()
        os_version = self.device.shell("getprop ro.build.version.release").strip()
        width, height = self._get_screen_size()
        return DeviceInfo(
            platform="android",
            serial=self.device.serial,
            model=model,
            os_version=os_version,
            width_pixels=width,
            height_pixels=height,
        )

    def content_descriptor(self) -> TreeNode:
        path = shlex.quote(self.dump_path)
        self.device.shell(f"uiautomator dump {path}")
        return parse_hierarchy(self.device.shell(f"cat {path}"))

    def tap(self, point: Point) -> None:
        self.device.shell(f"input tap {point.x} {point.y}")

    def input_text(self, text: str) -> None:
        # `input text` treats a literal space as an argument separator
        escaped_text = text.replace(" ", "%s")
        self.device.shell(f"input text {shlex.quote(escaped_text)}")

    def scroll_vertical(self) -> None:
        width, height = self._get_screen_size()
        x = width // 2
        self.device.shell(f"input swipe {x} {height * 7 // 10} {x} {height * 3 // 10} 400")

    def back_press(self) -> None:
        self.device.shell(f"input keyevent {KEYCODE_BACK}")

    def launch_app(self, app_id: str) -> None:
        self.device.shell(f"monkey -p {shlex.quote(app_id)} -c android.intent.category.LAUNCHER 1")

    def _get_screen_size(self) -> tuple[int, int]:
        if self._screen_size is None:
            self._screen_size = parse_screen_size(self.device.shell("wm size"))
        return self._screen_size


def parse_screen_size(screen_info: str) -> tuple[int, int]:
    """Parse ``wm size`` output, preferring an override size when present.

    Raises:
        ADBError: If no size can be found.
    """
    for label in ("Override size", "Physical size"):
        match = re.search(rf"{label}:\s*(\d+)x(\d+)", screen_info)
        if match:
            return int(match.group(1)), int(match.group(2))
    raise ADBError(f"Unexpected 'wm size' output: {screen_info.strip()!r}")
