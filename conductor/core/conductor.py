"""The ``Conductor`` facade used by test scripts."""

from __future__ import annotations

import re
import time
from typing import Callable, List, Optional, Union

from ..automation.locator import ElementLocator
from ..automation.settle import SettleDetector
from ..automation.tap_executor import TapExecutor, TapResult
from ..drivers.adb import AdbDriver
from ..drivers.base import Driver
from ..drivers.device import Device
from ..hierarchy import predicates
from ..hierarchy.models import DeviceInfo, Point, TreeNode, UiElement
from ..hierarchy.search import Predicate
from .config import Config
from .config import config as default_config
from .exceptions import ElementNotFound
from .logger import log


class Conductor:
    """Drives one device session through a ``Driver``.

    Every action waits for the UI to settle before returning, and element
    lookups keep re-sampling the hierarchy until a match or a timeout.
    An instance owns its driver and is not safe to share between threads.
    """

    def __init__(
        self,
        driver: Driver,
        config: Optional[Config] = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.driver = driver
        self.config = config or default_config
        self.config.validate_config()
        self._closed = False

        self.settle = SettleDetector(
            driver,
            grace_ms=self.config.settle_grace_ms,
            interval_ms=self.config.settle_interval_ms,
            max_samples=self.config.settle_max_samples,
            sleep=sleep,
        )
        self.locator = ElementLocator(driver, clock=clock)
        self.tap_executor = TapExecutor(
            driver,
            self.settle,
            attempts=self.config.tap_attempts,
            visibility_attempts=self.config.visibility_attempts,
            visibility_interval_ms=self.config.visibility_interval_ms,
            sleep=sleep,
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def android(cls, serial: Optional[str] = None, config: Optional[Config] = None) -> Conductor:
        """Open an adb driver for ``serial`` (or the first emulator)."""
        cfg = config or default_config
        serial = serial or cfg.android_device_id
        if serial:
            device = Device(serial, adb_path=cfg.adb_path, timeout=cfg.adb_command_timeout_s)
        else:
            device = Device.from_emulator(adb_path=cfg.adb_path, timeout=cfg.adb_command_timeout_s)

        driver = AdbDriver(device, dump_path=cfg.hierarchy_dump_path)
        driver.open()
        return cls(driver, cfg)

    # ------------------------------------------------------------------
    # Device
    # ------------------------------------------------------------------
    def device_name(self) -> str:
        return self.driver.name()

    def device_info(self) -> DeviceInfo:
        log.info("Getting device info")

        return self.driver.device_info()

    def view_hierarchy(self) -> TreeNode:
        """Capture the current hierarchy without waiting for it to settle."""
        return self.driver.content_descriptor()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def launch_app(self, app_id: str) -> None:
        log.log_action("launch app", {"app_id": app_id})

        self.driver.launch_app(app_id)
        self.settle.wait_for_settle()

    def back_press(self) -> None:
        log.log_action("press back")

        self.driver.back_press()
        self.settle.wait_for_settle()

    def scroll_vertical(self) -> None:
        log.log_action("scroll vertically")

        self.driver.scroll_vertical()
        self.settle.wait_for_settle()

    def input_text(self, text: str) -> None:
        log.log_action("input text", {"length": len(text)})

        self.driver.input_text(text)
        self.settle.wait_for_settle()

    def tap(
        self,
        target: Union[UiElement, TreeNode, Point, tuple[int, int], int],
        y: Optional[int] = None,
        *,
        retry_if_no_change: bool = True,
    ) -> TapResult:
        """Tap an element, a tree node, a point, an ``(x, y)`` tuple or ``x, y``."""
        if isinstance(target, UiElement):
            return self.tap_element(target, retry_if_no_change)
        if isinstance(target, TreeNode):
            return self.tap_element(UiElement.from_tree_node(target), retry_if_no_change)
        if isinstance(target, Point):
            return self.tap_point(target.x, target.y, retry_if_no_change)
        if isinstance(target, tuple):
            x, y = target
            return self.tap_point(x, y, retry_if_no_change)
        if y is None:
            raise TypeError("tap(x, y) requires both coordinates")
        return self.tap_point(target, y, retry_if_no_change)

    def tap_element(self, element: UiElement, retry_if_no_change: bool = True) -> TapResult:
        return self.tap_executor.tap_element(element, retry_if_no_change)

    def tap_point(self, x: int, y: int, retry_if_no_change: bool = True) -> TapResult:
        return self.tap_executor.tap_point(x, y, retry_if_no_change)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def find_element_by_text(self, text: str, timeout_ms: int) -> UiElement:
        log.info(f"Looking for element by text: {text} (timeout {timeout_ms})")

        return self._find_or_raise(predicates.text_matches(text), timeout_ms, f"No element with text: {text}")

    def find_element_by_regexp(self, pattern: Union[str, re.Pattern], timeout_ms: int) -> UiElement:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        log.info(f"Looking for element by regex: {regex.pattern} (timeout {timeout_ms})")

        return self._find_or_raise(
            predicates.text_matches_regex(regex),
            timeout_ms,
            f"No element that matches regex: {regex.pattern}",
        )

    def find_element_by_id_regex(self, pattern: Union[str, re.Pattern], timeout_ms: int) -> UiElement:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        log.info(f"Looking for element by id regex: {regex.pattern} (timeout {timeout_ms})")

        return self._find_or_raise(
            predicates.id_matches(regex),
            timeout_ms,
            f"No element has id that matches regex {regex.pattern}",
        )

    def find_element_by_size(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        tolerance: Optional[int] = None,
        timeout_ms: Optional[int] = None,
    ) -> Optional[UiElement]:
        """Like the other lookups, but returns ``None`` instead of raising."""
        timeout_ms = self.config.default_timeout_ms if timeout_ms is None else timeout_ms
        log.info(f"Looking for element by size: {width} x {height} (tolerance {tolerance}) (timeout {timeout_ms})")

        return self.find_element_with_timeout(timeout_ms, predicates.size_matches(width, height, tolerance))

    def find_element_with_timeout(self, timeout_ms: int, predicate: Predicate) -> Optional[UiElement]:
        return self.locator.find_with_timeout(predicate, timeout_ms).element

    def all_elements_matching(self, predicate: Predicate) -> List[TreeNode]:
        return self.locator.all_matching(predicate)

    def _find_or_raise(self, predicate: Predicate, timeout_ms: int, message: str) -> UiElement:
        result = self.locator.find_with_timeout(predicate, timeout_ms)
        if result.element is None:
            log.warning(f"{message} (searched {result.attempts} snapshot(s))")
            raise ElementNotFound(message, result.hierarchy)

        log.info(f"Found element at {result.element.center()}")
        return result.element

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.driver.close()

    def __enter__(self) -> Conductor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
