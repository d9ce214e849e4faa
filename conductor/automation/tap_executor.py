"""Tap execution with retry when the UI shows no reaction."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from ..core.logger import log
from ..drivers.base import Driver
from ..hierarchy.models import Point, UiElement
from ..hierarchy.view_utils import is_visible
from .settle import SettleDetector


@dataclass(frozen=True)
class TapResult:
    """What a tap request ended up doing."""

    point: Point
    taps: int
    changed: bool


class TapExecutor:
    """Taps a point and checks the hierarchy changed as a result.

    Input events on real devices are occasionally dropped, so a tap whose
    before and after snapshots are identical is repeated. A tap that never
    produces a visible change is not an error; it is only logged.
    """

    def __init__(
        self,
        driver: Driver,
        settle: SettleDetector,
        *,
        attempts: int = 3,
        visibility_attempts: int = 10,
        visibility_interval_ms: int = 1000,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.driver = driver
        self.settle = settle
        self.attempts = attempts
        self.visibility_attempts = visibility_attempts
        self.visibility_interval_ms = visibility_interval_ms
        self._sleep = sleep

    def tap_element(self, element: UiElement, retry_if_no_change: bool = True) -> TapResult:
        """Wait for ``element`` to be visible, then tap its center."""
        log.info(f"Tapping on element: {element}")

        self.wait_until_visible(element)

        center = element.center()
        return self.tap_point(center.x, center.y, retry_if_no_change)

    def tap_point(self, x: int, y: int, retry_if_no_change: bool = True) -> TapResult:
        """Tap ``(x, y)``, repeating while the hierarchy stays unchanged.

        With ``retry_if_no_change`` a first cycle of ``attempts`` taps is
        followed, if nothing changed, by one last single-tap cycle against a
        freshly captured baseline. Without it exactly one tap is issued.
        """
        log.info(f"Tapping at ({x}, {y})")
        point = Point(x, y)

        taps, changed = self._tap_cycle(point, self.attempts if retry_if_no_change else 1)

        if not changed and retry_if_no_change:
            log.info("Attempting to tap again since there was no change in the UI")
            extra, changed = self._tap_cycle(point, 1)
            taps += extra

        if not changed:
            log.warning(f"Tap at ({x}, {y}) produced no visible change after {taps} attempt(s)")

        return TapResult(point=point, taps=taps, changed=changed)

    def wait_until_visible(self, element: UiElement) -> bool:
        """Poll the current hierarchy until ``element`` is visible.

        Returns:
            ``False`` if the element never became visible; the caller
            proceeds regardless.
        """
        for attempt in range(self.visibility_attempts):
            if is_visible(self.driver.content_descriptor(), element.tree_node):
                log.info("Element became visible.")
                return True

            log.info("Element is not visible yet. Waiting.")
            if attempt < self.visibility_attempts - 1:
                self._sleep(self.visibility_interval_ms / 1000)

        log.warning(f"Element did not become visible after {self.visibility_attempts} checks")
        return False

    def _tap_cycle(self, point: Point, attempts: int) -> tuple[int, bool]:
        hierarchy_before_tap = self.driver.content_descriptor()

        for attempt in range(1, attempts + 1):
            self.driver.tap(point)
            self.settle.wait_for_settle()

            hierarchy_after_tap = self.driver.content_descriptor()
            if hierarchy_after_tap != hierarchy_before_tap:
                log.success("Something has changed in the UI. Proceed.")
                return attempt, True

            log.info("Nothing changed in the UI.")

        return attempts, False
