"""Detection of a settled (no longer animating) UI."""

from __future__ import annotations

import time
from typing import Callable

from ..core.logger import log
from ..drivers.base import Driver


class SettleDetector:
    """Polls the view hierarchy until two consecutive samples are equal.

    Settling is best effort: when the sample budget runs out the detector
    returns anyway, so a UI that never stops animating (a spinner, a video)
    does not block the caller.
    """

    def __init__(
        self,
        driver: Driver,
        *,
        grace_ms: int = 1000,
        interval_ms: int = 200,
        max_samples: int = 10,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.driver = driver
        self.grace_ms = grace_ms
        self.interval_ms = interval_ms
        self.max_samples = max_samples
        self._sleep = sleep

    def wait_for_settle(self) -> bool:
        """Block until the UI stops changing or the sample budget is spent.

        Returns:
            ``True`` if two consecutive samples were equal, ``False`` if the
            budget was exhausted first.
        """
        # Time buffer for any visual effects and transitions that might occur between actions.
        self._sleep(self.grace_ms / 1000)

        previous = self.driver.content_descriptor()
        for sample in range(1, self.max_samples + 1):
            current = self.driver.content_descriptor()
            if current == previous:
                log.debug(f"UI settled after {sample} sample(s)")
                return True

            previous = current
            if sample < self.max_samples:
                self._sleep(self.interval_ms / 1000)

        log.debug(f"UI still changing after {self.max_samples} samples, proceeding anyway")
        return False
