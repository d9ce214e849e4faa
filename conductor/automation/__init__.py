"""Synchronization primitives that drive a device through a ``Driver``.

This sub-package provides:
- Settle detection after actions
- Timeout-bounded element lookup
- Tap execution with retry on no visible change
"""

from .locator import ElementLocator, LookupResult
from .settle import SettleDetector
from .tap_executor import TapExecutor, TapResult

__all__ = [
    "ElementLocator",
    "LookupResult",
    "SettleDetector",
    "TapExecutor",
    "TapResult",
]
