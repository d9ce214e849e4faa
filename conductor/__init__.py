"""conductor: UI synchronization engine for mobile app automation.

Drives an application through a ``Driver`` when the only signal of UI state
is a periodically captured view hierarchy: actions wait for the UI to settle,
lookups poll until a match or timeout, and taps are retried when nothing on
screen changes.
"""

from .core import Conductor, ConductorException, Config, ElementNotFound, PredicateError, config
from .drivers import ADBError, AdbDriver, Device, Driver
from .hierarchy import Bounds, DeviceInfo, Point, TreeNode, UiElement

__version__ = "0.1.0"

__all__ = [
    "ADBError",
    "AdbDriver",
    "Bounds",
    "Conductor",
    "ConductorException",
    "Config",
    "Device",
    "DeviceInfo",
    "Driver",
    "ElementNotFound",
    "Point",
    "PredicateError",
    "TreeNode",
    "UiElement",
    "config",
]
