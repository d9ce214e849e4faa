"""Device drivers.

``Driver`` is the capability contract the engine is written against;
``AdbDriver`` is the bundled Android implementation.
"""

from .adb import AdbDriver
from .base import Driver
from .device import ADBError, Device

__all__ = [
    "ADBError",
    "AdbDriver",
    "Device",
    "Driver",
]
