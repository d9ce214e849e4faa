from __future__ import annotations

import subprocess
from typing import Optional


class ADBError(RuntimeError):
    """Raised when an ADB command fails or cannot be run."""


class Device:
    """Lightweight wrapper around `adb` for talking to a single Android device.

    Only a running ``adb`` binary is required; every call shells out through
    ``subprocess`` and blocks until the command returns.
    """

    def __init__(self, serial: str, *, adb_path: str = "adb", timeout: Optional[float] = None):
        self.serial = serial
        self.adb_path = adb_path
        self.timeout = timeout

    # ---------------------------------------------------------------------
    # Factory helpers
    # ---------------------------------------------------------------------
    @classmethod
    def list_devices(cls, adb_path: str = "adb") -> list[str]:
        """Return a list of connected device/emulator serial numbers."""
        output = _run([adb_path, "devices"], timeout=None)
        lines = output.strip().splitlines()[1:]  # Skip the header
        serials: list[str] = []
        for line in lines:
            if not line.strip():
                continue
            parts = line.split("\t")
            if len(parts) >= 2 and parts[1] == "device":
                serials.append(parts[0])
        return serials

    @classmethod
    def from_emulator(cls, *, adb_path: str = "adb", timeout: Optional[float] = None) -> Device:
        """Return a ``Device`` pointing at the first running emulator.

        Raises:
            ADBError: If no emulator device is detected.

        """
        serials = cls.list_devices(adb_path)
        emulators = [s for s in serials if s.startswith("emulator-")]
        if not emulators:
            raise ADBError("No Android emulator detected. Ensure 'adb devices' lists it.")
        return cls(emulators[0], adb_path=adb_path, timeout=timeout)

    # ---------------------------------------------------------------------
    # Basic operations
    # ---------------------------------------------------------------------
    def shell(self, command: str, *, timeout: Optional[float] = None) -> str:
        """Execute an ADB shell command and return stdout as a string."""
        cmd = [self.adb_path, "-s", self.serial, "shell", command]
        return _run(cmd, timeout=timeout if timeout is not None else self.timeout)

    def get_state(self) -> str:
        """Return the adb state of the device (``device``, ``offline`` ...)."""
        return _run([self.adb_path, "-s", self.serial, "get-state"], timeout=self.timeout).strip()

    def __repr__(self) -> str:  # pragma: no cover - string representation only
        return f"<Device serial={self.serial!r}>"


def _run(cmd: list[str], *, timeout: Optional[float]) -> str:
    try:
        return subprocess.check_output(cmd, encoding="utf-8", stderr=subprocess.PIPE, timeout=timeout)
    except subprocess.CalledProcessError as e:
        raise ADBError(f"{' '.join(cmd)} failed ({e.returncode}): {(e.stderr or '').strip()}") from e
    except subprocess.TimeoutExpired as e:
        raise ADBError(f"{' '.join(cmd)} timed out after {timeout}s") from e
    except FileNotFoundError as e:
        raise ADBError(f"adb executable not found: {cmd[0]}") from e
