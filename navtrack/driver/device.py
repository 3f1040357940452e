from __future__ import annotations

import subprocess

from .base import DriverError


class ADBError(DriverError):
    """Custom exception raised when an ADB-related error occurs."""


class Device:
    """Lightweight wrapper around `adb` for reading state from a single Android device.

    Only a running ``adb`` binary (bundled with the Android SDK) is required.
    """

    def __init__(self, serial: str):
        self.serial = serial

    # ---------------------------------------------------------------------
    # Factory helpers
    # ---------------------------------------------------------------------
    @classmethod
    def list_devices(cls) -> list[str]:
        """Return a list of connected device/emulator serial numbers."""
        try:
            output = subprocess.check_output(["adb", "devices"], encoding="utf-8")
        except (OSError, subprocess.CalledProcessError) as e:
            raise ADBError(f"Could not list devices: {e}") from e
        return cls._parse_devices(output)

    @staticmethod
    def _parse_devices(output: str) -> list[str]:
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
    def from_emulator(cls) -> Device:
        """Return a ``Device`` instance pointing at the first running emulator.

        Raises:
            ADBError: If no emulator device is detected.

        """
        serials = cls.list_devices()
        emulators = [s for s in serials if s.startswith("emulator-")]
        if not emulators:
            raise ADBError("No Android emulator detected. Start an emulator and ensure 'adb devices' lists it.")
        return cls(emulators[0])

    # ---------------------------------------------------------------------
    # Basic operations
    # ---------------------------------------------------------------------
    def shell(self, command: str, *, timeout: int | None = None) -> str:
        """Execute an ADB shell command and return stdout as a string."""
        cmd = ["adb", "-s", self.serial, "shell", command]
        try:
            return subprocess.check_output(cmd, encoding="utf-8", timeout=timeout)
        except (OSError, subprocess.SubprocessError) as e:
            raise ADBError(f"adb shell '{command}' failed on {self.serial}: {e}") from e

    def __repr__(self) -> str:  # pragma: no cover - string representation only
        return f"<Device serial={self.serial!r}>"
