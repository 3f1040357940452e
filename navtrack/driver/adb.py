"""UI driver backed by plain ``adb`` and UiAutomator dumps."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

from .base import DriverError
from .device import Device

REMOTE_DUMP_PATH = "/sdcard/window_dump.xml"


class AdbUIDriver:
    """Reads the UI hierarchy of an Android device without an Appium server."""

    def __init__(self, device: Device, *, timeout: Optional[int] = 15) -> None:
        self.device = device
        self.timeout = timeout

    async def get_snapshot(self) -> str:
        return await asyncio.to_thread(self._dump_hierarchy)

    def _dump_hierarchy(self) -> str:
        self.device.shell(f"uiautomator dump {REMOTE_DUMP_PATH}", timeout=self.timeout)
        xml = self.device.shell(f"cat {REMOTE_DUMP_PATH}", timeout=self.timeout)
        if "<hierarchy" not in xml:
            raise DriverError(f"Unexpected uiautomator output from {self.device.serial}")
        return xml

    async def get_current_location(self) -> str:
        raise DriverError("adb cannot report a WebView location")

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "platformName": "Android",
            "automationName": "adb",
            "deviceName": self.device.serial,
        }
