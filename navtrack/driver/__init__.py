"""UI driver adapters and platform detection."""

from .adb import AdbUIDriver
from .appium import AppiumDriverAdapter
from .base import (
    UNKNOWN_PLATFORM,
    DriverError,
    Platform,
    PlatformInfo,
    UIDriver,
    detect_platform,
)
from .device import ADBError, Device

__all__ = [
    "ADBError",
    "AdbUIDriver",
    "AppiumDriverAdapter",
    "Device",
    "DriverError",
    "Platform",
    "PlatformInfo",
    "UIDriver",
    "UNKNOWN_PLATFORM",
    "detect_platform",
]
