"""Driver protocol and platform detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


class DriverError(RuntimeError):
    """Raised when the UI driver cannot provide a requested signal."""


@runtime_checkable
class UIDriver(Protocol):
    """What the tracker needs from a UI automation driver."""

    async def get_snapshot(self) -> str:
        """Return the current UI hierarchy as text."""
        ...

    async def get_current_location(self) -> str:
        """Return the current navigable location (URL) of a WebView."""
        ...

    def get_capabilities(self) -> Mapping[str, Any]:
        """Return the session capabilities reported by the driver."""
        ...


class Platform(str, Enum):
    """Mobile platform of the device under test."""

    ANDROID = "Android"
    IOS = "iOS"
    UNKNOWN = "Unknown"


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Platform label derived once from driver capabilities."""

    platform: Platform = Platform.UNKNOWN
    automation_name: str = ""
    platform_name: str = ""

    @property
    def is_android(self) -> bool:
        return self.platform is Platform.ANDROID

    @property
    def is_ios(self) -> bool:
        return self.platform is Platform.IOS


UNKNOWN_PLATFORM = PlatformInfo()


def detect_platform(capabilities: Optional[Mapping[str, Any]]) -> PlatformInfo:
    """Derive the platform from ``automationName`` / ``platformName``.

    Android wins when both platforms seem to match.
    """
    capabilities = capabilities or {}
    automation_name = str(capabilities.get("automationName") or "")
    platform_name = str(capabilities.get("platformName") or "")
    automation = automation_name.lower()
    platform_lower = platform_name.lower()

    if "android" in automation or platform_lower == "android":
        platform = Platform.ANDROID
    elif "ios" in automation or "xcuitest" in automation or platform_lower == "ios":
        platform = Platform.IOS
    else:
        platform = Platform.UNKNOWN

    return PlatformInfo(
        platform=platform,
        automation_name=automation_name,
        platform_name=platform_name,
    )
