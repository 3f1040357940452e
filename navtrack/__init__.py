"""NavTrack: screen navigation tracking for mobile UI test runs."""

from .core import TestContext, TrackerConfig, config, log
from .driver import AdbUIDriver, AppiumDriverAdapter, PlatformInfo, UIDriver
from .tracker import NavigationTracker
from .tracking import Navigation, NavigationType, is_low_confidence

__version__ = "1.0.0"

__all__ = [
    "AdbUIDriver",
    "AppiumDriverAdapter",
    "Navigation",
    "NavigationTracker",
    "NavigationType",
    "PlatformInfo",
    "TestContext",
    "TrackerConfig",
    "UIDriver",
    "config",
    "is_low_confidence",
    "log",
]
