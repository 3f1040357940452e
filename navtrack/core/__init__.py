"""Core components of the NavTrack framework."""

from .config import TrackerConfig, config
from .logger import Logger, log
from .test_context import (
    PytestContextProvider,
    StaticTestContextProvider,
    TestContext,
    TestContextProvider,
)

__all__ = [
    "Logger",
    "PytestContextProvider",
    "StaticTestContextProvider",
    "TestContext",
    "TestContextProvider",
    "TrackerConfig",
    "config",
    "log",
]
