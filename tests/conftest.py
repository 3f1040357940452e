"""Pytest configuration and shared fixtures."""

import os

# Keep test runs from writing log files; must happen before navtrack is imported
os.environ.setdefault("NAVTRACK_LOG_TO_FILE", "false")

from datetime import datetime, timezone
from typing import Any

import pytest

from navtrack.core.config import TrackerConfig
from navtrack.core.test_context import TestContext
from navtrack.reporting.results import ResultsStore
from navtrack.tracker import NavigationTracker
from tests.fakes import FakeDriver, FakeMonotonic


@pytest.fixture
def settings(tmp_path) -> TrackerConfig:
    """Tracker settings writing into a temporary results directory."""
    return TrackerConfig(
        results_dir=str(tmp_path / "test-results"),
        settle_delay_ms=0,
        log_to_file=False,
    )


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def monotonic() -> FakeMonotonic:
    return FakeMonotonic()


@pytest.fixture
def wall_clock():
    return lambda: datetime(2025, 1, 1, 9, 5, 7)


@pytest.fixture
def fixed_utc() -> datetime:
    return datetime(2025, 1, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def context() -> TestContext:
    return TestContext(
        test_name="opens color screen",
        spec_file="tests/e2e/test_menu.py",
        session_id="session-1",
    )


@pytest.fixture
def make_tracker(settings, monotonic, wall_clock, context):
    """Factory building trackers with deterministic clocks."""

    def _make(driver: FakeDriver, **kwargs: Any) -> NavigationTracker:
        kwargs.setdefault("settings", settings)
        kwargs.setdefault("context", context)
        kwargs.setdefault("monotonic", monotonic)
        kwargs.setdefault("wall_clock", wall_clock)
        kwargs.setdefault(
            "results_store",
            ResultsStore(results_dir=kwargs["settings"].results_dir, settings=kwargs["settings"]),
        )
        return NavigationTracker(driver, **kwargs)

    return _make
