"""Navigation tracker for mobile UI test runs.

Hook it into the test's click helper::

    tracker = NavigationTracker(AppiumDriverAdapter(driver))
    await tracker.signal_before_action("color")
    element.click()
    await tracker.signal_after_action()
    ...
    tracker.save_results()
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Tuple

from .core.config import TrackerConfig, config
from .core.logger import log
from .core.test_context import TestContext, TestContextProvider
from .driver.base import UNKNOWN_PLATFORM, PlatformInfo, UIDriver, detect_platform
from .reporting.results import NavigationReport, ResultsStore
from .tracking.action_map import ActionScreenMap
from .tracking.inference import InferenceSource, ScreenInferenceEngine
from .tracking.journal import APP_START_SCREEN, Navigation, NavigationJournal, NavigationType, utc_now
from .tracking.screen_classifier import ScreenClassifier
from .tracking.throttle import ThrottleGate, monotonic_ms


class NavigationTracker:
    """Keeps a deduplicated journal of the screens visited during one test.

    One instance per test session. Calls are expected to be awaited one at a
    time; there is no internal locking.
    """

    def __init__(
        self,
        driver: UIDriver,
        *,
        context: Optional[TestContext] = None,
        context_provider: Optional[TestContextProvider] = None,
        platform: Optional[PlatformInfo] = None,
        settings: Optional[TrackerConfig] = None,
        action_map: Optional[ActionScreenMap] = None,
        classifier: Optional[ScreenClassifier] = None,
        results_store: Optional[ResultsStore] = None,
        wall_clock: Callable[[], datetime] = datetime.now,
        journal_clock: Callable[[], datetime] = utc_now,
        monotonic: Callable[[], int] = monotonic_ms,
    ) -> None:
        self.settings = settings or config
        self.driver = driver
        self._monotonic = monotonic

        self.context = context or self._resolve_context(context_provider, driver)
        log.info(
            f"Initializing with: test_name={self.context.test_name}, "
            f"spec_file={self.context.spec_file}, session_id={self.context.session_id}"
        )

        self.results_store = results_store or ResultsStore(settings=self.settings)
        if self.settings.reset_results_dir:
            self._reset_results_directory()

        self.journal = NavigationJournal(clock=journal_clock)
        self.journal.append("", APP_START_SCREEN, NavigationType.TEST_START)

        self.platform = platform or self._detect_platform()

        self.throttle = ThrottleGate(self.settings.min_check_interval_ms)
        self.engine = ScreenInferenceEngine(
            driver,
            action_map,
            classifier,
            initial_screen=self.settings.initial_screen,
            clock=wall_clock,
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _resolve_context(provider: Optional[TestContextProvider], driver: UIDriver) -> TestContext:
        if provider is None:
            # Reuse the driver session id when there is one
            session_id = getattr(driver, "session_id", None)
            return TestContext(session_id=session_id) if session_id else TestContext()
        try:
            return provider.get_context()
        except Exception as e:
            log.warning(f"Could not resolve test context: {e}")
            return TestContext()

    def _reset_results_directory(self) -> None:
        try:
            self.results_store.reset()
        except OSError as e:
            log.error(f"Could not reset results directory: {e}")

    def _detect_platform(self) -> PlatformInfo:
        try:
            platform = detect_platform(self.driver.get_capabilities())
        except Exception as e:
            log.error(f"Error in platform detection: {e}")
            return UNKNOWN_PLATFORM
        log.info(f"Platform detected: {platform.platform.value}")
        return platform

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def current_screen(self) -> str:
        return self.engine.current_screen

    def export_journal(self) -> Tuple[Navigation, ...]:
        """Return every recorded navigation in order."""
        return self.journal.snapshot()

    def _add_navigation(self, previous: str, current: str, navigation_type: NavigationType) -> None:
        self.journal.append(previous, current, navigation_type)
        self.engine.state.current_screen = current

    # ------------------------------------------------------------------
    # Action hooks
    # ------------------------------------------------------------------
    def record_action_hint(self, element_id: str) -> None:
        """Note the element about to be used; consumed by the next check."""
        self.engine.record_action_hint(element_id)

    async def signal_before_action(self, element_id: str) -> None:
        """Hook to call right before clicking ``element_id``."""
        self.record_action_hint(element_id)

    async def signal_after_action(self) -> str:
        """Hook to call after a click: let the UI settle, then check."""
        await asyncio.sleep(self.settings.settle_delay_ms / 1000.0)
        return await self.check_now()

    async def record_user_action(self, element_id: str) -> None:
        """Record an interaction and log the screen it is known to lead to."""
        self.record_action_hint(element_id)
        screen = self.engine.action_map.lookup(element_id)
        if screen and screen != self.current_screen:
            self._add_navigation(self.current_screen, screen, NavigationType.USER_INTERACTION)

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------
    async def check_now(self) -> str:
        """Infer the current screen and record it if it changed.

        Returns:
            The current screen after the check. Throttled calls return the
            unchanged current screen.
        """
        now = self._monotonic()
        if not self.throttle.allow(now, self.engine.state.last_check_time):
            log.debug("Skipping navigation check (throttled)")
            return self.current_screen
        self.engine.state.last_check_time = now

        try:
            inference = await self.engine.infer()
            if inference.screen and inference.screen != self.current_screen:
                if inference.source is InferenceSource.ACTION_HINT:
                    navigation_type = NavigationType.USER_INTERACTION
                else:
                    navigation_type = NavigationType.NAVIGATION_DETECTED
                self._add_navigation(self.current_screen, inference.screen, navigation_type)
        except Exception as e:
            log.error(f"Error tracking navigation: {e}")

        return self.current_screen

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def build_report(self) -> NavigationReport:
        return NavigationReport.from_journal(
            self.export_journal(),
            spec_file=self.context.spec_file,
            test_name=self.context.test_name,
            session_id=self.context.session_id,
        )

    def save_results(self) -> Optional[Path]:
        """Write the navigation report; see :meth:`ResultsStore.save`."""
        return self.results_store.save(self.build_report())
