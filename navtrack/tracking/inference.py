"""Screen inference engine.

Combines the signals available at check time into a single screen name:

1. a pending action hint (consumed once),
2. an unchanged page source (reuse the current screen),
3. the screen classifier,
4. the WebView location,
5. a synthetic time-based name.

The engine never raises to its caller. Driver or classifier failures are
logged and treated as a missing signal.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from ..core.logger import log
from ..driver.base import UIDriver
from .action_map import ActionScreenMap
from .fingerprint import fingerprint
from .screen_classifier import ScreenClassifier, mentions_webview


class InferenceSource(str, Enum):
    """Which signal produced an inferred screen."""

    ACTION_HINT = "action_hint"
    UNCHANGED = "unchanged"
    CLASSIFIER = "classifier"
    WEBVIEW_LOCATION = "webview_location"
    FALLBACK = "fallback"


@dataclass(slots=True)
class InferenceState:
    """Mutable tracking state owned by a single engine."""

    current_screen: str = "Home Screen"
    last_action: Optional[str] = None
    last_snapshot_fingerprint: Optional[str] = None
    last_check_time: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Inference:
    screen: str
    source: InferenceSource


def fallback_screen_name(now: datetime) -> str:
    """Name an unidentified screen after the wall-clock time."""
    return f"Screen at {now.hour}:{now.minute}:{now.second}"


def webview_label(url: str) -> str:
    """Label a WebView screen by the last path segment of its URL."""
    return f"WebView: {url.split('/')[-1] or url}"


class ScreenInferenceEngine:
    """Decides which screen is currently displayed."""

    def __init__(
        self,
        driver: UIDriver,
        action_map: Optional[ActionScreenMap] = None,
        classifier: Optional[ScreenClassifier] = None,
        *,
        initial_screen: str = "Home Screen",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.driver = driver
        self.action_map = action_map or ActionScreenMap()
        self.classifier = classifier or ScreenClassifier()
        self.state = InferenceState(current_screen=initial_screen)
        self._clock = clock

    @property
    def current_screen(self) -> str:
        return self.state.current_screen

    def record_action_hint(self, element_id: Optional[str]) -> None:
        """Remember the element about to be used, for the next inference."""
        self.state.last_action = element_id or None

    async def infer_current_screen(self) -> str:
        """Return the name of the screen currently displayed."""
        return (await self.infer()).screen

    async def infer(self) -> Inference:
        """Infer the current screen and report which signal decided it."""
        inference = self._from_action_hint()
        if inference is None:
            try:
                inference = await self._from_snapshot()
            except Exception as e:
                log.warning(f"Screen inference degraded to fallback: {e}")
                inference = None

        if inference is None:
            inference = Inference(fallback_screen_name(self._clock()), InferenceSource.FALLBACK)

        log.log_inference(inference.source.value, inference.screen)
        return inference

    def _from_action_hint(self) -> Optional[Inference]:
        screen = self.action_map.lookup(self.state.last_action)
        if screen is None:
            return None
        # One-shot: the same click must not explain a later check
        self.state.last_action = None
        return Inference(screen, InferenceSource.ACTION_HINT)

    async def _from_snapshot(self) -> Optional[Inference]:
        snapshot = await self._get_snapshot()
        if not snapshot:
            return None

        snapshot_fingerprint = fingerprint(snapshot)
        if snapshot_fingerprint == self.state.last_snapshot_fingerprint:
            return Inference(self.state.current_screen, InferenceSource.UNCHANGED)
        self.state.last_snapshot_fingerprint = snapshot_fingerprint

        screen = self.classifier.classify(snapshot)
        if screen:
            return Inference(screen, InferenceSource.CLASSIFIER)

        if mentions_webview(snapshot):
            url = await self._get_current_location()
            if url:
                return Inference(webview_label(url), InferenceSource.WEBVIEW_LOCATION)

        return None

    async def _get_snapshot(self) -> Optional[str]:
        try:
            return await self.driver.get_snapshot()
        except Exception as e:
            log.debug(f"Could not get page source: {e}")
            return None

    async def _get_current_location(self) -> Optional[str]:
        try:
            url = await self.driver.get_current_location()
        except Exception as e:
            log.debug(f"Could not get current URL: {e}")
            return None
        return url if isinstance(url, str) else None
