"""Append-only journal of screen transitions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..core.logger import log

APP_START_SCREEN = "App Start"

_LOW_CONFIDENCE_PATTERN = re.compile(r"^Screen at \d{1,2}:\d{1,2}:\d{1,2}$")


class NavigationType(str, Enum):
    """Why a navigation entry was recorded."""

    TEST_START = "test_start"
    USER_INTERACTION = "user_interaction"
    NAVIGATION_DETECTED = "navigation_detected"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with milliseconds and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_low_confidence(screen: str) -> bool:
    """Return ``True`` for names produced by the time-based fallback."""
    return bool(_LOW_CONFIDENCE_PATTERN.match(screen))


@dataclass(frozen=True, slots=True)
class Navigation:
    """A single recorded transition between two screens."""

    previous_screen: str
    current_screen: str
    timestamp: datetime
    navigation_type: NavigationType

    def to_dict(self) -> Dict[str, Any]:
        return {
            "previous_screen": self.previous_screen,
            "current_screen": self.current_screen,
            "timestamp": format_timestamp(self.timestamp),
            "navigation_type": self.navigation_type.value,
        }


class NavigationJournal:
    """Ordered log of navigations with adjacent-duplicate suppression.

    Only the last entry is compared, so a screen may reappear later in the
    log (Home -> Color -> Home is kept as three entries).
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._entries: List[Navigation] = []

    def append(
        self,
        previous_screen: str,
        current_screen: str,
        navigation_type: NavigationType,
    ) -> Optional[Navigation]:
        """Record a transition unless it repeats the last entry's screen.

        Returns:
            The new entry, or ``None`` if it was suppressed.
        """
        if self._entries and self._entries[-1].current_screen == current_screen:
            log.debug(f"Skipping duplicate navigation to {current_screen}")
            return None

        navigation = Navigation(
            previous_screen=previous_screen,
            current_screen=current_screen,
            timestamp=self._clock(),
            navigation_type=NavigationType(navigation_type),
        )
        self._entries.append(navigation)
        log.log_navigation(previous_screen, current_screen, navigation.navigation_type.value)
        return navigation

    @property
    def last(self) -> Optional[Navigation]:
        return self._entries[-1] if self._entries else None

    def snapshot(self) -> Tuple[Navigation, ...]:
        """Return the entries in append order."""
        return tuple(self._entries)

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in self._entries]

    def reset(self) -> None:
        """Drop every entry."""
        self._entries.clear()
        log.info("Navigation journal reset")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Navigation]:
        return iter(tuple(self._entries))
