"""Rate limiting for screen inference attempts."""

from __future__ import annotations

import time
from typing import Optional


def monotonic_ms() -> int:
    """Monotonic clock in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


class ThrottleGate:
    """Enforces a minimum interval between two accepted inference attempts.

    Times are whole milliseconds so that a check exactly ``min_interval_ms``
    after the previous one is accepted.
    """

    def __init__(self, min_interval_ms: int = 300) -> None:
        if min_interval_ms < 0:
            raise ValueError("Minimum interval must not be negative")
        self.min_interval_ms = int(min_interval_ms)

    def allow(self, now_ms: int, last_check_time: Optional[int]) -> bool:
        """Return ``True`` if a check at ``now_ms`` may proceed.

        ``last_check_time`` is the time of the last accepted check, or ``None``
        if there was none. Recording ``now_ms`` on acceptance is up to the caller.
        """
        if last_check_time is None:
            return True
        return now_ms - last_check_time >= self.min_interval_ms
