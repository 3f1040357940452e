"""Helper utility functions for the NavTrack framework."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Optional

from ..core.logger import log


async def async_timeout(
    awaitable: Awaitable[Any],
    timeout: Optional[float],
    default: Optional[Any] = None,
    *,
    label: str = "Operation",
) -> Any:
    """Await ``awaitable``, giving up after ``timeout`` seconds.

    A ``timeout`` of ``None`` waits indefinitely. On timeout the awaitable is
    cancelled, a warning naming ``label`` is logged and ``default`` returned.
    """
    if timeout is None:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError:
        log.warning(f"{label} timed out after {timeout}s")
        return default


def format_duration(seconds: float) -> str:
    """Render the span of a navigation trace, e.g. ``850ms``, ``5.0s``, ``2m 05s``."""
    if seconds < 1:
        return f"{round(seconds * 1000)}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs:02d}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes:02d}m"
