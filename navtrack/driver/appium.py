"""Adapter for Appium / Selenium style WebDriver sessions."""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional

from ..utils.helpers import async_timeout
from .base import DriverError


class AppiumDriverAdapter:
    """Exposes a blocking WebDriver session through the async ``UIDriver`` protocol.

    The wrapped object only needs ``page_source`` and ``current_url``
    attributes; ``capabilities`` (or the older ``caps``) and ``session_id``
    are read when present.

    Args:
        webdriver: An Appium ``webdriver.Remote`` or anything shaped like it.
        timeout: Optional per-call timeout in seconds. A timed out call is
            reported as a ``DriverError``.
    """

    def __init__(self, webdriver: Any, timeout: Optional[float] = None) -> None:
        self.webdriver = webdriver
        self.timeout = timeout

    @property
    def session_id(self) -> Optional[str]:
        session_id = getattr(self.webdriver, "session_id", None)
        return str(session_id) if session_id else None

    async def _read(self, attribute: str) -> str:
        value = await async_timeout(
            asyncio.to_thread(getattr, self.webdriver, attribute),
            self.timeout,
            label=f"Reading {attribute}",
        )
        if value is None:
            raise DriverError(f"Driver returned no {attribute}")
        return str(value)

    async def get_snapshot(self) -> str:
        return await self._read("page_source")

    async def get_current_location(self) -> str:
        return await self._read("current_url")

    def get_capabilities(self) -> Mapping[str, Any]:
        capabilities = getattr(self.webdriver, "capabilities", None)
        if not capabilities:
            capabilities = getattr(self.webdriver, "caps", None)
        return dict(capabilities or {})
