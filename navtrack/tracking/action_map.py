"""Mapping of interactive element ids to the screens they lead to."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

# Element id -> screen reached by tapping it
DEFAULT_ACTION_SCREENS: Mapping[str, str] = MappingProxyType({
    "color": "Color Screen",
    "Text": "Text Screen",
    "toast": "Toast Screen",
    "notification": "Notification Screen",
    "geoLocation": "Geolocation Screen",
    "buttonPage": "Home Screen",
    "speedTest": "Speed Test Screen",
    "webview": "WebView Screen",
    "find": "Browser Content Screen",
    "Back": "Home Screen",
})


class ActionScreenMap:
    """Read-only lookup from element id to the expected destination screen.

    Keys are case-sensitive. The table is fixed at construction.
    """

    def __init__(self, screens: Optional[Mapping[str, str]] = None) -> None:
        table: Dict[str, str] = dict(DEFAULT_ACTION_SCREENS if screens is None else screens)
        for element_id, screen in table.items():
            if not screen:
                raise ValueError(f"Empty screen name for element id: {element_id!r}")
        self._screens: Mapping[str, str] = MappingProxyType(table)

    def lookup(self, element_id: Optional[str]) -> Optional[str]:
        """Return the screen an element leads to, or ``None`` if unknown."""
        if not element_id:
            return None
        return self._screens.get(element_id)

    def has(self, element_id: Optional[str]) -> bool:
        return self.lookup(element_id) is not None

    def get(self, element_id: Optional[str], default: Optional[str] = None) -> Optional[str]:
        screen = self.lookup(element_id)
        return default if screen is None else screen

    def __contains__(self, element_id: object) -> bool:
        return isinstance(element_id, str) and self.has(element_id)

    def __len__(self) -> int:
        return len(self._screens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._screens)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._screens)
