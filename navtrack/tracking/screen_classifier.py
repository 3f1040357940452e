"""Screen classification from raw page source.

The page source is treated as opaque text: each rule is a set of substrings
that must (or may) appear in it. Rules are evaluated in order and the first
match wins, so the home screen rule must stay ahead of the detail screen
rules; a stale snapshot still showing the back button would otherwise be
named after a detail screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

HOME_SCREEN = "Home Screen"
WEBVIEW_SCREEN = "WebView Screen"
EXTERNAL_SITE_SCREEN = "LambdaTest Website"

BACK_MARKER = 'id="Back"'


def _id(element_id: str) -> str:
    return f'id="{element_id}"'


@dataclass(frozen=True, slots=True)
class ScreenRule:
    """A textual signature for one screen.

    Matches when every ``required`` marker is present and, if ``any_of`` is
    not empty, at least one of its markers is present too.
    """

    screen: str
    required: Tuple[str, ...] = ()
    any_of: Tuple[str, ...] = ()

    def matches(self, snapshot: str) -> bool:
        if not all(marker in snapshot for marker in self.required):
            return False
        if self.any_of:
            return any(marker in snapshot for marker in self.any_of)
        return True


def _detail_rule(screen: str, element_id: str) -> ScreenRule:
    return ScreenRule(screen, required=(BACK_MARKER, _id(element_id)))


def _title_rule(screen: str, title: str) -> ScreenRule:
    return ScreenRule(screen, any_of=(f">{title}<", f'"{title}"'))


DEFAULT_RULES: Tuple[ScreenRule, ...] = (
    # Home screen: all three menu buttons visible
    ScreenRule(HOME_SCREEN, required=(_id("color"), _id("Text"), _id("toast"))),
    ScreenRule(WEBVIEW_SCREEN, required=(_id("url"), _id("find"))),
    # Detail screens reached from the home menu
    _detail_rule("Color Screen", "colorSelection"),
    _detail_rule("Text Screen", "textInput"),
    _detail_rule("Toast Screen", "showToast"),
    _detail_rule("Notification Screen", "showNotification"),
    _detail_rule("Geolocation Screen", "gpsLocation"),
    _detail_rule("Speed Test Screen", "startTest"),
    # Title text, for screens caught before their back button is rendered
    _title_rule("Color Screen", "Color"),
    _title_rule("Geolocation Screen", "Geolocation"),
    _title_rule("Speed Test Screen", "Speed Test"),
    ScreenRule(EXTERNAL_SITE_SCREEN, required=("www.lambdatest.com",)),
)


def mentions_webview(snapshot: str) -> bool:
    """Return ``True`` if the page source looks like a WebView context."""
    return "WebView" in snapshot or "webview" in snapshot


class ScreenClassifier:
    """Names the active screen by matching page source against ordered rules."""

    def __init__(self, rules: Optional[Iterable[ScreenRule]] = None) -> None:
        self.rules: Sequence[ScreenRule] = tuple(DEFAULT_RULES if rules is None else rules)

    def classify(self, snapshot: str) -> Optional[str]:
        """Return the first matching screen name, or ``None`` if unrecognized."""
        if not snapshot:
            return None
        for rule in self.rules:
            if rule.matches(snapshot):
                return rule.screen
        return None
