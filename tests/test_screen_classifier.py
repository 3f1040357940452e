"""Unit tests for ScreenClassifier rule precedence."""

import pytest

from navtrack.tracking.screen_classifier import (
    EXTERNAL_SITE_SCREEN,
    ScreenClassifier,
    ScreenRule,
    mentions_webview,
)
from tests.fakes import COLOR_SOURCE, HOME_SOURCE, UNKNOWN_SOURCE


@pytest.fixture
def classifier() -> ScreenClassifier:
    return ScreenClassifier()


class TestDefaultRules:

    def test_home_screen(self, classifier):
        assert classifier.classify(HOME_SOURCE) == "Home Screen"

    def test_home_requires_all_three_markers(self, classifier):
        source = '<node id="color"/><node id="Text"/>'
        assert classifier.classify(source) is None

    def test_webview_screen(self, classifier):
        source = '<node id="url"/><node id="find"/>'
        assert classifier.classify(source) == "WebView Screen"

    @pytest.mark.parametrize(
        "marker, screen",
        [
            ("colorSelection", "Color Screen"),
            ("textInput", "Text Screen"),
            ("showToast", "Toast Screen"),
            ("showNotification", "Notification Screen"),
            ("gpsLocation", "Geolocation Screen"),
            ("startTest", "Speed Test Screen"),
        ],
    )
    def test_detail_screens(self, classifier, marker, screen):
        source = f'<node id="Back"/><node id="{marker}"/>'
        assert classifier.classify(source) == screen

    def test_detail_marker_without_back_is_not_enough(self, classifier):
        assert classifier.classify('<node id="textInput"/>') is None

    @pytest.mark.parametrize(
        "source, screen",
        [
            ("<title>Color</title>", "Color Screen"),
            ('<node text="Color"/>', "Color Screen"),
            ("<h1>Geolocation</h1>", "Geolocation Screen"),
            ('<node text="Speed Test"/>', "Speed Test Screen"),
        ],
    )
    def test_title_text(self, classifier, source, screen):
        assert classifier.classify(source) == screen

    def test_external_site(self, classifier):
        source = '<node text="https://www.lambdatest.com/pricing"/>'
        assert classifier.classify(source) == EXTERNAL_SITE_SCREEN

    def test_unrecognized(self, classifier):
        assert classifier.classify(UNKNOWN_SOURCE) is None
        assert classifier.classify("") is None


class TestPrecedence:
    """First matching rule wins."""

    def test_home_beats_detail_screen(self, classifier):
        source = HOME_SOURCE + COLOR_SOURCE + "<title>Geolocation</title>"
        assert classifier.classify(source) == "Home Screen"

    def test_webview_beats_detail_screen(self, classifier):
        source = '<node id="url"/><node id="find"/>' + COLOR_SOURCE
        assert classifier.classify(source) == "WebView Screen"

    def test_back_marker_rule_beats_title_text(self, classifier):
        source = '<node id="Back"/><node id="gpsLocation"/><title>Color</title>'
        assert classifier.classify(source) == "Geolocation Screen"

    def test_custom_rules_are_ordered(self):
        classifier = ScreenClassifier([
            ScreenRule("Login Screen", required=('id="login"',)),
            ScreenRule("Any Form", any_of=('id="login"', 'id="signup"')),
        ])

        assert classifier.classify('<node id="login"/>') == "Login Screen"
        assert classifier.classify('<node id="signup"/>') == "Any Form"
        assert classifier.classify(HOME_SOURCE) is None


class TestMentionsWebview:

    @pytest.mark.parametrize("source", ["android.webkit.WebView", "<webview/>"])
    def test_detects_webview(self, source):
        assert mentions_webview(source)

    def test_other_sources(self):
        assert not mentions_webview(HOME_SOURCE)
        assert not mentions_webview("WEBVIEW")
