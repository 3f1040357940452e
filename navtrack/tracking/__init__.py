"""Screen inference and navigation journaling.

This sub-package provides:
- Snapshot fingerprints and the action-to-screen table
- Rule based screen classification
- The throttled inference engine and the navigation journal
"""

from .action_map import DEFAULT_ACTION_SCREENS, ActionScreenMap
from .fingerprint import EMPTY_FINGERPRINT, fingerprint
from .inference import Inference, InferenceSource, InferenceState, ScreenInferenceEngine
from .journal import (
    APP_START_SCREEN,
    Navigation,
    NavigationJournal,
    NavigationType,
    is_low_confidence,
)
from .screen_classifier import DEFAULT_RULES, ScreenClassifier, ScreenRule, mentions_webview
from .throttle import ThrottleGate, monotonic_ms

__all__ = [
    "APP_START_SCREEN",
    "ActionScreenMap",
    "DEFAULT_ACTION_SCREENS",
    "DEFAULT_RULES",
    "EMPTY_FINGERPRINT",
    "Inference",
    "InferenceSource",
    "InferenceState",
    "Navigation",
    "NavigationJournal",
    "NavigationType",
    "ScreenClassifier",
    "ScreenInferenceEngine",
    "ScreenRule",
    "ThrottleGate",
    "monotonic_ms",
    "fingerprint",
    "is_low_confidence",
    "mentions_webview",
]
