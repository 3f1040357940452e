"""Navigation report persistence and display."""

from .results import NavigationRecord, NavigationReport, ResultsStore

__all__ = [
    "NavigationRecord",
    "NavigationReport",
    "ResultsStore",
]
