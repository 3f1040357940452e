"""Utility functions for the NavTrack framework.

This sub-package provides utility functions for:
- File, directory and JSON operations
- Async timeouts and formatting helpers
"""

from .file_utils import ensure_directory, load_json, reset_directory, write_json
from .helpers import async_timeout, format_duration

__all__ = [
    "ensure_directory",
    "reset_directory",
    "write_json",
    "load_json",
    "async_timeout",
    "format_duration",
]
