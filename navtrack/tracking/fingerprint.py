"""Cheap fingerprints for UI snapshots.

A fingerprint only answers "has the page source probably changed since the
last check?". Collisions are tolerated.
"""

from __future__ import annotations

import hashlib

EMPTY_FINGERPRINT = "0"


def fingerprint(text: str) -> str:
    """Return a stable fingerprint of the full snapshot text."""
    if not text:
        return EMPTY_FINGERPRINT
    return hashlib.md5(text.encode("utf-8")).hexdigest()
