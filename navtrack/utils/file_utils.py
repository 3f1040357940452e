"""File utility functions for the NavTrack framework."""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path
from typing import Any, Optional

from ..core.logger import log


def ensure_directory(directory_path: str) -> str:
    """Ensure a directory exists, creating it if necessary.

    Args:
        directory_path: Path to the directory.

    Returns:
        Absolute path to the directory.
    """
    path = Path(directory_path).resolve()
    path.mkdir(parents=True, exist_ok=True)
    return str(path)


def reset_directory(directory_path: str) -> str:
    """Remove a directory with everything in it and create it again empty.

    Args:
        directory_path: Path to the directory.

    Returns:
        Absolute path to the fresh directory.
    """
    if os.path.exists(directory_path):
        log.info(f"Resetting directory: {directory_path}")
        shutil.rmtree(directory_path)
    return ensure_directory(directory_path)


def write_json(data: Any, filepath: str, indent: int = 2) -> str:
    """Write data to a JSON file, creating parent directories.

    Errors are raised to the caller.

    Returns:
        The path written to.
    """
    directory = os.path.dirname(filepath)
    if directory:
        ensure_directory(directory)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

    log.debug(f"Data saved to {filepath}")
    return filepath


def load_json(filepath: str) -> Optional[Any]:
    """Load data from a JSON file.

    Args:
        filepath: Path to the JSON file.

    Returns:
        Loaded data or None if failed.
    """
    try:
        if not os.path.exists(filepath):
            log.warning(f"JSON file not found: {filepath}")
            return None

        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        log.debug(f"Data loaded from {filepath}")
        return data

    except (OSError, ValueError) as e:
        log.error(f"Failed to load JSON from {filepath}: {e}")
        return None
