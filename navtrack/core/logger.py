"""NavTrack structured logging system."""

from __future__ import annotations

import os
import sys
from contextlib import suppress
from typing import Any, List

from loguru import logger

from .config import config

# loguru's stock stderr handler
_DEFAULT_HANDLER_ID = 0
_handler_ids: List[int] = []


class Logger:
    """Structured logging system for the NavTrack framework."""

    def __init__(self, name: str = "NavigationTracker") -> None:
        """Initialize and configure a *Loguru* logger instance."""
        self.name = name
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Configure the logger with proper formatting and handlers."""
        # Remove the default handler and sinks added by an earlier Logger only;
        # sinks installed by the host application stay.
        for handler_id in [_DEFAULT_HANDLER_ID, *_handler_ids]:
            with suppress(ValueError):
                logger.remove(handler_id)
        _handler_ids.clear()

        # ------------------------------------------------------------------
        # Console handler
        # ------------------------------------------------------------------
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level:<8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

        _handler_ids.append(logger.add(
            sys.stdout,
            format=console_format,
            level=config.log_level,
            colorize=True,
        ))

        if not config.log_to_file:
            return

        # ------------------------------------------------------------------
        # File handlers
        # ------------------------------------------------------------------
        os.makedirs(config.log_dir, exist_ok=True)

        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | "
            "{name}:{function}:{line} | {message}"
        )

        _handler_ids.append(logger.add(
            os.path.join(config.log_dir, "navtrack_{time:YYYY-MM-DD}.log"),
            format=file_format,
            level="DEBUG",
            rotation="1 day",
            retention="30 days",
            compression="zip",
        ))

        # Separate error log
        _handler_ids.append(logger.add(
            os.path.join(config.log_dir, "errors_{time:YYYY-MM-DD}.log"),
            format=file_format,
            level="ERROR",
            rotation="1 day",
            retention="90 days",
            compression="zip",
        ))

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        logger.info(f"[{self.name}] {message}", **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        logger.debug(f"[{self.name}] {message}", **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        logger.warning(f"[{self.name}] {message}", **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        logger.error(f"[{self.name}] {message}", **kwargs)

    def success(self, message: str, **kwargs: Any) -> None:
        """Log success message."""
        logger.success(f"[{self.name}] {message}", **kwargs)

    def log_navigation(self, previous: str, current: str, navigation_type: str) -> None:
        """Log a recorded screen transition."""
        self.info(f"Added navigation: {previous} -> {current} ({navigation_type})")

    def log_inference(self, source: str, screen: str) -> None:
        """Log how the current screen was inferred."""
        self.debug(f"INFERENCE: {screen} (source: {source})")


# Global logger instance
log = Logger()
