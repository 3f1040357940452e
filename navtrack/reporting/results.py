"""Persistence of navigation results."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from ..core.config import TrackerConfig, config
from ..core.logger import log
from ..tracking.journal import Navigation, format_timestamp, utc_now
from ..utils.file_utils import ensure_directory, reset_directory, write_json


class NavigationRecord(BaseModel):
    """Wire form of one journal entry."""
    previous_screen: str
    current_screen: str
    timestamp: str
    navigation_type: str


class NavigationReport(BaseModel):
    """Report written at the end of a test run."""
    spec_file: str
    test_name: str
    session_id: str
    navigations: List[NavigationRecord] = Field(default_factory=list)
    timestamp: str
    save_timestamp: str
    navigation_count: int = 0

    @model_validator(mode="after")
    def _check_count(self) -> NavigationReport:
        if self.navigation_count != len(self.navigations):
            raise ValueError(
                f"navigation_count {self.navigation_count} does not match "
                f"{len(self.navigations)} navigations"
            )
        return self

    @classmethod
    def from_journal(
        cls,
        navigations: Sequence[Navigation],
        *,
        spec_file: str,
        test_name: str,
        session_id: str,
        now: Optional[datetime] = None,
    ) -> NavigationReport:
        stamp = format_timestamp(now or utc_now())
        records = [NavigationRecord(**entry.to_dict()) for entry in navigations]
        return cls(
            spec_file=spec_file,
            test_name=test_name,
            session_id=session_id,
            navigations=records,
            timestamp=stamp,
            save_timestamp=stamp,
            navigation_count=len(records),
        )

    def backup_payload(self) -> Dict[str, Any]:
        """Reduced form written when the full report cannot be saved."""
        return {
            "spec_file": self.spec_file,
            "navigations": [record.model_dump() for record in self.navigations],
            "timestamp": self.timestamp,
        }


class ResultsStore:
    """Writes navigation reports into the results directory."""

    def __init__(self, results_dir: Optional[str] = None, settings: Optional[TrackerConfig] = None) -> None:
        self.settings = settings or config
        self.results_dir = results_dir or self.settings.get_results_path()

    @property
    def results_path(self) -> Path:
        return Path(self.results_dir) / self.settings.results_filename

    @property
    def backup_path(self) -> Path:
        return Path(self.results_dir) / self.settings.backup_filename

    def reset(self) -> None:
        """Start from an empty results directory."""
        reset_directory(self.results_dir)

    def save(self, report: NavigationReport) -> Optional[Path]:
        """Write the report, falling back to a reduced backup file.

        Returns:
            The path written, or ``None`` if both attempts failed.
        """
        log.info("Saving navigation results...")
        log.info(f"Total navigation events: {report.navigation_count}")
        try:
            ensure_directory(self.results_dir)
            write_json(report.model_dump(), os.fspath(self.results_path))
            log.success(f"Results saved to: {self.results_path}")
            return self.results_path
        except (OSError, TypeError, ValueError) as e:
            log.error(f"Error saving results: {e}")

        try:
            ensure_directory(self.results_dir)
            write_json(report.backup_payload(), os.fspath(self.backup_path))
            log.info(f"Backup results saved to: {self.backup_path}")
            return self.backup_path
        except (OSError, TypeError, ValueError) as e:
            log.error(f"Failed to save backup results: {e}")
            return None
