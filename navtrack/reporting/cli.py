"""Print a saved navigation report as a readable trace."""

from __future__ import annotations

import argparse
import os
import sys
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from ..core.config import config
from ..core.logger import log
from ..tracking.journal import is_low_confidence
from ..utils.file_utils import load_json
from ..utils.helpers import format_duration
from .results import NavigationReport


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_report(report: NavigationReport) -> List[str]:
    """Render a report as one line per navigation plus a summary."""
    lines = [
        f"Test: {report.test_name} ({report.spec_file})",
        f"Session: {report.session_id}",
        "",
    ]
    low_confidence = 0
    for index, record in enumerate(report.navigations, start=1):
        marker = ""
        if is_low_confidence(record.current_screen):
            low_confidence += 1
            marker = "  [low confidence]"
        previous = record.previous_screen or "-"
        lines.append(
            f"{index:>3}. {record.timestamp}  {previous} -> {record.current_screen}"
            f"  ({record.navigation_type}){marker}"
        )

    lines.append("")
    summary = f"{report.navigation_count} navigations, {low_confidence} low confidence"
    if len(report.navigations) > 1:
        first = _parse_timestamp(report.navigations[0].timestamp)
        last = _parse_timestamp(report.navigations[-1].timestamp)
        if first and last:
            summary += f", spanning {format_duration((last - first).total_seconds())}"
    lines.append(summary)
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    parser = argparse.ArgumentParser(description="Show a navigation tracking report")
    parser.add_argument(
        "report",
        nargs="?",
        default=None,
        help="Path to navigation-tracking.json (defaults to the configured results directory)",
    )
    args = parser.parse_args(argv)

    path = args.report or os.path.join(config.get_results_path(), config.results_filename)
    data = load_json(path)
    if data is None:
        print(f"No report found at {path}", file=sys.stderr)
        return 1

    try:
        report = NavigationReport.model_validate(data)
    except ValidationError as e:
        log.error(f"Invalid navigation report {path}: {e}")
        print(f"Invalid navigation report: {path}", file=sys.stderr)
        return 2

    print("\n".join(format_report(report)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
