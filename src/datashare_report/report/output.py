"""JSON rendering for usage reports."""

import json
import logging
from pathlib import Path

from datashare_report.report.models import UsageReport

logger = logging.getLogger(__name__)


def render_report(report: UsageReport) -> str:
    """Render a report as indented camelCase JSON."""
    return json.dumps(report.to_dict(), indent=2)


def write_report(report: UsageReport, path: Path | str) -> Path:
    """Write a report to a JSON file, creating parent directories.

    Args:
        report: Completed usage report
        path: Destination file

    Returns:
        Path to the written file
    """
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(render_report(report) + "\n")
    logger.info(f"Report written to {filepath}")
    return filepath
