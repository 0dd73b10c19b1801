"""Persist HTML reports to disk."""

import logging
import re
from datetime import datetime
from pathlib import Path

from .exceptions import OutputError, PathTraversalError
from .formatters.dates import report_timestamp
from .validators import is_path_traversal

logger = logging.getLogger(__name__)


def report_filename(domain: str, now: datetime | None = None) -> str:
    """Return ``safepi_<domain>_<YYYYMMDDHHMMSS>.html`` with non-alphanumerics replaced."""
    safe_domain = re.sub(r"[^a-zA-Z0-9]", "_", domain)
    return f"safepi_{safe_domain}_{report_timestamp(now)}.html"


def check_output_dir(output_path: str) -> None:
    """Raise ``PathTraversalError`` when the report directory is unsafe."""
    if is_path_traversal(output_path):
        raise PathTraversalError(f"Refusing to write reports to unsafe path '{output_path}'")


def write_html_report(
    output_path: str,
    domain: str,
    html: str,
    now: datetime | None = None,
) -> Path:
    """Write an HTML report under ``output_path`` and return the file path.

    The directory is checked before anything is created, then created if
    missing. Filesystem failures surface as ``OutputError``.
    """
    check_output_dir(output_path)
    report_dir = Path.cwd() / output_path
    report_file = report_dir / report_filename(domain, now)
    try:
        report_dir.mkdir(parents=True, exist_ok=True)
        report_file.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Could not write report {report_file}: {exc}") from exc

    logger.debug("Wrote HTML report for %s to %s", domain, report_file)
    return report_file.resolve()
