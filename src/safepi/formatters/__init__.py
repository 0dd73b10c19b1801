"""Renderers for scan results."""

from datetime import datetime

from safepi.models import ObservatoryScan, ReportFormat

from .html import format_html
from .pretty import build_pretty_text, format_pretty
from .summary import build_summary, separator
from .text import format_text


def format_result(
    scan: ObservatoryScan,
    passing_score: int,
    report_format: ReportFormat,
    generated_at: datetime | None = None,
) -> str:
    """Render a scan in the requested format."""
    if report_format == ReportFormat.TEXT:
        return format_text(scan, passing_score)
    if report_format == ReportFormat.PRETTY:
        return format_pretty(scan, passing_score)
    if report_format == ReportFormat.HTML:
        return format_html(scan, passing_score, generated_at=generated_at)
    raise ValueError(f"Unsupported format: {report_format}")


__all__ = [
    "build_pretty_text",
    "build_summary",
    "format_html",
    "format_pretty",
    "format_result",
    "format_text",
    "separator",
]
