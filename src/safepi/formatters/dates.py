"""Timestamp helpers for rendered reports."""

from datetime import datetime

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_timestamp(value: str | None) -> str:
    """Convert an ISO-8601 timestamp to local time for display.

    Unparseable values are shown as received; missing ones as ``N/A``.
    """
    if not value:
        return "N/A"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime(DISPLAY_FORMAT)


def report_timestamp(now: datetime | None = None) -> str:
    """Compact ``YYYYMMDDHHMMSS`` stamp used in report filenames."""
    return (now or datetime.now()).strftime("%Y%m%d%H%M%S")
