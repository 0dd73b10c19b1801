"""Colored terminal rendering."""

from rich.console import Console
from rich.text import Text

from safepi.models import ObservatoryScan

from .colors import grade_color, status_color
from .dates import local_timestamp


def _append_field(text: Text, label: str) -> None:
    text.append(label, style="bold")
    text.append(" ")


def build_pretty_text(scan: ObservatoryScan, passing_score: int) -> Text:
    """Build the styled rich ``Text`` for a scan."""
    passed = scan.passed(passing_score)
    text = Text()

    text.append("\n")
    text.append("Security Scan Results", style="bold cyan")
    text.append("\n")

    _append_field(text, "Domain:")
    text.append(scan.host or "Unknown")
    text.append("\n")

    _append_field(text, "Status:")
    text.append("PASS" if passed else "FAIL", style=status_color(passed))
    text.append("\n")

    _append_field(text, "Grade:")
    text.append(scan.grade or "N/A", style=f"bold {grade_color(scan.grade)}")
    text.append("\n")

    _append_field(text, "Score:")
    text.append(str(scan.score), style=status_color(passed))
    text.append(f"/{passing_score}\n")

    _append_field(text, "Tests:")
    text.append(f"{scan.tests_passed} passed", style="green")
    text.append(", ")
    text.append(f"{scan.tests_failed} failed", style=status_color(scan.tests_failed == 0))
    text.append(f" ({scan.tests_quantity} total)\n")

    _append_field(text, "Scanned:")
    text.append(local_timestamp(scan.scanned_at))
    text.append("\n")

    _append_field(text, "Details:")
    text.append(scan.details_url or "N/A", style="blue")
    text.append("\n")
    return text


def format_pretty(scan: ObservatoryScan, passing_score: int) -> str:
    """Render a scan as ANSI-colored text."""
    console = Console(
        force_terminal=True,
        color_system="standard",
        highlight=False,
        soft_wrap=True,
        legacy_windows=False,
    )
    with console.capture() as capture:
        console.print(build_pretty_text(scan, passing_score), end="")
    return capture.get()
