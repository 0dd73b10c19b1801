"""Color lookup tables shared by the formatters."""

from enum import Enum
from types import MappingProxyType


class HtmlColor(str, Enum):
    """Color bands used by the HTML report."""

    SUCCESS = "#28a745"
    WARNING = "#ffc107"
    DANGER = "#dc3545"
    PRIMARY = "#007bff"


# rich color names for terminal output
GRADE_COLORS = MappingProxyType(
    {
        "A+": "green",
        "A": "green",
        "A-": "green",
        "B+": "yellow",
        "B": "yellow",
        "B-": "yellow",
        "C+": "red",
        "C": "red",
        "C-": "red",
        "D+": "red",
        "D": "red",
        "D-": "red",
        "F": "red",
    }
)
UNKNOWN_GRADE_COLOR = "white"


def grade_color(grade: str | None) -> str:
    """Terminal color for a letter grade."""
    if grade is None:
        return UNKNOWN_GRADE_COLOR
    return GRADE_COLORS.get(grade, UNKNOWN_GRADE_COLOR)


def status_color(passed: bool) -> str:
    return "green" if passed else "red"


def html_grade_color(grade: str | None) -> HtmlColor:
    """HTML color band for a letter grade."""
    if grade and grade.startswith("A"):
        return HtmlColor.SUCCESS
    if grade and grade.startswith("B"):
        return HtmlColor.WARNING
    return HtmlColor.DANGER


def html_status_color(passed: bool) -> HtmlColor:
    return HtmlColor.SUCCESS if passed else HtmlColor.DANGER
