"""Argument parsing helpers for the scan command."""

import logging
import re
from typing import Any

from safepi.config import (
    get_default_output,
    get_default_report,
    get_default_score,
    get_verbose,
)
from safepi.exceptions import ArgumentError
from safepi.models import ReportFormat, ScanConfig

OPTIONAL_VALUE_FLAGS = ("-f", "--fail")
SCORE_PATTERN = re.compile(r"-?\d+", re.ASCII)


def normalize_optional_flags(args: list[str]) -> list[str]:
    """Expand a bare ``--fail``/``-f`` into ``--fail true``.

    The flag is bare when it is the last token or the next token is another
    option.
    """
    normalized: list[str] = []
    for index, arg in enumerate(args):
        normalized.append(arg)
        if arg in OPTIONAL_VALUE_FLAGS:
            next_arg = args[index + 1] if index + 1 < len(args) else None
            if next_arg is None or next_arg.startswith("-"):
                normalized.append("true")
    return normalized


def parse_bool_option(value: str, flag: str) -> bool:
    """Parse a case-insensitive ``true``/``false`` option value."""
    lowered = value.strip().lower() if isinstance(value, str) else ""
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ArgumentError(f"{flag} must be either true or false")


def parse_domains(raw: str | None) -> tuple[str, ...]:
    """Split the comma-separated domain list, keeping order and dropping blanks."""
    if raw is None:
        raise ArgumentError("--domain is required")
    domains = tuple(part.strip() for part in raw.split(",") if part.strip())
    if not domains:
        raise ArgumentError("--domain is required")
    return domains


def parse_score(raw: Any) -> int:
    """Parse the passing score. Zero and negative values are allowed."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    if not SCORE_PATTERN.fullmatch(text):
        raise ArgumentError("--score must be a number")
    return int(text)


def parse_report_format(raw: Any) -> ReportFormat:
    try:
        return ReportFormat(str(raw).strip())
    except ValueError:
        choices = ", ".join(fmt.value for fmt in ReportFormat)
        raise ArgumentError(f"--report must be one of: {choices}") from None


def parse_output(raw: Any) -> str:
    output = str(raw).strip()
    if not output:
        raise ArgumentError("--output requires a value")
    return output


def build_scan_config(
    domain: str | None,
    score: str | None,
    report: str | None,
    output: str | None,
    fail: str,
    hidden: str,
    rescan: str,
) -> ScanConfig:
    """Validate raw option values and build the run configuration.

    Options left unset fall back to the configured defaults.
    """
    return ScanConfig(
        domains=parse_domains(domain),
        passing_score=parse_score(score if score is not None else get_default_score()),
        report_format=parse_report_format(report if report is not None else get_default_report()),
        output_path=parse_output(output if output is not None else get_default_output()),
        fail_on_issue=parse_bool_option(fail, "--fail"),
        hidden=parse_bool_option(hidden, "--hidden"),
        rescan=parse_bool_option(rescan, "--rescan"),
    )


def normalize_verbose(verbose: bool) -> bool:
    """Resolve effective verbose flag from CLI arg and configuration."""
    effective = verbose if isinstance(verbose, bool) else False
    return effective or get_verbose()


def configure_logging(verbose: bool) -> None:
    """Send SafePI log records to stderr at WARNING, or DEBUG when verbose."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("safepi").setLevel(logging.DEBUG if verbose else logging.WARNING)
