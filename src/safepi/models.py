"""Data models for scan configuration, API payloads and results."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import ApiError, InvalidResponseError


class ReportFormat(str, Enum):
    """Output format for a scan result."""

    TEXT = "text"
    PRETTY = "pretty"
    HTML = "html"


class FailureCategory(str, Enum):
    """Why a domain did not produce a scan result."""

    VALIDATION = "validation"
    TRANSPORT = "transport"
    API = "api"
    OUTPUT = "output"


@dataclass(frozen=True)
class ScanConfig:
    """Settings for one run, built once from the command line."""

    domains: tuple[str, ...]
    passing_score: int = 100
    report_format: ReportFormat = ReportFormat.PRETTY
    output_path: str = "./"
    fail_on_issue: bool = False
    hidden: bool = True
    rescan: bool = True


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass but never a valid count or score
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidResponseError(f"Malformed scan payload: '{key}' is missing or not an integer")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class ObservatoryScan:
    """Decoded scan payload returned by the Observatory API."""

    score: int
    tests_passed: int
    tests_quantity: int
    tests_failed: int
    grade: str | None = None
    scanned_at: str | None = None
    host: str | None = None
    details_url: str | None = None
    algorithm_version: str | None = None

    @classmethod
    def from_payload(cls, data: Any, host: str | None = None) -> "ObservatoryScan":
        """
        Decode an API response body.

        A payload carrying an ``error`` field is a failed scan even when the
        HTTP status was 200, and raises ``ApiError`` with that message.
        """
        if not isinstance(data, dict):
            raise InvalidResponseError("Malformed scan payload: expected a JSON object")

        error = data.get("error")
        if error:
            raise ApiError(str(error))

        return cls(
            score=_require_int(data, "score"),
            tests_passed=_require_int(data, "tests_passed"),
            tests_quantity=_require_int(data, "tests_quantity"),
            tests_failed=_require_int(data, "tests_failed"),
            grade=_optional_str(data, "grade"),
            scanned_at=_optional_str(data, "scanned_at"),
            host=host if host is not None else _optional_str(data, "host"),
            details_url=_optional_str(data, "details_url"),
            algorithm_version=_optional_str(data, "algorithm_version"),
        )

    def passed(self, passing_score: int) -> bool:
        return self.score >= passing_score


@dataclass(frozen=True)
class ScanSuccess:
    """The scan ran; ``passed`` says whether the score met the threshold."""

    score: int
    passing_score: int

    @property
    def passed(self) -> bool:
        return self.score >= self.passing_score


@dataclass(frozen=True)
class ScanFailure:
    """The scan did not run to completion."""

    reason: str
    category: FailureCategory = FailureCategory.API


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one domain in a run."""

    domain: str
    outcome: ScanSuccess | ScanFailure

    @classmethod
    def success(cls, domain: str, score: int, passing_score: int) -> "ScanResult":
        return cls(domain=domain, outcome=ScanSuccess(score=score, passing_score=passing_score))

    @classmethod
    def failure(
        cls,
        domain: str,
        reason: str,
        category: FailureCategory = FailureCategory.API,
    ) -> "ScanResult":
        return cls(domain=domain, outcome=ScanFailure(reason=reason, category=category))

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, ScanSuccess)

    @property
    def passed(self) -> bool:
        return isinstance(self.outcome, ScanSuccess) and self.outcome.passed


@dataclass(frozen=True)
class ScanSummary:
    """Aggregate counts over a run's results."""

    passed: int
    failed: int
    errored: int
    total: int

    @classmethod
    def from_results(cls, results: Iterable[ScanResult]) -> "ScanSummary":
        results = list(results)
        passed = sum(1 for result in results if result.passed)
        errored = sum(1 for result in results if not result.succeeded)
        return cls(
            passed=passed,
            failed=len(results) - passed - errored,
            errored=errored,
            total=len(results),
        )
