"""Test configuration and fixtures for SafePI."""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from safepi.client import ApiResponse
from safepi.models import ObservatoryScan


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def in_temp_dir(temp_dir: Path) -> Generator[Path, None, None]:
    """Run the test with the temporary directory as working directory."""
    original_cwd = os.getcwd()
    os.chdir(temp_dir)
    try:
        yield temp_dir
    finally:
        os.chdir(original_cwd)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
    """Keep user configuration out of the tests."""
    for key in ("SAFEPI_SCORE", "SAFEPI_REPORT", "SAFEPI_OUTPUT", "SAFEPI_VERBOSE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(Path, "home", lambda: temp_dir / "home")


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """Return an Observatory API payload for a well configured site."""
    return {
        "id": 12345,
        "details_url": "https://developer.mozilla.org/en-US/observatory/analyze?host=example.com",
        "algorithm_version": 4,
        "scanned_at": "2024-01-15T10:30:00.000Z",
        "error": None,
        "grade": "A+",
        "score": 105,
        "status_code": 200,
        "tests_failed": 0,
        "tests_passed": 10,
        "tests_quantity": 10,
    }


@pytest.fixture
def sample_scan(sample_payload: dict[str, Any]) -> ObservatoryScan:
    """Return the decoded sample payload."""
    return ObservatoryScan.from_payload(sample_payload, host="example.com")


class FakeClient:
    """Stand-in for ObservatoryClient returning canned responses per domain."""

    def __init__(self, responses: dict[str, ApiResponse | Exception] | None = None):
        self.responses = responses or {}
        self.calls: list[tuple[str, bool, bool]] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def scan(self, domain: str, hidden: bool = True, rescan: bool = True) -> ApiResponse:
        self.calls.append((domain, hidden, rescan))
        response = self.responses[domain]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_client_factory():
    """Build FakeClient instances."""
    return FakeClient
