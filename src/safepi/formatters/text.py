"""Plain text rendering."""

from safepi.models import ObservatoryScan


def format_text(scan: ObservatoryScan, passing_score: int) -> str:
    """Render a scan as plain text without color codes."""
    status = "PASS" if scan.passed(passing_score) else "FAIL"
    lines = [
        f"Security Scan Results for {scan.host or 'Unknown'}",
        f"Status: {status}",
        f"Grade: {scan.grade or 'N/A'}",
        f"Score: {scan.score}/{passing_score}",
        f"Tests Passed: {scan.tests_passed}/{scan.tests_quantity}",
        f"Tests Failed: {scan.tests_failed}",
        f"Scanned At: {scan.scanned_at or 'N/A'}",
        f"Details URL: {scan.details_url or 'N/A'}",
    ]
    return "\n".join(lines)
