"""Multi-domain run summary."""

from collections.abc import Sequence

from rich.text import Text

from safepi.models import ScanFailure, ScanResult, ScanSummary

RULE_WIDTH = 50


def separator() -> str:
    """Visual break printed between domains."""
    return "\n" + "=" * RULE_WIDTH + "\n"


def build_summary(results: Sequence[ScanResult]) -> Text:
    """Build the per-domain status lines and the aggregate counts."""
    rule = "=" * RULE_WIDTH
    text = Text()
    text.append(f"\n{rule}\n")
    text.append("SCAN SUMMARY", style="bold cyan")
    text.append(f"\n{rule}\n")

    for result in results:
        text.append(f"{result.domain}: ")
        outcome = result.outcome
        if isinstance(outcome, ScanFailure):
            text.append("ERROR", style="red")
            text.append(f" ({outcome.reason})\n")
            continue
        text.append("PASS" if outcome.passed else "FAIL", style="green" if outcome.passed else "red")
        text.append(f" ({outcome.score}/{outcome.passing_score})\n")

    summary = ScanSummary.from_results(results)
    text.append("\n")
    text.append("Results:", style="bold")
    text.append("\n")
    text.append(f"  Passed: {summary.passed}", style="green")
    text.append("\n")
    text.append(f"  Failed: {summary.failed}", style="red")
    text.append("\n")
    text.append(f"  Errors: {summary.errored}", style="red")
    text.append("\n")
    text.append(f"  Total: {summary.total}")
    return text
