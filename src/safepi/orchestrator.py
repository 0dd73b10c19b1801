"""Sequential scan driver: validate, request, render, throttle, summarize."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .client import ApiResponse
from .exceptions import ApiError, OutputError, PathTraversalError, TransportError
from .formatters import build_summary, format_result, separator
from .models import (
    FailureCategory,
    ObservatoryScan,
    ReportFormat,
    ScanConfig,
    ScanResult,
)
from .report_writer import check_output_dir, write_html_report
from .utils.debug import debug_print
from .validators import is_valid_domain

logger = logging.getLogger(__name__)

# Seconds between two API requests. Fixed on purpose: the API is a shared
# third-party service.
INTER_SCAN_DELAY = 1.0


class ScanClient(Protocol):
    """What the orchestrator needs from an API client."""

    async def scan(self, domain: str, hidden: bool = True, rescan: bool = True) -> ApiResponse: ...


def decide_exit_code(results: Sequence[ScanResult], fail_on_issue: bool) -> int:
    """Exit status for a finished run.

    Any failed scan (the check did not run) always exits 1. A score below the
    threshold only exits 1 when ``fail_on_issue`` is set.
    """
    if any(not result.succeeded for result in results):
        return 1
    if fail_on_issue and any(not result.passed for result in results):
        return 1
    return 0


class ScanOrchestrator:
    """Scan domains one at a time, never concurrently."""

    def __init__(
        self,
        client: ScanClient,
        console: Console | None = None,
        error_console: Console | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.client = client
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self._sleep = sleep

    async def run(self, config: ScanConfig) -> list[ScanResult]:
        """Scan every configured domain in order and return one result per domain.

        Raises ``PathTraversalError`` before any request when HTML reports
        would be written to an unsafe directory.
        """
        if config.report_format == ReportFormat.HTML:
            check_output_dir(config.output_path)

        results: list[ScanResult] = []
        for index, domain in enumerate(config.domains):
            if index > 0:
                await self.rate_limit()
            results.append(await self.scan_domain(domain, config))

        if len(config.domains) > 1:
            self.console.print(build_summary(results), soft_wrap=True)
        return results

    async def rate_limit(self) -> None:
        """Print the separator and wait before the next request."""
        self._print_plain(separator())
        debug_print("scan", f"Waiting {INTER_SCAN_DELAY:g}s before next request")
        await self._sleep(INTER_SCAN_DELAY)

    async def scan_domain(self, domain: str, config: ScanConfig) -> ScanResult:
        """Scan a single domain and classify the outcome."""
        if not is_valid_domain(domain):
            self.error_console.print(f"[red]Invalid domain format: {escape(domain)}[/red]")
            return ScanResult.failure(domain, "Invalid domain format", FailureCategory.VALIDATION)

        self.console.print(f"Scanning {escape(domain)}...")
        try:
            response = await self.client.scan(domain, hidden=config.hidden, rescan=config.rescan)
        except TransportError as exc:
            return self._failure(domain, f"Error scanning {domain}", exc, FailureCategory.TRANSPORT)
        except ApiError as exc:
            return self._failure(domain, f"Error scanning {domain}", exc, FailureCategory.API)

        if response.status_code != 200:
            self.error_console.print(
                f"[red]API Error for {escape(domain)}: HTTP {response.status_code}[/red]"
            )
            debug_print("scan", f"Error body for {domain}", Response=response.data)
            return ScanResult.failure(
                domain, f"HTTP {response.status_code}", FailureCategory.API
            )

        try:
            scan = ObservatoryScan.from_payload(response.data, host=domain)
        except ApiError as exc:
            return self._failure(domain, f"Scan Error for {domain}", exc, FailureCategory.API)

        try:
            self._emit_report(scan, config)
        except PathTraversalError:
            raise
        except OutputError as exc:
            return self._failure(domain, f"Report Error for {domain}", exc, FailureCategory.OUTPUT)

        return ScanResult.success(domain, scan.score, config.passing_score)

    def _emit_report(self, scan: ObservatoryScan, config: ScanConfig) -> None:
        output = format_result(scan, config.passing_score, config.report_format)
        if config.report_format == ReportFormat.HTML:
            report_file = write_html_report(config.output_path, scan.host or "unknown", output)
            self.console.print(f"HTML report saved to: {escape(str(report_file))}", soft_wrap=True)
        elif config.report_format == ReportFormat.PRETTY:
            self.console.print(Text.from_ansi(output), soft_wrap=True)
        else:
            self._print_plain(output)

    def _failure(
        self,
        domain: str,
        prefix: str,
        exc: Exception,
        category: FailureCategory,
    ) -> ScanResult:
        logger.debug("%s failed (%s)", domain, category.value, exc_info=exc)
        self.error_console.print(f"[red]{escape(prefix)}: {escape(str(exc))}[/red]", soft_wrap=True)
        return ScanResult.failure(domain, str(exc), category)

    def _print_plain(self, output: str) -> None:
        self.console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)
