"""Scan CLI command entrypoint."""

from typing import Optional

import typer
from rich.markup import escape

from safepi.exceptions import ArgumentError, OutputError
from safepi.models import ScanConfig, ScanResult

from .deps import cli_module
from .scan_helpers import build_scan_config, configure_logging, normalize_verbose
from .shared import CONTEXT_SETTINGS, app, console, err_console

EXAMPLES = """
Examples:

  safepi -d jnctn.nz

  safepi --domain jnctn.nz --score 90

  safepi -d domain1.com,domain2.com,domain3.com

  safepi -d jnctn.nz -r text --hidden false

  safepi -d jnctn.nz -s 85 -r html -o reports/ --rescan false

  safepi -d jnctn.nz --fail
"""


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
    except ImportError:  # pragma: no cover
        from importlib_metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("safepi")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"SafePI {current_version}")
    raise typer.Exit()


async def run_scans(cli, config: ScanConfig) -> list[ScanResult]:
    """Open one API client and scan every configured domain with it."""
    async with cli.ObservatoryClient() as client:
        orchestrator = cli.ScanOrchestrator(client, console=console, error_console=err_console)
        return await orchestrator.run(config)


@app.command(epilog=EXAMPLES, context_settings=CONTEXT_SETTINGS)
def scan(
    ctx: typer.Context,
    domain: Optional[str] = typer.Option(
        None,
        "--domain",
        "-d",
        help="Domain(s) to scan, e.g. jnctn.nz or domain1.com,domain2.com [required]",
        show_default=False,
    ),
    score: Optional[str] = typer.Option(
        None,
        "--score",
        "-s",
        help="Minimum score required (default: 100)",
        show_default=False,
    ),
    report: Optional[str] = typer.Option(
        None,
        "--report",
        "-r",
        help="Output format: text, pretty, or html (default: pretty)",
        show_default=False,
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Path for HTML reports (default: ./)",
        show_default=False,
    ),
    fail: str = typer.Option(
        "false",
        "--fail",
        "-f",
        help="Exit with code 1 when a score is below the threshold [true|false]",
    ),
    hidden: str = typer.Option("true", "--hidden", help="Hide scan from public results"),
    rescan: str = typer.Option("true", "--rescan", help="Force rescan of site"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose debug output"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the installed SafePI version",
    ),
) -> None:
    """Scan one or more domains and report their security grade."""
    cli = cli_module()
    effective_verbose = normalize_verbose(verbose)
    configure_logging(effective_verbose)
    cli.set_debug_enabled(effective_verbose)

    try:
        config = build_scan_config(domain, score, report, output, fail, hidden, rescan)
    except ArgumentError as exc:
        exc.ctx = ctx
        raise

    try:
        results = cli.safe_async_run(run_scans(cli, config))
    except OutputError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    exit_code = cli.decide_exit_code(results, config.fail_on_issue)
    if exit_code:
        raise typer.Exit(exit_code)
