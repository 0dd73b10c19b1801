"""SafePI CLI - website security scanner backed by the Mozilla Observatory."""

import logging
import sys
from collections.abc import Sequence

import typer
from rich.markup import escape

from safepi.client import ObservatoryClient
from safepi.orchestrator import ScanOrchestrator, decide_exit_code
from safepi.utils.async_utils import safe_async_run
from safepi.utils.debug import set_debug_enabled
from safepi.cli_commands.scan_helpers import normalize_optional_flags
from safepi.cli_commands.shared import app, console, err_console

# Register commands on the shared app.
from safepi.cli_commands import scan_command as _scan_command  # noqa: F401

logger = logging.getLogger(__name__)

# Status typer and click use for usage errors.
USAGE_ERROR_STATUS = 2

__all__ = [
    "ObservatoryClient",
    "ScanOrchestrator",
    "app",
    "console",
    "decide_exit_code",
    "err_console",
    "main",
    "run",
    "safe_async_run",
    "set_debug_enabled",
]


def _exit_status(code: object) -> int:
    """Map a ``SystemExit`` code to the process status.

    Usage errors exit with 1, not the status 2 used by click and typer.
    """
    if code is None:
        return 0
    if isinstance(code, int):
        return 1 if code == USAGE_ERROR_STATUS else code
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code.

    typer reports its own errors (usage block plus message on stderr) and
    exits. Unexpected errors are reported on one line and exit with 1.
    """
    args = normalize_optional_flags(list(sys.argv[1:] if argv is None else argv))
    command = typer.main.get_command(app)
    try:
        command.main(args=args, prog_name="safepi", standalone_mode=True)
    except SystemExit as exc:
        return _exit_status(exc.code)
    except KeyboardInterrupt:
        err_console.print("[red]Aborted.[/red]")
        return 1
    except Exception as exc:
        logger.debug("Unexpected error", exc_info=True)
        err_console.print(f"[red]Unexpected error: {escape(str(exc))}[/red]")
        return 1
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
