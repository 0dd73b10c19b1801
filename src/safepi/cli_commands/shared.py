"""Shared CLI app objects."""

import typer
from rich.console import Console

# Single-command apps take their context settings from the command itself,
# so commands pass this too.
CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    name="safepi",
    help="Scan websites with the Mozilla Observatory API",
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)
console = Console()
err_console = Console(stderr=True)
