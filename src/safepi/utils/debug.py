"""Debug output for verbose runs.

Rendered with rich so payloads stay readable in a terminal.
"""

import json
from typing import Any

from rich.console import Console
from rich.syntax import Syntax

_debug_state = {"enabled": False}


def set_debug_enabled(enabled: bool) -> None:
    """Turn debug output on or off for the process."""
    _debug_state["enabled"] = enabled


def is_debug_enabled() -> bool:
    return _debug_state["enabled"]


def debug_print(category: str, message: str, **data: Any) -> None:
    """Print debug information if debug mode is enabled.

    Args:
        category: Debug category (api, scan, config)
        message: Main message to display
        **data: Additional key-value pairs to display
    """
    if not is_debug_enabled():
        return
    console = Console(stderr=True)
    console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            try:
                json_str = json.dumps(value, indent=2)
                syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)
                console.print(f"  {key}:", style="dim", markup=False)
                console.print(syntax)
            except (TypeError, ValueError):
                console.print(f"  {key}: {value}", style="dim", markup=False)
        elif isinstance(value, str) and len(value) > 100:
            console.print(f"  {key}: {value[:100]}... ({len(value)} chars)", style="dim", markup=False)
        else:
            console.print(f"  {key}: {value}", style="dim", markup=False)
