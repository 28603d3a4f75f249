"""
Console output utilities for verbump using Rich.

User-facing status messages and tables go through this module; diagnostic
output goes through :mod:`verbump.utils.logger`. Bare results that scripts
capture (a derived version string) are written with ``click.echo`` by the
commands instead.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Optional

from rich.table import Table
from rich.theme import Theme
from rich.console import Console

from verbump.models import ChangeLevel

VERBUMP_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "version": "bold magenta",
    }
)

_CHANGE_LEVEL_COLORS: Dict[ChangeLevel, str] = {
    ChangeLevel.MAJOR: "red",
    ChangeLevel.MINOR: "yellow",
    ChangeLevel.PATCH: "green",
}

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return the shared Rich console, creating it on first use."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=VERBUMP_THEME,
                    no_color=not use_color,
                    highlight=use_color,
                )
    return _console


def reconfigure_console() -> None:
    """Drop the shared console so the next call re-reads the environment."""
    global _console
    with _console_lock:
        _console = None


def get_raw_console() -> Console:
    """Return the underlying Rich console."""
    return _get_console()


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    """Print a success message."""
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Render rows of dictionaries as a Rich table.

    Args:
        data: Row dictionaries. Nothing is printed when empty.
        headers: Column order. Defaults to the keys of the first row.
        title: Optional table title.
        column_styles: Per-column ``style``/``justify``/``no_wrap`` settings.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold")

    column_styles = column_styles or {}
    for header in headers:
        config = column_styles.get(header, {})
        table.add_column(
            header,
            style=config.get("style"),
            justify=config.get("justify", "default"),
            no_wrap=config.get("no_wrap", False),
        )

    for row in data:
        table.add_row(*(_cell(row.get(h)) for h in headers))

    _get_console().print(table)


def _cell(value: Any) -> str:
    return "-" if value is None or value == "" else str(value)


def colorize_change_level(level: ChangeLevel) -> str:
    """Return a Rich-markup label for ``level``, coloured by severity.

    Examples:
        >>> colorize_change_level(ChangeLevel.MAJOR)
        '[red]major[/red]'
    """
    label = str(level)
    color = _CHANGE_LEVEL_COLORS.get(level)
    return f"[{color}]{label}[/{color}]" if color else label
