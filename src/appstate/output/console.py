"""Rich Console factory and theme for appstate output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_*() -> str`` contract. In non-TTY environments (tests, pipes)
Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

APPSTATE_THEME = Theme(
    {
        "app.ok": "bold green",
        "app.error": "bold red",
        "app.op": "bold cyan",
        "app.key": "dim",
        "app.module": "bold blue",
        "app.status.active": "green",
        "app.status.initialized": "yellow",
        "app.status.uninitialized": "dim",
        "app.status.disposed": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=APPSTATE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a module status."""
    return f"app.status.{status}"
