"""Rich/JSON output helpers.

The CLI renders a use-case Result or a registry snapshot for humans
(Rich tables) or machines (--json).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from appstate.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from appstate.domain.result import Result


def _display(value: Any) -> str:
    if isinstance(value, dict | list):
        return _json.dumps(value, separators=(",", ":"))
    if value is None:
        return "-"
    return str(value)


def format_result(result: Result[Any], op: str, *, json_output: bool = False) -> str:
    """Format a use-case Result for display.

    Args:
        result: The outcome to format.
        op: Operation name shown to the user (e.g. ``"toggle_theme"``).
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    payload = result.to_dict()
    if json_output:
        return _json.dumps({"op": op, **payload}, indent=2)

    console = create_console()
    if result.is_success:
        console.print(f"[app.ok]OK[/app.ok]: [app.op]{op}[/app.op]")
        value = payload["value"]
        if isinstance(value, dict):
            for key, item in value.items():
                console.print(f"  [app.key]{key}:[/app.key] {escape(_display(item))}")
        elif value is not None:
            console.print(f"  {escape(_display(value))}")
    else:
        console.print(
            f"[app.error]ERROR[/app.error]: [app.op]{op}[/app.op] - {escape(str(result.error))}"
        )
    return get_output(console).rstrip("\n")


def format_snapshot(
    snapshot: dict[str, dict[str, Any]],
    *,
    json_output: bool = False,
    title: str | None = None,
) -> str:
    """Format a registry snapshot as one table per module, or JSON."""
    if json_output:
        return _json.dumps(snapshot, indent=2)

    console = create_console()
    for name, entry in snapshot.items():
        status = entry["status"]
        table = Table(
            title=f"[app.module]{name}[/app.module] ([{style_for_status(status)}]{status}[/])",
            title_justify="left",
            show_header=False,
            box=None,
            padding=(0, 2),
        )
        table.add_column("field", style="app.key")
        table.add_column("value")
        for key, value in entry["state"].items():
            table.add_row(key, escape(_display(value)))
        console.print(table)
    text = get_output(console).rstrip("\n")
    if title:
        return f"{title}\n{text}"
    return text
