"""Command: show store modules and their state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from appstate.commands._base import AppCommand
from appstate.output.formatters import format_snapshot

if TYPE_CHECKING:
    from appstate.commands._context import AppContext


@click.command(
    cls=AppCommand,
    examples="""\
  appstate state
  appstate state ui
  appstate --json state auth""",
)
@click.argument("module", required=False, type=click.Choice(["app", "auth", "ui"]))
@click.pass_obj
def state(app: AppContext, module: str | None) -> None:
    """Show store modules, their lifecycle status, and current state."""
    with app.boundary("state"):
        snapshot = app.registry.snapshot()
    if module is not None:
        snapshot = {module: snapshot[module]}
    title = None
    if not app.settings.json_output:
        title = f"{app.settings.app.title} {app.settings.app.version} ({app.settings.app.mode})"
    click.echo(format_snapshot(snapshot, json_output=app.settings.json_output, title=title))
