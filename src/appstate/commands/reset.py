"""Command: forget persisted state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from appstate.commands._base import AppCommand
from appstate.domain.result import Result

if TYPE_CHECKING:
    from appstate.commands._context import AppContext


@click.command(
    cls=AppCommand,
    examples="""\
  appstate reset ui --yes
  appstate reset --yes""",
)
@click.argument("module", required=False, type=click.Choice(["app", "auth", "ui"]))
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def reset(app: AppContext, module: str | None, yes: bool) -> None:
    """Clear persisted values so the next session starts fresh."""
    target = module or "all modules"
    if not yes:
        click.confirm(f"Forget persisted state of {target}?", abort=True)
    with app.boundary("reset"):
        app.registry.reset(module)
    app.emit(Result.ok({"module": module or "all"}), "reset")
