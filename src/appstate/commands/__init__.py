"""Subcommand modules for appstate.

Provides register_commands() which uses deferred imports to keep
``appstate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from appstate.commands.auth import auth
    from appstate.commands.ui import ui

    cli.add_command(auth)
    cli.add_command(ui)

    # --- Standalone commands ---
    from appstate.commands.reset import reset
    from appstate.commands.state import state

    cli.add_command(state)
    cli.add_command(reset)
