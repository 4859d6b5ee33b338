"""Command group: presentation preferences."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from appstate.commands._base import AppGroup

if TYPE_CHECKING:
    from appstate.commands._context import AppContext


@click.group(
    cls=AppGroup,
    examples="""\
  appstate ui toggle-theme
  appstate ui toggle-sidebar""",
)
def ui() -> None:
    """Change persisted UI preferences."""


@ui.command("toggle-theme")
@click.pass_obj
def toggle_theme(app: AppContext) -> None:
    """Switch between the light and dark theme."""
    from appstate.usecases.ui import ToggleThemeUseCase

    app.execute("toggle_theme", lambda registry: ToggleThemeUseCase(registry.ui))


@ui.command("toggle-sidebar")
@click.pass_obj
def toggle_sidebar(app: AppContext) -> None:
    """Collapse or expand the sidebar."""
    from appstate.usecases.ui import ToggleSidebarUseCase

    app.execute("toggle_sidebar", lambda registry: ToggleSidebarUseCase(registry.ui))
