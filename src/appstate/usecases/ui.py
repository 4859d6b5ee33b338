"""Presentation-preference use-cases."""

from __future__ import annotations

from typing import TYPE_CHECKING

from appstate.domain.models import Theme
from appstate.domain.result import Result
from appstate.domain.usecase import UseCase

if TYPE_CHECKING:
    from appstate.store.modules.ui import UiStore


class ToggleThemeUseCase(UseCase[None, Theme]):
    """Switch between light and dark; returns the new theme."""

    def __init__(self, ui: UiStore) -> None:
        self._ui = ui

    async def execute(self, request: None = None) -> Result[Theme]:
        self._ui.toggle_theme()
        return Result.ok(self._ui.state.theme)


class ToggleSidebarUseCase(UseCase[None, bool]):
    """Collapse or expand the sidebar; returns the new collapsed flag."""

    def __init__(self, ui: UiStore) -> None:
        self._ui = ui

    async def execute(self, request: None = None) -> Result[bool]:
        self._ui.toggle_sidebar()
        return Result.ok(self._ui.state.sidebar_collapsed)
