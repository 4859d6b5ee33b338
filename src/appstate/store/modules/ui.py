"""ui module — theme, sidebar, and the transient loading flag."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from appstate.domain.models import Theme
from appstate.store.base import StoreModule


class UiState(BaseModel):
    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme.LIGHT
    sidebar_collapsed: bool = False
    loading: bool = False


class UiStore(StoreModule[UiState]):
    """Presentation preferences. ``loading`` is volatile."""

    name = "ui"
    state_model = UiState
    persist = ("theme", "sidebar_collapsed")

    def toggle_theme(self) -> None:
        self._commit(theme=self._state.theme.toggled())

    def toggle_sidebar(self) -> None:
        self._commit(sidebar_collapsed=not self._state.sidebar_collapsed)

    def set_loading(self, value: bool) -> None:
        self._commit(loading=value)

    def _on_initialize(self) -> None:
        plugins = self._registry.plugins
        if plugins is not None:
            plugins.hook.apply_theme(theme=str(self._state.theme))
