"""app module — application-wide flags and the configured version."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from appstate.store.base import StoreModule


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_initialized: bool = False
    version: str = "1.0.0"


class AppStore(StoreModule[AppState]):
    """Tracks whether the application finished starting. Nothing is persisted."""

    name = "app"
    state_model = AppState

    def initial_state(self) -> AppState:
        return AppState(version=self._registry.config.version)

    def set_initialized(self, value: bool) -> None:
        self._commit(is_initialized=value)

    def _on_initialize(self) -> None:
        self.set_initialized(True)
