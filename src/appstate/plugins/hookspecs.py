"""Pluggy hook specifications for store lifecycle events and UI side effects."""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("appstate")
hookimpl = pluggy.HookimplMarker("appstate")


class AppStateHookSpec:
    """Hook specifications for the appstate plugin system."""

    @hookspec
    def post_module_initialized(self, module_name: str, state: dict[str, Any]) -> None:
        """Called after a store module becomes Active."""

    @hookspec
    def post_state_change(
        self,
        module_name: str,
        fields_changed: list[str],
        state: dict[str, Any],
    ) -> None:
        """Called after an action changed one or more fields of a module."""

    @hookspec
    def apply_theme(self, theme: str) -> None:
        """Apply *theme* to the presentation root.

        Called by the ui module initializer. Unlike notifications, failures
        here abort store initialization.
        """
