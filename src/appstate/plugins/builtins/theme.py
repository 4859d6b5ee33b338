"""Built-in plugin tracking the CSS classes on the presentation root.

The dark theme is expressed as a ``dark`` class on the document root.
The class is applied when the ui module starts and kept in sync with
later theme changes.
"""

from __future__ import annotations

from typing import Any

from appstate.domain.models import Theme
from appstate.plugins.hookspecs import hookimpl

DARK_CLASS = "dark"


class RootClassPlugin:
    """Keeps ``classes`` in step with the active theme."""

    def __init__(self) -> None:
        self.classes: set[str] = set()

    @hookimpl
    def apply_theme(self, theme: str) -> None:
        if Theme(theme) is Theme.DARK:
            self.classes.add(DARK_CLASS)
        else:
            self.classes.discard(DARK_CLASS)

    @hookimpl
    def post_state_change(
        self,
        module_name: str,
        fields_changed: list[str],
        state: dict[str, Any],
    ) -> None:
        if module_name == "ui" and "theme" in fields_changed:
            self.apply_theme(state["theme"])
