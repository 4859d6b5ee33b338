"""Built-in store modules, in initialization order.

Later modules may assume earlier ones are Active, never the reverse.
"""

from appstate.store.modules.app import AppState, AppStore
from appstate.store.modules.auth import AuthState, AuthStore
from appstate.store.modules.ui import UiState, UiStore

DEFAULT_MODULES = (AppStore, AuthStore, UiStore)

__all__ = [
    "DEFAULT_MODULES",
    "AppState",
    "AppStore",
    "AuthState",
    "AuthStore",
    "UiState",
    "UiStore",
]
