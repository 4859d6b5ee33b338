"""Application layer — use-cases over the store modules.

Use-cases may import from domain and store. They must never import from
commands or output.
"""

from appstate.usecases.auth import LoginRequest, LoginUseCase, LogoutUseCase
from appstate.usecases.ui import ToggleSidebarUseCase, ToggleThemeUseCase

__all__ = [
    "LoginRequest",
    "LoginUseCase",
    "LogoutUseCase",
    "ToggleSidebarUseCase",
    "ToggleThemeUseCase",
]
