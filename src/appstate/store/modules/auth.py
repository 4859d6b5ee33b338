"""auth module — current user and session token.

Only the token survives a restart; the user record and the authenticated
flag are rebuilt by the initializer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from appstate.domain.models import User
from appstate.store.base import StoreModule


class AuthState(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: User | None = None
    is_authenticated: bool = False
    token: str | None = None


class AuthStore(StoreModule[AuthState]):
    name = "auth"
    state_model = AuthState
    persist = ("token",)

    def set_user(self, user: User | None) -> None:
        self._commit(user=user, is_authenticated=user is not None)

    def set_token(self, token: str | None) -> None:
        self._commit(token=token)

    def sign_in(self, user: User, token: str) -> None:
        """Record *user* and *token* in one step."""
        self._commit(user=user, token=token, is_authenticated=True)

    def logout(self) -> None:
        self._commit(user=None, token=None, is_authenticated=False)

    def _on_initialize(self) -> None:
        # Runs after app; a stored token restores the authenticated flag.
        self._registry.require_active("app")
        if self._state.token:
            self._commit(is_authenticated=True)
