"""Sign-in and sign-out use-cases."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from appstate.domain.models import Email, User
from appstate.domain.result import Result
from appstate.domain.usecase import UseCase

if TYPE_CHECKING:
    from appstate.store.modules.auth import AuthStore

logger = logging.getLogger(__name__)

TokenVerifier = Callable[[str], Awaitable[bool]]


class LoginRequest(BaseModel):
    """Raw sign-in input; validated by :class:`LoginUseCase`."""

    model_config = {"frozen": True}

    user_id: str
    email: str
    name: str
    token: str


class LoginUseCase(UseCase[LoginRequest, User]):
    """Validate credentials and record the signed-in user.

    *verify_token* is awaited when given. Returning False is an expected
    failure; raising (network, storage) propagates to the caller.
    """

    def __init__(self, auth: AuthStore, verify_token: TokenVerifier | None = None) -> None:
        self._auth = auth
        self._verify_token = verify_token

    async def execute(self, request: LoginRequest) -> Result[User]:
        if not request.token.strip():
            return Result.fail("Token must not be empty")
        try:
            user = User(id=request.user_id, email=Email(request.email), name=request.name)
        except ValidationError as exc:
            return Result.fail(_describe(exc))

        if self._auth.state.is_authenticated:
            return Result.fail("Already signed in; sign out first")

        if self._verify_token is not None and not await self._verify_token(request.token):
            return Result.fail("Invalid credentials")

        self._auth.sign_in(user, request.token)
        logger.info("Signed in user %s", user.id)
        return Result.ok(user)


class LogoutUseCase(UseCase[None, None]):
    """Clear the session. Fails when nobody is signed in."""

    def __init__(self, auth: AuthStore) -> None:
        self._auth = auth

    async def execute(self, request: None = None) -> Result[None]:
        if not self._auth.state.is_authenticated:
            return Result.fail("Not signed in")
        self._auth.logout()
        logger.info("Signed out")
        return Result.ok(None)


def _describe(exc: ValidationError) -> str:
    """First validation message, without pydantic's URL trailer."""
    errors = exc.errors(include_url=False)
    if not errors:
        return "Invalid request"
    first = errors[0]
    message = str(first.get("msg", "Invalid request"))
    return message.removeprefix("Value error, ")
