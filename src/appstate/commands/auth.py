"""Command group: sign in and sign out."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from appstate.commands._base import AppGroup

if TYPE_CHECKING:
    from appstate.commands._context import AppContext


@click.group(
    cls=AppGroup,
    examples="""\
  appstate auth login --user-id u1 --email ada@example.com --name Ada --token s3cr3t
  appstate auth logout""",
)
def auth() -> None:
    """Manage the signed-in session."""


@auth.command()
@click.option("--user-id", required=True, help="Stable user identifier.")
@click.option("--email", required=True, help="User email address.")
@click.option("--name", required=True, help="Display name.")
@click.option("--token", required=True, help="Session token to persist.")
@click.pass_obj
def login(app: AppContext, user_id: str, email: str, name: str, token: str) -> None:
    """Sign in and persist the session token."""
    from appstate.usecases.auth import LoginRequest, LoginUseCase

    request = LoginRequest(user_id=user_id, email=email, name=name, token=token)
    app.execute("login", lambda registry: LoginUseCase(registry.auth), request)


@auth.command()
@click.pass_obj
def logout(app: AppContext) -> None:
    """Sign out and forget the stored token."""
    from appstate.usecases.auth import LogoutUseCase

    app.execute("logout", lambda registry: LogoutUseCase(registry.auth))
