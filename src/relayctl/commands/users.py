"""Command group: manage users and their connections."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from relayctl.commands._base import RelayGroup

if TYPE_CHECKING:
    from relayctl.commands._context import AppContext


@click.group(
    cls=RelayGroup,
    examples=(
        "relayctl users add 42 --name Ada",
        "relayctl users connect 42 7",
        "relayctl users list",
        "relayctl users show 42",
        "relayctl users disconnect 42 7",
    ),
)
def users() -> None:
    """Manage the user/connection directory."""


@users.command(examples=("relayctl users add 42", "relayctl users add 42 --name Ada"))
@click.argument("user_id")
@click.option("--name", default=None, help="Display name.")
@click.pass_obj
def add(app: AppContext, user_id: str, name: str | None) -> None:
    """Add a user."""
    from relayctl.services.users import UserService

    app.emit(UserService(app.workspace).add_user(user_id, name))


@users.command("list", examples=("relayctl users list", "relayctl --json users list"))
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List users and their connections."""
    from relayctl.services.users import UserService

    app.emit(UserService(app.workspace).list_users())


@users.command(examples=("relayctl users show 42", "relayctl -v users show 42"))
@click.argument("user_id")
@click.pass_obj
def show(app: AppContext, user_id: str) -> None:
    """Show one user."""
    from relayctl.services.users import UserService

    app.emit(UserService(app.workspace).show(user_id))


@users.command(examples=("relayctl users connect 42 7",))
@click.argument("user_id")
@click.argument("connection_id")
@click.pass_obj
def connect(app: AppContext, user_id: str, connection_id: str) -> None:
    """Link CONNECTION_ID to a user."""
    from relayctl.services.users import UserService

    app.emit(UserService(app.workspace).connect(user_id, connection_id))


@users.command(examples=("relayctl users disconnect 42 7",))
@click.argument("user_id")
@click.argument("connection_id")
@click.pass_obj
def disconnect(app: AppContext, user_id: str, connection_id: str) -> None:
    """Unlink CONNECTION_ID from a user."""
    from relayctl.services.users import UserService

    app.emit(UserService(app.workspace).disconnect(user_id, connection_id))
