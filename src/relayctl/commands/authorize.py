"""Command: authorize a user for a private channel."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from relayctl.commands._base import RelayCommand

if TYPE_CHECKING:
    from relayctl.commands._context import AppContext


@click.command(
    cls=RelayCommand,
    examples=(
        "relayctl authorize private-user-42 --user 42",
        "relayctl authorize private-connection-7 --user 42",
        "relayctl -q authorize private-user-42 --user 43 || echo denied",
    ),
)
@click.argument("channel")
@click.option("-u", "--user", "user_id", required=True, help="User id to authorize.")
@click.pass_obj
def authorize(app: AppContext, channel: str, user_id: str) -> None:
    """Check whether a user may subscribe to CHANNEL.

    Exits 0 when granted, 1 when denied or the user is unknown.
    """
    from relayctl.services.authorization import AuthorizationService

    result = AuthorizationService(app.workspace).authorize(user_id, channel)
    granted = result.ok and result.data["success"]
    app.emit(result, exit_code=0 if granted else 1)
