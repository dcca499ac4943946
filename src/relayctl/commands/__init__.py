"""Subcommand modules for relayctl.

Provides register_commands() which uses deferred imports to keep
``relayctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from relayctl.commands.users import users

    cli.add_command(users)

    # --- Standalone commands ---
    from relayctl.commands.authorize import authorize
    from relayctl.commands.dispatch import dispatch, events

    cli.add_command(dispatch)
    cli.add_command(events)
    cli.add_command(authorize)
