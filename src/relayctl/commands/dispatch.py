"""Commands: dispatch an event and list registered handlers."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from relayctl.commands._base import RelayCommand

if TYPE_CHECKING:
    from relayctl.commands._context import AppContext


def parse_arg(raw: str) -> Any:
    """Interpret a CLI argument as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


@click.command(
    cls=RelayCommand,
    examples=(
        "relayctl dispatch GenericEvent 10",
        "relayctl dispatch UserConnected 42 7",
        """relayctl dispatch GenericEvent '{"kind": "ping"}' hello""",
        "relayctl --json dispatch MadeUpNothingness 10",
    ),
)
@click.argument("event_name")
@click.argument("args", nargs=-1)
@click.pass_obj
def dispatch(app: AppContext, event_name: str, args: tuple[str, ...]) -> None:
    """Dispatch EVENT_NAME to its handler with ARGS as positional values.

    Each ARG is parsed as JSON when possible (numbers, objects, lists),
    otherwise passed as a string. Unknown events are ignored.
    """
    from relayctl.services.dispatch import DispatchService

    payload = [parse_arg(raw) for raw in args]
    app.emit(DispatchService(app.workspace).dispatch(event_name, payload))


@click.command(
    cls=RelayCommand,
    examples=(
        "relayctl events",
        "relayctl -q events",
    ),
)
@click.pass_obj
def events(app: AppContext) -> None:
    """List registered event names."""
    from relayctl.services.dispatch import DispatchService

    app.emit(DispatchService(app.workspace).list_events())
