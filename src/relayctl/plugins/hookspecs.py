"""Pluggy hook specifications for relayctl.

One setup-time hook lets plugins contribute event handlers; two
notification hooks fire after dispatch and authorization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from relayctl.events.registry import HandlerFactory

PROJECT_NAME = "relayctl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class RelayHookSpec:
    """Hook specifications for the relayctl plugin system."""

    @hookspec
    def register_event_handlers(self) -> dict[str, HandlerFactory] | None:
        """Return event name -> handler factory mappings for the registry."""

    @hookspec
    def post_dispatch(self, event_name: str, payload: list[Any], handled: bool) -> None:
        """Called after an event dispatch (handled is False for unknown names)."""

    @hookspec
    def post_authorize(self, user_id: str, channel: str, success: bool) -> None:
        """Called after a channel authorization decision."""
