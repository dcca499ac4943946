"""ChannelAuthorizer — decide private channel subscriptions.

Each recognized topic has one ownership check:

- ``private-user-<id>``: the channel belongs to the user whose id is ``<id>``.
- ``private-connection-<id>``: the user has a connection with id ``<id>``.

Malformed channels and unknown topics are denied, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from pydantic import BaseModel

from relayctl.domain.channels import CONNECTION_TOPIC, USER_TOPIC, ChannelRef, parse_channel
from relayctl.domain.users import User

logger = logging.getLogger(__name__)


class ConnectionLookup(Protocol):
    """Read-only membership query over a user's connections."""

    def has_connection(self, user_id: str, connection_id: str) -> bool: ...


class AuthorizationResult(BaseModel):
    """Outcome of a channel authorization."""

    model_config = {"frozen": True}

    success: bool

    def is_success(self) -> bool:
        return self.success

    def __bool__(self) -> bool:
        return self.success


class InMemoryConnections:
    """ConnectionLookup over a plain ``user_id -> connection ids`` mapping."""

    def __init__(self, connections: dict[str, Iterable[str | int]] | None = None) -> None:
        self._connections: dict[str, set[str]] = {}
        for user_id, ids in (connections or {}).items():
            for connection_id in ids:
                self.add(user_id, connection_id)

    def add(self, user_id: str | int, connection_id: str | int) -> None:
        self._connections.setdefault(str(user_id), set()).add(str(connection_id))

    def has_connection(self, user_id: str, connection_id: str) -> bool:
        return str(connection_id) in self._connections.get(str(user_id), set())


class ChannelAuthorizer:
    """Authorize a user against a private channel name."""

    def __init__(self, connections: ConnectionLookup) -> None:
        self._connections = connections

    def authorize(self, user: User, channel: Any) -> AuthorizationResult:
        ref = parse_channel(channel)
        success = self._check(user, ref)
        logger.debug(
            "Channel %r topic=%s id=%s user=%s success=%s",
            channel,
            ref.topic,
            ref.id,
            user.id,
            success,
        )
        return AuthorizationResult(success=success)

    def _check(self, user: User, ref: ChannelRef) -> bool:
        if ref.id is None:
            return False
        if ref.topic == USER_TOPIC:
            return ref.id == str(user.id)
        if ref.topic == CONNECTION_TOPIC:
            return self._connections.has_connection(str(user.id), ref.id)
        return False
