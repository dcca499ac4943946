"""SqlUserDirectory — users and their connections in SQLite.

Implements the ``ConnectionLookup`` protocol consumed by the channel
authorizer, plus the write operations used by ``relayctl users``.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError

from relayctl.infrastructure.database.schema import connections, users

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class DirectoryError(Exception):
    """Base class for directory write failures."""


class DuplicateUserError(DirectoryError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"User already exists: {user_id}")
        self.user_id = user_id


class UnknownUserError(DirectoryError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"No such user: {user_id}")
        self.user_id = user_id


def _now_iso() -> str:
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


class SqlUserDirectory:
    """User/connection store backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(users.c.id, users.c.name, users.c.created).where(users.c.id == user_id)
            ).first()
        return dict(row._mapping) if row is not None else None

    def list_users(self) -> list[dict[str, Any]]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(users.c.id, users.c.name, users.c.created).order_by(users.c.id)
            ).fetchall()
        return [dict(row._mapping) for row in rows]

    def connections_for(self, user_id: str) -> list[str]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(connections.c.connection_id)
                .where(connections.c.user_id == user_id)
                .order_by(connections.c.connection_id)
            ).fetchall()
        return [row.connection_id for row in rows]

    def has_connection(self, user_id: str, connection_id: str) -> bool:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(connections.c.connection_id).where(
                    connections.c.user_id == str(user_id),
                    connections.c.connection_id == str(connection_id),
                )
            ).first()
        return row is not None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add_user(self, user_id: str, name: str | None = None) -> dict[str, Any]:
        """Insert a user. Raises :class:`DuplicateUserError` if present."""
        created = _now_iso()
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(users).values(id=user_id, name=name, created=created))
        except IntegrityError as exc:
            raise DuplicateUserError(user_id) from exc
        logger.debug("Added user %s", user_id)
        return {"id": user_id, "name": name, "created": created}

    def add_connection(self, user_id: str, connection_id: str) -> bool:
        """Link *connection_id* to *user_id*.

        Returns False when the link already existed.
        Raises :class:`UnknownUserError` if the user does not exist.
        """
        if self.get_user(user_id) is None:
            raise UnknownUserError(user_id)
        if self.has_connection(user_id, connection_id):
            return False
        with self._engine.begin() as conn:
            conn.execute(
                insert(connections).values(
                    user_id=user_id,
                    connection_id=str(connection_id),
                    created=_now_iso(),
                )
            )
        return True

    def remove_connection(self, user_id: str, connection_id: str) -> bool:
        """Unlink a connection. Returns False if it was not linked."""
        with self._engine.begin() as conn:
            result = conn.execute(
                delete(connections).where(
                    connections.c.user_id == user_id,
                    connections.c.connection_id == str(connection_id),
                )
            )
        return result.rowcount > 0
