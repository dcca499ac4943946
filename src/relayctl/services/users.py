"""UserService — manage the user/connection directory."""

from __future__ import annotations

from relayctl.domain.channels import CONNECTION_TOPIC, USER_TOPIC, channel_name, is_channel_id
from relayctl.infrastructure.directory import DuplicateUserError, UnknownUserError
from relayctl.services.base import BaseService
from relayctl.services.result import ServiceResult, failure, succeeded


class UserService(BaseService):
    def add_user(self, user_id: str, name: str | None = None) -> ServiceResult:
        op = "add_user"
        if not user_id.strip():
            return failure(op, "INVALID_USER_ID", "User id must not be empty")
        try:
            data = self._workspace.directory.add_user(user_id, name)
        except DuplicateUserError:
            return failure(op, "USER_EXISTS", f"User already exists: {user_id}", user_id=user_id)
        return succeeded(op, data)

    def list_users(self) -> ServiceResult:
        directory = self._workspace.directory
        items = [
            {**row, "connections": directory.connections_for(row["id"])}
            for row in directory.list_users()
        ]
        return succeeded("list_users", {"count": len(items), "items": items})

    def show(self, user_id: str) -> ServiceResult:
        op = "show_user"
        directory = self._workspace.directory
        row = directory.get_user(user_id)
        if row is None:
            return failure(op, "USER_NOT_FOUND", f"No such user: {user_id}", user_id=user_id)
        connections = directory.connections_for(user_id)
        data = {**row, "connections": connections, "channels": _channels_for(user_id, connections)}
        return succeeded(op, data)

    def connect(self, user_id: str, connection_id: str) -> ServiceResult:
        op = "connect"
        if not is_channel_id(connection_id):
            return failure(
                op,
                "INVALID_CONNECTION_ID",
                f"Connection id must be numeric, got {connection_id!r}",
            )
        try:
            created = self._workspace.directory.add_connection(user_id, connection_id)
        except UnknownUserError:
            return failure(op, "USER_NOT_FOUND", f"No such user: {user_id}", user_id=user_id)

        warnings = [] if created else [f"{user_id} already has connection {connection_id}"]
        data = {"user_id": user_id, "connection_id": connection_id, "created": created}
        return succeeded(op, data, warnings)

    def disconnect(self, user_id: str, connection_id: str) -> ServiceResult:
        op = "disconnect"
        removed = self._workspace.directory.remove_connection(user_id, connection_id)
        if not removed:
            return failure(
                op,
                "CONNECTION_NOT_FOUND",
                f"{user_id} has no connection {connection_id}",
                user_id=user_id,
                connection_id=connection_id,
            )
        return succeeded(op, {"user_id": user_id, "connection_id": connection_id})


def _channels_for(user_id: str, connections: list[str]) -> list[str]:
    """Private channels *user_id* would be authorized for."""
    channels = [channel_name(USER_TOPIC, user_id)] if is_channel_id(user_id) else []
    channels.extend(
        channel_name(CONNECTION_TOPIC, cid) for cid in connections if is_channel_id(cid)
    )
    return channels
