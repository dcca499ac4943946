"""AuthorizationService — authorize a stored user against a channel."""

from __future__ import annotations

from relayctl.domain.channels import parse_channel
from relayctl.domain.users import User
from relayctl.services.base import BaseService
from relayctl.services.result import ServiceResult, failure, succeeded


class AuthorizationService(BaseService):
    def authorize(self, user_id: str, channel: str) -> ServiceResult:
        """Look up *user_id* and run the channel authorizer.

        A denied channel is still ``ok=True``; ``data["success"]`` carries
        the decision. Only an unknown user is an error.
        """
        op = "authorize"
        row = self._workspace.directory.get_user(user_id)
        if row is None:
            return failure(op, "USER_NOT_FOUND", f"No such user: {user_id}", user_id=user_id)

        user = User(id=row["id"], name=row["name"])
        result = self._workspace.authorizer.authorize(user, channel)
        ref = parse_channel(channel)

        warnings: list[str] = []
        self._notify(
            "post_authorize",
            {"user_id": user.id, "channel": channel, "success": result.success},
            warnings,
        )
        data = {
            "user_id": user.id,
            "channel": channel,
            "topic": ref.topic,
            "id": ref.id,
            "success": result.success,
        }
        return succeeded(op, data, warnings)
