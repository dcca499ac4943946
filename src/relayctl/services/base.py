"""BaseService — shared foundation for relayctl services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from relayctl.workspace import Workspace


class BaseService:
    """Base for service-layer classes; every service wraps a Workspace."""

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _notify(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Fire a plugin notification hook.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        self._workspace.plugins.notify(hook_name, payload, warnings)
