"""DispatchService — dispatch events and list registered handlers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from relayctl.services.base import BaseService
from relayctl.services.result import ServiceResult, failure, succeeded


class DispatchService(BaseService):
    def dispatch(self, event_name: str, args: Sequence[Any] = ()) -> ServiceResult:
        """Dispatch *event_name* with positional *args*.

        An unknown event is still a successful no-op with ``handled=False``.
        A handler that raises is reported as ``HANDLER_FAILED``.
        """
        op = "dispatch"
        payload = list(args)
        handled = event_name in self._workspace.registry
        try:
            self._workspace.dispatcher.dispatch(event_name, *payload)
        except Exception as exc:
            return failure(
                op,
                "HANDLER_FAILED",
                f"Handler for {event_name} raised {type(exc).__name__}: {exc}",
                event=event_name,
            )

        warnings: list[str] = []
        self._notify(
            "post_dispatch",
            {"event_name": event_name, "payload": payload, "handled": handled},
            warnings,
        )
        return succeeded(op, {"event": event_name, "args": payload, "handled": handled}, warnings)

    def list_events(self) -> ServiceResult:
        names = self._workspace.registry.names()
        return succeeded("list_events", {"count": len(names), "events": names})
