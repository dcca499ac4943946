"""EventDispatcher — resolve an event name and hand the payload to its handler.

INVARIANT: An unknown event name is a no-op, never an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from relayctl.events.registry import HandlerRegistry


def render_payload(payload: tuple[Any, ...]) -> str:
    """Readable one-line rendering of positional payload values."""
    return ", ".join(repr(value) for value in payload)


class EventDispatcher:
    """Dispatch events to handlers registered in a :class:`HandlerRegistry`.

    Parameters:
        registry: Name -> factory table consulted on every dispatch.
        logger: Bound structlog logger receiving one ``info`` line per call.
    """

    def __init__(self, registry: HandlerRegistry, logger: FilteringBoundLogger) -> None:
        self._registry = registry
        self._logger = logger

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    def dispatch(self, event_name: str, *payload: Any) -> None:
        """Build a fresh handler for *event_name* and call ``handle(*payload)``.

        Exceptions raised by the handler itself propagate to the caller.
        """
        self._logger.info(
            "dispatching event",
            event_name=event_name,
            payload=render_payload(payload),
        )
        factory = self._registry.resolve(event_name)
        if factory is None:
            return
        handler = factory()
        handler.handle(*payload)
