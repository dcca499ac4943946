"""Built-in event handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from relayctl.events.registry import HandlerRegistry

logger = logging.getLogger(__name__)


class GenericEvent:
    """Accepts any positional values and records them."""

    def handle(self, *values: Any) -> tuple[Any, ...]:
        logger.info("Generic event received %d value(s): %r", len(values), values)
        return values


class UserConnected:
    """A user opened a connection."""

    def handle(self, user_id: str | int, connection_id: str | int) -> None:
        logger.info("User %s connected via %s", user_id, connection_id)


BUILTIN_HANDLERS: dict[str, type] = {
    "GenericEvent": GenericEvent,
    "UserConnected": UserConnected,
}


def register_builtin_handlers(registry: HandlerRegistry) -> None:
    for name, handler_cls in BUILTIN_HANDLERS.items():
        registry.register(name, handler_cls)
