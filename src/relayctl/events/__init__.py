"""Event dispatch — name-keyed handler registry and dispatcher."""

from relayctl.events.dispatcher import EventDispatcher
from relayctl.events.handlers import register_builtin_handlers
from relayctl.events.registry import EventHandler, HandlerFactory, HandlerRegistry

__all__ = [
    "EventDispatcher",
    "EventHandler",
    "HandlerFactory",
    "HandlerRegistry",
    "register_builtin_handlers",
]
