"""HandlerRegistry — the closed table of event names to handler factories.

Names are matched exactly (case-sensitive). The table is filled at startup
from built-in handlers and plugin registrations; nothing is looked up by
reflection at dispatch time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class EventHandler(Protocol):
    """A handler processes one event's payload via ``handle``."""

    def handle(self, *args: Any) -> Any: ...


HandlerFactory = Callable[[], EventHandler]


class HandlerRegistry:
    """Mapping of event name -> handler factory."""

    def __init__(self) -> None:
        self._factories: dict[str, HandlerFactory] = {}

    def register(self, name: str, factory: HandlerFactory, *, replace: bool = False) -> None:
        """Register *factory* under *name*.

        Raises:
            ValueError: If *name* is empty, or already registered and
                *replace* is False.
        """
        if not name or not name.strip():
            msg = "Event name must be a non-empty string"
            raise ValueError(msg)
        if not callable(factory):
            msg = f"Handler factory for {name!r} is not callable"
            raise TypeError(msg)
        if name in self._factories and not replace:
            msg = f"Event handler already registered for {name!r}"
            raise ValueError(msg)
        self._factories[name] = factory
        logger.debug("Registered event handler: %s", name)

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def resolve(self, name: str) -> HandlerFactory | None:
        """Return the factory for *name*, or None if unknown."""
        return self._factories.get(name)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
