"""Workspace — the single dependency injected into every service.

Owns the directory database engine, the plugin manager, the handler
registry, and the two components built on them: the event dispatcher and
the channel authorizer. Everything is created lazily so ``--help`` and
``--version`` never touch the database or load plugins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog

from relayctl.authorization import ChannelAuthorizer
from relayctl.events.dispatcher import EventDispatcher
from relayctl.events.handlers import register_builtin_handlers
from relayctl.events.registry import HandlerRegistry
from relayctl.infrastructure.database.engine import init_database
from relayctl.infrastructure.directory import SqlUserDirectory
from relayctl.plugins.manager import PluginManager

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from relayctl.config.settings import RelaySettings

logger = logging.getLogger(__name__)


class Workspace:
    """Runtime wiring for a relayctl workspace rooted at ``settings.root``."""

    def __init__(self, settings: RelaySettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._directory: SqlUserDirectory | None = None
        self._plugins: PluginManager | None = None
        self._registry: HandlerRegistry | None = None
        self._dispatcher: EventDispatcher | None = None
        self._authorizer: ChannelAuthorizer | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = init_database(self.settings.db_path)
        return self._engine

    @property
    def directory(self) -> SqlUserDirectory:
        if self._directory is None:
            self._directory = SqlUserDirectory(self.engine)
        return self._directory

    @property
    def plugins(self) -> PluginManager:
        if self._plugins is None:
            pm = PluginManager()
            if self.settings.plugins.enabled:
                names = pm.discover_and_load(local_dir=self.settings.plugin_dir)
                logger.debug("Loaded plugins: %s", names)
            self._plugins = pm
        return self._plugins

    @property
    def registry(self) -> HandlerRegistry:
        if self._registry is None:
            self._registry = self._build_registry()
        return self._registry

    @property
    def dispatcher(self) -> EventDispatcher:
        if self._dispatcher is None:
            self._dispatcher = EventDispatcher(
                self.registry,
                structlog.get_logger("relayctl.events"),
            )
        return self._dispatcher

    @property
    def authorizer(self) -> ChannelAuthorizer:
        if self._authorizer is None:
            self._authorizer = ChannelAuthorizer(self.directory)
        return self._authorizer

    def close(self) -> None:
        """Dispose of the database engine, if one was opened."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._directory = None
            self._authorizer = None

    def _build_registry(self) -> HandlerRegistry:
        registry = HandlerRegistry()
        if self.settings.events.builtin_handlers:
            register_builtin_handlers(registry)
        self.plugins.collect_event_handlers(registry)
        for name in self.settings.events.disabled:
            registry.unregister(name)
        return registry
