"""Plugin discovery, handler collection and notification hooks.

Plugins come from the ``relayctl.plugins`` entry-point group and from
single ``*.py`` files in the configured local directory. Nothing a plugin
does (failing to import, to instantiate, or inside a hook) stops relayctl:
it is logged, and notification failures become result warnings.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Any

import pluggy

from relayctl.plugins.hookspecs import PROJECT_NAME, RelayHookSpec

if TYPE_CHECKING:
    from relayctl.events.registry import HandlerRegistry

ENTRY_POINT_GROUP = "relayctl.plugins"
LOCAL_MODULE_PREFIX = "relayctl_local_plugin_"

logger = logging.getLogger(__name__)


def _has_hook_impls(cls: type) -> bool:
    """True when a public attribute of *cls* carries the ``relayctl_impl`` marker."""
    marker = f"{PROJECT_NAME}_impl"
    return any(
        getattr(getattr(cls, name, None), marker, None)
        for name in dir(cls)
        if not name.startswith("_")
    )


def _import_file(path: Path) -> ModuleType | None:
    module_name = f"{LOCAL_MODULE_PREFIX}{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        logger.warning("Cannot import local plugin %s", path)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        logger.warning("Failed to load local plugin %s", path, exc_info=True)
        return None
    return module


class PluginManager:
    """pluggy manager specialised to relayctl's three hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RelayHookSpec)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then local-directory plugins. Returns all names."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        # An entry point may name a class; hooks need an instance.
        for plugin in list(self._pm.get_plugins()):
            if inspect.isclass(plugin) and _has_hook_impls(plugin):
                name = self._pm.get_name(plugin) or plugin.__name__
                self._pm.unregister(plugin)
                self._instantiate(plugin, name)
        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._load_local(path)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_event_handlers(self, registry: HandlerRegistry) -> list[str]:
        """Add every plugin-provided handler to *registry*.

        A plugin may override an earlier registration of the same name.
        Bad registrations are logged and skipped. Returns the names added.
        """
        added: list[str] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, "register_event_handlers", None)
            if hook is None:
                continue
            try:
                handler_map = hook()
            except Exception:
                logger.warning(
                    "Failed to collect event handlers from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            if handler_map is None:
                continue
            if not isinstance(handler_map, dict):
                logger.warning("Plugin %s returned non-dict handler registrations", plugin_name)
                continue

            for event_name, factory in handler_map.items():
                try:
                    registry.register(event_name, factory, replace=True)
                except (TypeError, ValueError):
                    logger.warning(
                        "Skipping handler registration %r from plugin %s",
                        event_name,
                        plugin_name,
                        exc_info=True,
                    )
                    continue
                added.append(event_name)
        return added

    def notify(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Call a notification hook synchronously.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            return
        try:
            hook_fn(**payload)
        except Exception:
            logger.debug("Hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")

    def _load_local(self, path: Path) -> None:
        module = _import_file(path)
        if module is None:
            return
        for _attr, cls in inspect.getmembers(module, inspect.isclass):
            # Classes imported into the file belong to someone else.
            if cls.__module__ == module.__name__ and _has_hook_impls(cls):
                self._instantiate(cls, f"{module.__name__}.{cls.__name__}")

    def _instantiate(self, cls: type, name: str) -> None:
        try:
            instance = cls()
        except Exception:
            logger.warning("Failed to instantiate plugin %s", name, exc_info=True)
            return
        self.register_plugin(instance, name=name)
