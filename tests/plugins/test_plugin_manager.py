"""Tests for PluginManager — discovery, handler collection, and notifications."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from relayctl.events.registry import HandlerRegistry
from relayctl.plugins import PluginManager, hookimpl
from relayctl.plugins.manager import _has_hook_impls


class _Ping:
    def handle(self, *args: Any) -> None:
        pass


class _HandlerPlugin:
    @hookimpl
    def register_event_handlers(self) -> dict[str, Any]:
        return {"Ping": _Ping}


class _BadHandlerPlugin:
    @hookimpl
    def register_event_handlers(self) -> dict[str, Any]:
        return {"": _Ping, "NotCallable": 42}


class _NonDictPlugin:
    @hookimpl
    def register_event_handlers(self) -> list[str]:
        return ["Ping"]


class _RaisingPlugin:
    @hookimpl
    def register_event_handlers(self) -> dict[str, Any]:
        msg = "boom"
        raise RuntimeError(msg)

    @hookimpl
    def post_dispatch(self, event_name: str, payload: list[Any], handled: bool) -> None:
        msg = "boom"
        raise RuntimeError(msg)


class _ExplodingInit:
    def __init__(self) -> None:
        msg = "cannot build"
        raise RuntimeError(msg)

    @hookimpl
    def post_dispatch(self, event_name: str, payload: list[Any], handled: bool) -> None:
        pass


class _RecordingPlugin:
    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    @hookimpl
    def post_authorize(self, user_id: str, channel: str, success: bool) -> None:
        self.calls.append({"user_id": user_id, "channel": channel, "success": success})


class TestRegistration:
    def test_register_uses_class_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_HandlerPlugin())
        pm.register_plugin(_RecordingPlugin(), name="recorder")
        assert sorted(pm.list_plugin_names()) == ["_HandlerPlugin", "recorder"]

    def test_discovery_without_local_dir(self, tmp_path: Path) -> None:
        assert PluginManager().discover_and_load(local_dir=tmp_path / "missing") == []

    def test_class_with_hooks_is_detected(self) -> None:
        assert _has_hook_impls(_HandlerPlugin)
        assert not _has_hook_impls(_Ping)


class TestEntryPointClasses:
    def test_registered_class_is_replaced_by_instance(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        pm = PluginManager()

        def fake_load(group: str) -> int:
            pm._pm.register(_HandlerPlugin, name="ep-handlers")
            return 1

        monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", fake_load)
        assert pm.discover_and_load() == ["ep-handlers"]
        registry = HandlerRegistry()
        assert pm.collect_event_handlers(registry) == ["Ping"]

    def test_class_that_fails_to_construct_is_dropped(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        pm = PluginManager()

        def fake_load(group: str) -> int:
            pm._pm.register(_ExplodingInit, name="ep-broken")
            return 1

        monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", fake_load)
        assert pm.discover_and_load() == []


class TestCollectEventHandlers:
    def test_collects_handlers(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_HandlerPlugin())
        registry = HandlerRegistry()
        assert pm.collect_event_handlers(registry) == ["Ping"]
        assert registry.resolve("Ping") is _Ping

    def test_plugin_overrides_existing(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_HandlerPlugin())
        registry = HandlerRegistry()
        registry.register("Ping", object)
        pm.collect_event_handlers(registry)
        assert registry.resolve("Ping") is _Ping

    def test_bad_entries_skipped(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_BadHandlerPlugin())
        pm.register_plugin(_NonDictPlugin())
        pm.register_plugin(_RaisingPlugin())
        registry = HandlerRegistry()
        assert pm.collect_event_handlers(registry) == []
        assert len(registry) == 0


class TestNotify:
    def test_notify_calls_plugins(self) -> None:
        pm = PluginManager()
        recorder = _RecordingPlugin()
        pm.register_plugin(recorder)
        warnings: list[str] = []
        pm.notify(
            "post_authorize",
            {"user_id": "1", "channel": "private-user-1", "success": True},
            warnings,
        )
        assert recorder.calls == [{"user_id": "1", "channel": "private-user-1", "success": True}]
        assert warnings == []

    def test_failure_becomes_warning(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_RaisingPlugin())
        warnings: list[str] = []
        pm.notify(
            "post_dispatch",
            {"event_name": "Ping", "payload": [], "handled": True},
            warnings,
        )
        assert warnings == ["Plugin hook post_dispatch failed"]

    def test_unknown_hook_ignored(self) -> None:
        warnings: list[str] = []
        PluginManager().notify("no_such_hook", {}, warnings)
        assert warnings == []


LOCAL_PLUGIN = '''
from relayctl.plugins import hookimpl


class Pong:
    def handle(self, *args):
        return args


class PongPlugin:
    @hookimpl
    def register_event_handlers(self):
        return {"Pong": Pong}


class NotAPlugin:
    pass
'''


class TestLocalDiscovery:
    def test_loads_single_file_plugins(self, tmp_path: Path) -> None:
        (tmp_path / "pong.py").write_text(LOCAL_PLUGIN)
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)
        assert "relayctl_local_plugin_pong.PongPlugin" in names
        registry = HandlerRegistry()
        assert pm.collect_event_handlers(registry) == ["Pong"]

    def test_skips_private_files(self, tmp_path: Path) -> None:
        (tmp_path / "_hidden.py").write_text(LOCAL_PLUGIN)
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)
        assert not any("hidden" in name for name in names)

    def test_broken_plugin_does_not_abort(self, tmp_path: Path) -> None:
        (tmp_path / "a_broken.py").write_text("raise ImportError('nope')\n")
        (tmp_path / "b_pong.py").write_text(LOCAL_PLUGIN)
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)
        assert "relayctl_local_plugin_b_pong.PongPlugin" in names
