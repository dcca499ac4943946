"""Shared pytest fixtures and test helpers for relayctl tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from relayctl.config.settings import RelaySettings
from relayctl.workspace import Workspace


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's RELAYCTL_CONFIG from leaking into tests."""
    monkeypatch.delenv("RELAYCTL_CONFIG", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> RelaySettings:
    """Settings rooted at a temp directory with plugins disabled."""
    (tmp_path / "relayctl.toml").write_text("[plugins]\nenabled = false\n")
    return RelaySettings.from_cli(root=tmp_path)


@pytest.fixture
def workspace(settings: RelaySettings) -> Workspace:
    """Workspace on a temp directory; database created on first use."""
    ws = Workspace(settings)
    try:
        yield ws
    finally:
        ws.close()


@pytest.fixture
def _isolated_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp root so the CLI uses an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes.
    """
    (tmp_path / "relayctl.toml").write_text("[plugins]\nenabled = false\n")
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class RecordingLogger:
    """Stand-in for a bound structlog logger that records calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kw: Any) -> None:
        self.calls.append((level, event, kw))

    def info(self, event: str, **kw: Any) -> None:
        self._record("info", event, **kw)

    def debug(self, event: str, **kw: Any) -> None:
        self._record("debug", event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, **kw)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_user(workspace: Workspace) -> Callable[..., None]:
    """Create a user with connections via UserService, asserting success."""
    from relayctl.services.users import UserService

    def _make(user_id: str, *connection_ids: str, name: str | None = None) -> None:
        svc = UserService(workspace)
        result = svc.add_user(user_id, name)
        assert result.ok, result.error
        for connection_id in connection_ids:
            result = svc.connect(user_id, connection_id)
            assert result.ok, result.error

    return _make
