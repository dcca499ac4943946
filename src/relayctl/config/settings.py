"""RelaySettings: CLI flags, ``RELAYCTL_*`` env vars and ``relayctl.toml`` merged.

Highest priority first: init kwargs (the CLI flags), environment, the TOML
file, then the defaults on the section models.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, InitSettingsSource, PydanticBaseSettingsSource

from relayctl.config.discovery import resolve_config
from relayctl.config.models import DatabaseConfig, EventsConfig, PluginsConfig


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Top-level tables of a ``relayctl.toml``; empty when there is no file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _read_toml(toml_path) if toml_path is not None else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class RelaySettings(BaseSettings):
    """Settings for one relayctl invocation or embedding.

    Attributes:
        root: Workspace directory. Relative ``[database]`` and ``[plugins]``
            paths resolve against it.
        config_path: The TOML file loaded, if any. Passing it at
            construction is what makes the TOML source read it.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RELAYCTL_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = None
        if isinstance(init_settings, InitSettingsSource):
            named = init_settings.init_kwargs.get("config_path")
            toml_path = Path(named) if named else None
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, toml_path))

    @property
    def db_path(self) -> Path:
        """Database file, resolved against :attr:`root`."""
        return self._under_root(self.database.path)

    @property
    def plugin_dir(self) -> Path:
        return self._under_root(self.plugins.local_dir)

    def _under_root(self, configured: str) -> Path:
        path = Path(configured)
        return path if path.is_absolute() else self.root / path

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> RelaySettings:
        """Build settings for a CLI run.

        The config file comes from *config_path*, ``RELAYCTL_CONFIG`` or
        walk-up discovery from *root*. Without an explicit *root*, the
        workspace is the config file's directory (or the cwd when there is
        no config file). A named config file that does not exist raises
        :class:`click.ClickException`.
        """
        toml_path = resolve_config(config_path, root)
        if root is None:
            root = toml_path.parent if toml_path else Path.cwd()
        return cls(root=root, config_path=toml_path, **cli_flags)
