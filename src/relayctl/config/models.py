"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, relayctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- relayctl.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: str = ".relayctl/relayctl.db"


class EventsConfig(BaseModel):
    """[events] section."""

    model_config = {"frozen": True}

    builtin_handlers: bool = True
    disabled: list[str] = Field(default_factory=list)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".relayctl/plugins"

