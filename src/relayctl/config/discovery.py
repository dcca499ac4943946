"""Locate the ``relayctl.toml`` a workspace runs under.

A path named explicitly (``-c/--config`` or ``RELAYCTL_CONFIG``) has to
exist. Without one, the nearest ``relayctl.toml`` in the start directory or
any of its parents is used, the same way git finds ``.git``.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "relayctl.toml"
CONFIG_ENV_VAR = "RELAYCTL_CONFIG"


def explicit_config(config_path: str | None = None) -> Path | None:
    """Return the config file named by *config_path* or ``RELAYCTL_CONFIG``.

    Raises:
        click.ClickException: a path was named but is not a file.
    """
    raw = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not raw:
        return None
    path = Path(raw).expanduser()
    if not path.is_file():
        origin = "--config" if config_path else CONFIG_ENV_VAR
        msg = f"Config file not found: {path} (from {origin})"
        raise click.ClickException(msg)
    return path


def find_config(start: Path | None = None) -> Path | None:
    """Nearest ``relayctl.toml`` at or above *start* (default: cwd)."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Explicit config if one was named, otherwise walk-up discovery."""
    return explicit_config(config_path) or find_config(start)
