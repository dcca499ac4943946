"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus single-file plugins from the configured local directory.
INVARIANT: Plugin failures are warnings, never errors.
"""

from relayctl.plugins.hookspecs import hookimpl
from relayctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
