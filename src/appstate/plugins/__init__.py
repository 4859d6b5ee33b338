"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Notification failures are warnings, never errors.
"""

from appstate.plugins.manager import PluginManager

__all__ = ["PluginManager"]
