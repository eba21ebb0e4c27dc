"""Plugin managers and utilities."""

import pluggy

# Singleton hookimpl marker for entire application
hookimpl = pluggy.HookimplMarker("config_watcher")

from infrastructure.services.plugins.lifecycle import (  # noqa: E402
    get_lifecycle_plugin_manager,
    register_watcher,
)

__all__ = [
    "hookimpl",
    "get_lifecycle_plugin_manager",
    "register_watcher",
]
