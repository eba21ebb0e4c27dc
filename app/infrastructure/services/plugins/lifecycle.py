"""Lifecycle plugin manager."""

from functools import lru_cache
from typing import Any, Optional

import pluggy
import structlog

from infrastructure.configuration import Settings
from infrastructure.hookspecs import lifecycle

logger = structlog.get_logger()

PROJECT_NAME = "config_watcher"


def create_lifecycle_plugin_manager() -> pluggy.PluginManager:
    """Create a plugin manager with the lifecycle hook specifications."""
    pm = pluggy.PluginManager(PROJECT_NAME)
    pm.add_hookspecs(lifecycle)
    return pm


@lru_cache(maxsize=1)
def get_lifecycle_plugin_manager() -> pluggy.PluginManager:
    """Get the lifecycle plugin manager singleton.

    Returns:
        PluginManager the host calls on item rename, update and delete.
    """
    pm = create_lifecycle_plugin_manager()
    logger.info("lifecycle_plugin_manager_created")
    return pm


def register_watcher(
    pm: pluggy.PluginManager, watcher: Any, settings: Settings
) -> Optional[str]:
    """Register a watcher unless it is disabled in settings.

    Args:
        pm: Plugin manager to register with.
        watcher: Object carrying lifecycle @hookimpl methods.
        settings: Application settings.

    Returns:
        The plugin name, or None when the watcher is disabled.
    """
    if not settings.watcher.WATCHER_ENABLED:
        logger.info("watcher_disabled")
        return None

    name = pm.register(watcher)
    logger.info("watcher_registered", plugin=name, plugin_count=len(pm.get_plugins()))
    return name
