"""
Dependency injection services.

Provides provider functions and plugin wiring for the watcher.
"""

from infrastructure.services.plugins import hookimpl
from infrastructure.services.providers import (
    get_settings,
    get_host_runtime,
    get_notification_dispatcher,
    get_slack_watcher,
    setup_watcher,
)

__all__ = [
    "hookimpl",
    "get_settings",
    "get_host_runtime",
    "get_notification_dispatcher",
    "get_slack_watcher",
    "setup_watcher",
]
