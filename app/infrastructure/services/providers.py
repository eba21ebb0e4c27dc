"""
Factory functions for dependency injection.

Provides process-scoped providers that assemble the watcher from settings.
Hosts embedding the watcher can bypass these and construct the pieces
directly with their own runtime.
"""

from functools import lru_cache
from typing import Optional, TYPE_CHECKING

import pluggy

from infrastructure.configuration import Settings
from infrastructure.host.runtime import HostRuntime, SettingsRuntime
from infrastructure.notifications import NotificationDispatcher
from infrastructure.services.plugins import (
    get_lifecycle_plugin_manager,
    register_watcher,
)
from integrations.jenkins import JenkinsClient, JenkinsConfigHistory

if TYPE_CHECKING:
    from modules.watcher import SlackWatcher


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Note that dispatch does not use this snapshot for Slack configuration,
    see SettingsRuntime.get_slack_descriptor.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_host_runtime() -> Optional[HostRuntime]:
    """
    Get the settings-backed host runtime.

    Only the history adapter is fixed here. Credentials are loaded from
    SYSTEM_CREDENTIALS on each dispatch, see
    SettingsRuntime.get_credentials_provider.

    Returns:
        SettingsRuntime wired with the Jenkins configuration history adapter.
    """
    settings = get_settings()
    history_plugin = JenkinsConfigHistory(JenkinsClient.from_settings(settings.jenkins))
    return SettingsRuntime(settings=settings, history_plugin=history_plugin)


def get_notification_dispatcher() -> NotificationDispatcher:
    """
    Build a dispatcher resolving the runtime on every dispatch.

    Returns:
        NotificationDispatcher: Dispatcher using the default Slack client.
    """
    return NotificationDispatcher(runtime_resolver=get_host_runtime)


def get_slack_watcher() -> "SlackWatcher":
    """
    Build the watcher with the default dispatcher and history lookup.

    Returns:
        SlackWatcher: Listener ready to be registered with a plugin manager.
    """
    # Feature modules import hookimpl from this package
    from modules.watcher import ConfigHistory, SlackWatcher

    runtime = get_host_runtime()
    history_plugin = runtime.get_history_plugin() if runtime else None
    return SlackWatcher(
        notifier=get_notification_dispatcher(),
        history=ConfigHistory(history_plugin),
    )


def setup_watcher() -> pluggy.PluginManager:
    """
    Register the default watcher with the lifecycle plugin manager.

    Returns:
        pluggy.PluginManager: The manager the host should call.

    Usage:
        pm = setup_watcher()
        pm.hook.on_updated(item=job, actor="alice")
    """
    pm = get_lifecycle_plugin_manager()
    if not pm.get_plugins():
        register_watcher(pm, get_slack_watcher(), get_settings())
    return pm
