"""Config watcher feature settings."""

from infrastructure.configuration.base import FeatureSettings


class WatcherSettings(FeatureSettings):
    """Job config watcher configuration.

    Environment Variables:
        WATCHER_ENABLED: Register the watcher with the lifecycle plugin manager
    """

    WATCHER_ENABLED: bool = True
