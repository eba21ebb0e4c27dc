"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.watcher import WatcherSettings

__all__ = [
    "WatcherSettings",
]
