"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    SlackSettings: Slack notifier settings, re-read on every dispatch

Example:
    ```python
    from infrastructure.configuration import settings

    if settings.watcher.WATCHER_ENABLED:
        ...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.integrations import SlackSettings

__all__ = ["Settings", "settings", "SlackSettings"]
