"""Config watcher settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    SlackSettings,
    JenkinsSettings,
    CredentialsSettings,
)

# Feature settings
from infrastructure.configuration.features import WatcherSettings


class Settings(BaseSettings):
    """Config watcher settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.

    - **Integrations**: Slack notifier, Jenkins API, system credentials
    - **Features**: watcher toggle

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Note:
        The Slack section is a snapshot taken when this object was built.
        Dispatch reads a fresh SlackSettings instead, see
        infrastructure.host.runtime.SettingsRuntime.
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    slack: SlackSettings
    jenkins: JenkinsSettings
    credentials: CredentialsSettings

    # Feature settings
    watcher: WatcherSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "slack": SlackSettings,
            "jenkins": JenkinsSettings,
            "credentials": CredentialsSettings,
            "watcher": WatcherSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
