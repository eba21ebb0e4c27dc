"""Host runtime interfaces.

The dispatcher and the listener never look collaborators up in a global
registry. Instead they receive a HostRuntime (or a callable returning one)
and ask it for the Slack descriptor, the credentials provider and the
history plugin. Any of these may be missing; callers treat a missing
collaborator as degraded operation.
"""

from typing import List, Optional, Protocol

from infrastructure.configuration import Settings, SlackSettings
from infrastructure.configuration.integrations import CredentialsSettings
from infrastructure.credentials.store import CredentialsProvider, SystemCredentialsProvider
from infrastructure.host.models import ConfigInfo, Job
from infrastructure.notifications.models import ChannelConfig


class ConfigHistoryProjectAction(Protocol):
    """Per-job view of the configuration history."""

    def get_job_configs(self) -> List[ConfigInfo]:
        """List recorded revisions, most recent first.

        Raises:
            OSError: If the revisions cannot be read.
        """
        ...


class JobConfigHistory(Protocol):
    """The configuration history collaborator."""

    def project_action(self, job: Job) -> Optional[ConfigHistoryProjectAction]:
        """Return the history action attached to a job, if any."""
        ...


class HostRuntime(Protocol):
    """Capabilities the host exposes to the watcher."""

    def get_slack_descriptor(self) -> Optional[ChannelConfig]: ...

    def get_credentials_provider(self) -> Optional[CredentialsProvider]: ...

    def get_history_plugin(self) -> Optional[JobConfigHistory]: ...


class SettingsRuntime:
    """HostRuntime backed by environment settings.

    The Slack descriptor and, unless a provider is injected, the credentials
    store are rebuilt from fresh settings on every call, so a dispatch always
    sees the current configuration.
    """

    def __init__(
        self,
        settings: Settings,
        credentials_provider: Optional[CredentialsProvider] = None,
        history_plugin: Optional[JobConfigHistory] = None,
    ):
        self._settings = settings
        self._credentials_provider = credentials_provider
        self._history_plugin = history_plugin

    def get_slack_descriptor(self) -> Optional[ChannelConfig]:
        slack = SlackSettings()
        if not slack.is_configured:
            return None
        return ChannelConfig(
            base_url=slack.SLACK_BASE_URL,
            team_domain=slack.SLACK_TEAM_DOMAIN,
            room_id=slack.SLACK_ROOM,
            bot_user=slack.SLACK_BOT_USER,
            icon_emoji=slack.SLACK_ICON_EMOJI,
            username=slack.SLACK_USERNAME,
            token_credential_id=slack.SLACK_TOKEN_CREDENTIAL_ID,
            timeout=slack.SLACK_TIMEOUT_SECONDS,
        )

    def get_credentials_provider(self) -> Optional[CredentialsProvider]:
        """Injected provider, else one loaded from the current SYSTEM_CREDENTIALS.

        Loaded per call, like the Slack descriptor, so the store and
        SLACK_TOKEN_CREDENTIAL_ID always come from the same configuration.
        """
        if self._credentials_provider is not None:
            return self._credentials_provider
        return SystemCredentialsProvider.from_mapping(
            CredentialsSettings().SYSTEM_CREDENTIALS
        )

    def get_history_plugin(self) -> Optional[JobConfigHistory]:
        if not self._settings.jenkins.JENKINS_CONFIG_HISTORY_ENABLED:
            return None
        return self._history_plugin
