"""Shared fixtures for config watcher tests."""

from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from infrastructure.credentials import (
    Domain,
    InMemoryCredentialsStore,
    StringCredentials,
    SystemCredentialsProvider,
)
from infrastructure.host.models import ConfigInfo, Item, Job
from infrastructure.notifications.models import ChannelConfig


class FakeHistoryAction:
    """Project action returning canned revisions, most recent first."""

    def __init__(self, dates: Optional[List[str]] = None, error: Exception = None):
        self.dates = dates or []
        self.error = error

    def get_job_configs(self) -> List[ConfigInfo]:
        if self.error is not None:
            raise self.error
        return [ConfigInfo(date=date) for date in self.dates]


class FakeHistoryPlugin:
    """History plugin handing out one action for every job."""

    def __init__(self, action: Optional[FakeHistoryAction] = None):
        self.action = action

    def project_action(self, job):
        return self.action


class FakeRuntime:
    """HostRuntime with fixed collaborators."""

    def __init__(self, descriptor=None, credentials_provider=None, history_plugin=None):
        self.descriptor = descriptor
        self.credentials_provider = credentials_provider
        self.history_plugin = history_plugin

    def get_slack_descriptor(self):
        return self.descriptor

    def get_credentials_provider(self):
        return self.credentials_provider

    def get_history_plugin(self):
        return self.history_plugin


@pytest.fixture
def job_factory():
    """Factory for creating Job instances.

    Example:
        job = job_factory(name="job-A")
    """

    def _factory(
        name: str = "job-A",
        display_name: Optional[str] = None,
        absolute_url: Optional[str] = None,
    ) -> Job:
        return Job(
            name=name,
            display_name=display_name,
            absolute_url=absolute_url or f"https://ci.example.com/job/{name}/",
        )

    return _factory


@pytest.fixture
def folder():
    """An item that is not a job."""
    return Item(name="team-folder", display_name="Team Folder")


@pytest.fixture
def history_plugin_factory():
    """Factory for history plugins reporting the given revision dates."""

    def _factory(dates: Optional[List[str]] = None, error: Exception = None):
        return FakeHistoryPlugin(FakeHistoryAction(dates=dates, error=error))

    return _factory


@pytest.fixture
def channel_config_factory():
    """Factory for ChannelConfig instances."""

    def _factory(**overrides) -> ChannelConfig:
        values = {
            "base_url": "",
            "team_domain": "myteam",
            "room_id": "#ci-config",
            "bot_user": True,
            "icon_emoji": ":jenkins:",
            "username": "jenkins",
            "token_credential_id": "slack-token",
        }
        values.update(overrides)
        return ChannelConfig(**values)

    return _factory


@pytest.fixture
def credentials_store():
    """Store holding the Slack token in the global domain."""
    store = InMemoryCredentialsStore()
    store.add_credentials(
        Domain.global_(), StringCredentials(id="slack-token", secret="xoxb-secret")
    )
    return store


@pytest.fixture
def runtime_factory(channel_config_factory, credentials_store):
    """Factory for fake host runtimes; defaults are fully configured."""

    def _factory(
        descriptor="default",
        credentials_provider="default",
        history_plugin=None,
    ) -> FakeRuntime:
        if descriptor == "default":
            descriptor = channel_config_factory()
        if credentials_provider == "default":
            credentials_provider = SystemCredentialsProvider(credentials_store)
        return FakeRuntime(
            descriptor=descriptor,
            credentials_provider=credentials_provider,
            history_plugin=history_plugin,
        )

    return _factory


@pytest.fixture
def mock_slack_service():
    """Slack client double whose publish succeeds."""
    service = MagicMock()
    service.publish.return_value = True
    return service


@pytest.fixture
def client_factory(mock_slack_service):
    """Client factory returning mock_slack_service and recording configs."""
    factory = MagicMock(return_value=mock_slack_service)
    return factory
