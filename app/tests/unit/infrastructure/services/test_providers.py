"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() caching behavior
- get_host_runtime() wiring
- get_slack_watcher() and setup_watcher() assembly
"""

import pytest
from unittest.mock import MagicMock, patch

from infrastructure.configuration import Settings
from infrastructure.host.runtime import SettingsRuntime
from infrastructure.notifications import NotificationDispatcher
from infrastructure.services import providers
from integrations.jenkins import JenkinsConfigHistory
from modules.watcher import SlackWatcher


@pytest.fixture(autouse=True)
def clear_caches():
    providers.get_settings.cache_clear()
    providers.get_host_runtime.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_host_runtime.cache_clear()


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_returns_settings_instance(self):
        assert isinstance(providers.get_settings(), Settings)

    def test_returns_cached_instance(self):
        assert providers.get_settings() is providers.get_settings()

    def test_cache_can_be_cleared(self):
        instance1 = providers.get_settings()
        providers.get_settings.cache_clear()
        instance2 = providers.get_settings()
        assert instance1 is not instance2


@pytest.mark.unit
class TestGetHostRuntime:
    def test_wires_credentials_and_history(self):
        runtime = providers.get_host_runtime()

        assert isinstance(runtime, SettingsRuntime)
        assert runtime.get_credentials_provider() is not None
        assert isinstance(runtime.get_history_plugin(), JenkinsConfigHistory)

    def test_runtime_is_cached(self):
        assert providers.get_host_runtime() is providers.get_host_runtime()


@pytest.mark.unit
class TestWatcherAssembly:
    def test_dispatcher_resolves_host_runtime(self):
        dispatcher = providers.get_notification_dispatcher()

        assert isinstance(dispatcher, NotificationDispatcher)
        assert dispatcher.runtime_resolver is providers.get_host_runtime

    def test_get_slack_watcher(self):
        watcher = providers.get_slack_watcher()

        assert isinstance(watcher, SlackWatcher)
        assert isinstance(watcher.notifier, NotificationDispatcher)

    def test_setup_watcher_registers_once(self):
        pm = MagicMock()
        pm.get_plugins.return_value = set()

        with patch.object(
            providers, "get_lifecycle_plugin_manager", return_value=pm
        ), patch.object(providers, "register_watcher") as mock_register:
            result = providers.setup_watcher()

        assert result is pm
        mock_register.assert_called_once()

    def test_setup_watcher_skips_when_already_registered(self):
        pm = MagicMock()
        pm.get_plugins.return_value = {object()}

        with patch.object(
            providers, "get_lifecycle_plugin_manager", return_value=pm
        ), patch.object(providers, "register_watcher") as mock_register:
            providers.setup_watcher()

        mock_register.assert_not_called()
