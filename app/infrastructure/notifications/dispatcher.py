"""Notification dispatcher.

Turns a composed NotificationPayload into one Slack publish call:

1. Resolve the host runtime
2. Resolve the Slack descriptor (channel configuration)
3. Resolve the credentials provider and its store
4. Find the token credential
5. Build a transient Slack client
6. Publish

Steps 1-3 are absorptive: a missing collaborator is logged and the dispatch
returns False. Configuration is resolved on every call and never cached.

Usage Example:
    from infrastructure.notifications import NotificationDispatcher

    dispatcher = NotificationDispatcher(runtime_resolver=lambda: runtime)
    sent = dispatcher.dispatch(payload)
"""

from typing import Callable, Optional, TYPE_CHECKING

from infrastructure.credentials.models import StringCredentials
from infrastructure.credentials.store import CredentialsStore
from infrastructure.logging import get_module_logger
from infrastructure.notifications.models import ChannelConfig, NotificationPayload
from integrations.slack.service import SlackService, SlackServiceConfig

if TYPE_CHECKING:
    from infrastructure.host.runtime import HostRuntime

logger = get_module_logger()

ClientFactory = Callable[[SlackServiceConfig], SlackService]


class NotificationDispatcher:
    """Sends notification payloads to the configured Slack room.

    Attributes:
        runtime_resolver: Returns the current host runtime, or None while the
            host is not initialized
        client_factory: Builds the Slack client for one dispatch

    Example:
        dispatcher = NotificationDispatcher(
            runtime_resolver=get_host_runtime,
            client_factory=SlackService,
        )
        sent = dispatcher.dispatch(payload)
    """

    def __init__(
        self,
        runtime_resolver: Callable[[], Optional["HostRuntime"]],
        client_factory: ClientFactory = SlackService,
    ):
        self.runtime_resolver = runtime_resolver
        self.client_factory = client_factory

    def dispatch(self, payload: NotificationPayload) -> bool:
        """Publish a payload once.

        Args:
            payload: Composed notification.

        Returns:
            The client's publish result, or False when a collaborator is missing.

        Raises:
            Exception: Transport errors raised by the Slack client are not caught.
        """
        runtime = self.runtime_resolver()
        if runtime is None:
            logger.info("host_runtime_not_initialized")
            return False

        descriptor = runtime.get_slack_descriptor()
        if descriptor is None:
            logger.info("slack_notifier_not_configured")
            return False

        provider = runtime.get_credentials_provider()
        if provider is None:
            logger.info("credentials_provider_not_present")
            return False

        store = provider.get_store(runtime)
        if store is None:
            logger.info("credentials_store_not_present")
            return False

        token = find_string_credential(store, descriptor.token_credential_id)
        if token is None:
            logger.warning(
                "slack_token_credential_not_found",
                credential_ref=descriptor.token_credential_id,
            )

        client = self.client_factory(build_service_config(descriptor, token))
        logger.info(
            "slack_service_initialized",
            room=descriptor.room_id,
            bot_user=descriptor.bot_user,
        )

        sent = client.publish(payload.message, payload.to_slack())
        logger.info("message_published", sent=sent)
        return sent


def find_string_credential(store: CredentialsStore, credential_id: str) -> Optional[str]:
    """Find the secret of the string credential with the given id.

    Every domain is scanned and the last match in iteration order wins.

    Args:
        store: Store to scan.
        credential_id: Credential id to match.

    Returns:
        The plaintext secret, or None if nothing matched.
    """
    secret = None
    for domain in store.get_domains():
        for credentials in store.get_credentials(domain):
            if not isinstance(credentials, StringCredentials):
                continue
            if credentials.id == credential_id:
                logger.info("slack_credentials_found", domain=domain.name)
                secret = credentials.secret.get_secret_value()
    return secret


def build_service_config(
    descriptor: ChannelConfig, token: Optional[str]
) -> SlackServiceConfig:
    """Client configuration for one dispatch."""
    return SlackServiceConfig(
        base_url=descriptor.base_url,
        team_domain=descriptor.team_domain,
        bot_user=descriptor.bot_user,
        room_id=descriptor.room_id,
        reply_broadcast=False,
        icon_emoji=descriptor.icon_emoji,
        username=descriptor.username,
        populated_token=token,
        notify_committers=False,
        timeout=descriptor.timeout,
    )
