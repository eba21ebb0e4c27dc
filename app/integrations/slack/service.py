"""Slack publishing service.

A SlackService is built per dispatch from a SlackServiceConfig and posts one
message either through the Web API (bot users) or through an incoming
webhook. Slack API rejections are logged and reported as False; transport
errors from slack_sdk propagate to the caller.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from slack_sdk.webhook import WebhookClient

from infrastructure.logging import get_module_logger

logger = get_module_logger()

WEBHOOK_URL_TEMPLATE = "https://{team_domain}.slack.com/services/hooks/jenkins-ci?token={token}"


@dataclass(frozen=True)
class SlackServiceConfig:
    """Everything needed to publish one message.

    populated_token is the resolved plaintext token and is kept out of the repr.
    """

    room_id: str
    base_url: str = ""
    team_domain: str = ""
    bot_user: bool = False
    reply_broadcast: bool = False
    icon_emoji: str = ""
    username: str = ""
    populated_token: Optional[str] = field(default=None, repr=False)
    notify_committers: bool = False
    timeout: int = 30


def split_room(room_id: str) -> Tuple[str, Optional[str]]:
    """Split "channel:thread_ts" into its channel and thread timestamp."""
    room = room_id.strip()
    if ":" in room:
        channel, thread_ts = room.split(":", 1)
        return channel, thread_ts or None
    return room, None


def webhook_url(config: SlackServiceConfig) -> str:
    """Incoming webhook URL for a non-bot configuration."""
    token = config.populated_token or ""
    if config.base_url:
        base_url = config.base_url
        if not base_url.endswith("/"):
            base_url += "/"
        return base_url + token
    return WEBHOOK_URL_TEMPLATE.format(team_domain=config.team_domain, token=token)


class SlackService:
    """Publishes messages to one Slack room."""

    def __init__(self, config: SlackServiceConfig):
        self.config = config

    def publish(
        self,
        message: str,
        attachments: Optional[List[Dict[str, Any]]] = None,
        thread_ts: Optional[str] = None,
    ) -> bool:
        """Publish a message with optional attachments.

        Args:
            message: Message text in Slack mrkdwn.
            attachments: Attachment dicts ({"text", "color"}).
            thread_ts: Thread to reply in. Defaults to the thread encoded in
                the room, if any.

        Returns:
            True if Slack accepted the message.
        """
        channel, room_thread_ts = split_room(self.config.room_id)
        thread_ts = thread_ts or room_thread_ts

        body: Dict[str, Any] = {"channel": channel, "text": message}
        if attachments:
            body["attachments"] = attachments
        if self.config.username:
            body["username"] = self.config.username
        if self.config.icon_emoji:
            body["icon_emoji"] = self.config.icon_emoji
        if thread_ts:
            body["thread_ts"] = thread_ts
            body["reply_broadcast"] = self.config.reply_broadcast

        if self.config.bot_user:
            return self._post_message(body)
        return self._post_webhook(body)

    def _post_message(self, body: Dict[str, Any]) -> bool:
        client = WebClient(
            token=self.config.populated_token, timeout=self.config.timeout
        )
        try:
            response = client.chat_postMessage(**body)
        except SlackApiError as e:
            logger.warning(
                "slack_post_message_rejected",
                channel=body["channel"],
                error=e.response.get("error"),
            )
            return False

        ok = bool(response.get("ok"))
        logger.info("slack_post_message_response", channel=body["channel"], ok=ok)
        return ok

    def _post_webhook(self, body: Dict[str, Any]) -> bool:
        client = WebhookClient(webhook_url(self.config), timeout=self.config.timeout)
        response = client.send_dict(body)

        if response.status_code != 200:
            logger.warning(
                "slack_webhook_rejected",
                channel=body["channel"],
                status_code=response.status_code,
                body=response.body,
            )
            return False

        logger.info("slack_webhook_response", channel=body["channel"], ok=True)
        return True
