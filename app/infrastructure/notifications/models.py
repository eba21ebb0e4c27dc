"""Notification core models.

Features compose a NotificationPayload, infrastructure resolves the channel
configuration and delivers it.

Uses Pydantic BaseModel for:
- Runtime input validation
- Immutable payloads once built (frozen models)
"""

from enum import Enum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator


class AttachmentColor(Enum):
    """Severity color of a message attachment.

    Values are Slack's built-in attachment colors.
    """

    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


class Attachment(BaseModel):
    """A rich sub-block of a chat message."""

    text: str
    color: AttachmentColor = AttachmentColor.WARNING

    model_config = {"frozen": True}

    def to_slack(self) -> Dict[str, Any]:
        return {"text": self.text, "color": self.color.value}


class NotificationPayload(BaseModel):
    """Message body plus attachments, sent at most once.

    Attributes:
        message: Message text using Slack mrkdwn link and mention markup
        attachments: Ordered attachments rendered below the message

    Example:
        payload = NotificationPayload(
            message="<@alice> updated <https://ci/job/a/|a>",
            attachments=(Attachment(text="Please check ...", color=AttachmentColor.WARNING),),
        )
    """

    message: str
    attachments: Tuple[Attachment, ...] = ()

    model_config = {"frozen": True}

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Ensure message is not empty."""
        if not v or not v.strip():
            raise ValueError("Notification message cannot be empty")
        return v

    def to_slack(self) -> List[Dict[str, Any]]:
        """Render attachments in the shape Slack's APIs accept."""
        return [attachment.to_slack() for attachment in self.attachments]


class ChannelConfig(BaseModel):
    """Slack notifier configuration as exposed by the host.

    Attributes:
        base_url: Webhook or API base URL (optional)
        team_domain: Slack workspace domain
        room_id: Channel to publish to, optionally "channel:thread_ts"
        bot_user: Publish through the Web API as a bot user
        icon_emoji: Message icon emoji
        username: Name the message is posted as
        token_credential_id: Id of the string credential holding the token
        timeout: Seconds before the publish call is abandoned
    """

    base_url: str = ""
    team_domain: str = ""
    room_id: str
    bot_user: bool = False
    icon_emoji: str = ""
    username: str = ""
    token_credential_id: str = ""
    timeout: int = Field(default=30, gt=0)

    model_config = {"frozen": True}
