"""Notification payloads and dispatch.

Usage:
    from infrastructure.notifications import (
        Attachment,
        AttachmentColor,
        NotificationDispatcher,
        NotificationPayload,
    )

    # Feature-level: compose the message
    payload = NotificationPayload(
        message="<@alice> updated <https://ci.example.com/job/a/|a>",
        attachments=(Attachment(text="...", color=AttachmentColor.WARNING),),
    )

    # Infrastructure-level: publish it
    sent = NotificationDispatcher(runtime_resolver=get_host_runtime).dispatch(payload)
"""

from infrastructure.notifications.models import (
    Attachment,
    AttachmentColor,
    ChannelConfig,
    NotificationPayload,
)
from infrastructure.notifications.dispatcher import NotificationDispatcher

__all__ = [
    "Attachment",
    "AttachmentColor",
    "ChannelConfig",
    "NotificationPayload",
    "NotificationDispatcher",
]
