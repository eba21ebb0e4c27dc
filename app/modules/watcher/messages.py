"""Slack messages for job configuration changes."""

from typing import Optional

from infrastructure.host.models import Job
from infrastructure.notifications.models import (
    Attachment,
    AttachmentColor,
    NotificationPayload,
)
from modules.watcher.events import LifecycleEvent, LifecycleEventKind

HISTORY_NOT_AVAILABLE = (
    "History not available, Please install/update jobConfigHistory plugin"
)

COLORS = {
    LifecycleEventKind.RENAMED: AttachmentColor.WARNING,
    LifecycleEventKind.UPDATED: AttachmentColor.WARNING,
    LifecycleEventKind.DELETED: AttachmentColor.DANGER,
}


def mention(actor: str) -> str:
    return f"<@{actor}>"


def link(url: str, label: str) -> str:
    return f"<{url}|{label}>"


def format_message(event: LifecycleEvent, job: Job, actor: str) -> str:
    """Message body: who changed which job, and how."""
    if event.kind is LifecycleEventKind.RENAMED:
        return (
            f"{mention(actor)} renamed from {event.old_name} to "
            f"{link(job.absolute_url, event.new_name)}"
        )
    return (
        f"{mention(actor)} {event.kind.value} "
        f"{link(job.absolute_url, job.get_display_name())}"
    )


def format_attachment(event: LifecycleEvent, diff_link: Optional[str]) -> Attachment:
    if diff_link:
        text = f"Please check {link(diff_link, 'here')} for the changes"
    else:
        text = HISTORY_NOT_AVAILABLE
    return Attachment(text=text, color=COLORS[event.kind])


def compose(
    event: LifecycleEvent, job: Job, actor: str, diff_link: Optional[str] = None
) -> NotificationPayload:
    """Compose the notification for a lifecycle event.

    Args:
        event: What happened to the job.
        job: The job, with its current name and URL.
        actor: Name of the user who made the change.
        diff_link: Link to the configuration diff, if history is available.

    Returns:
        Payload with the message and one attachment.

    Raises:
        ValueError: If actor or job name is empty.
    """
    if not actor:
        raise ValueError("actor must not be empty")
    if not job.name:
        raise ValueError("job name must not be empty")

    return NotificationPayload(
        message=format_message(event, job, actor),
        attachments=(format_attachment(event, diff_link),),
    )
