"""Slack watcher - notifies Slack whenever a job configuration changes.

Implements the lifecycle hooks for rename, update and delete. Each hook
composes a message, asks the dispatcher to publish it and logs the outcome.
Nothing raised here reaches the host.
"""

from typing import Optional

from infrastructure.host.models import Item, Job
from infrastructure.logging import bind_event_context, get_module_logger
from infrastructure.notifications import NotificationDispatcher
from infrastructure.services import hookimpl
from modules.watcher.events import LifecycleEvent
from modules.watcher.history import ConfigHistory
from modules.watcher.messages import compose

logger = get_module_logger()


class SlackWatcher:
    """Lifecycle listener sending job config changes to Slack.

    Attributes:
        notifier: Dispatcher publishing composed payloads
        history: Lookup for the latest configuration diff link

    Example:
        watcher = SlackWatcher(notifier=dispatcher, history=ConfigHistory(plugin))
        pm.register(watcher)
        pm.hook.on_updated(item=job, actor="alice")
    """

    def __init__(
        self,
        notifier: NotificationDispatcher,
        history: Optional[ConfigHistory] = None,
    ):
        if notifier is None:
            raise ValueError("No slack notifier provided")

        self.notifier = notifier
        self.history = history or ConfigHistory(None)

    @hookimpl
    def on_renamed(
        self, item: Item, old_name: str, new_name: str, actor: str
    ) -> Optional[bool]:
        if not isinstance(item, Job):
            logger.debug("not_a_job_rename", item=_describe(item))
            return None

        return self._notify(LifecycleEvent.renamed(old_name, new_name), item, actor)

    @hookimpl
    def on_updated(self, item: Item, actor: str) -> Optional[bool]:
        if not isinstance(item, Job):
            logger.debug("not_a_job_config_update", item=_describe(item))
            return None

        return self._notify(LifecycleEvent.updated(), item, actor)

    @hookimpl
    def on_deleted(self, item: Item, actor: str) -> Optional[bool]:
        if not isinstance(item, Job):
            logger.debug("not_a_job_delete", item=_describe(item))
            return None

        return self._notify(LifecycleEvent.deleted(), item, actor)

    def _notify(self, event: LifecycleEvent, job: Job, actor: str) -> bool:
        with bind_event_context(
            job_name=job.name, event_kind=event.kind.value, actor=actor
        ):
            logger.debug("sending_notification")
            message = None
            try:
                payload = compose(event, job, actor, self.history.diff_link(job))
                message = payload.message
                sent = self.notifier.dispatch(payload)
            except Exception as e:
                logger.error(
                    "unable_to_notify",
                    notification=message,
                    error=str(e),
                    exc_info=True,
                )
                return False

            if sent:
                logger.info("notified", notification=message)
            else:
                logger.info("unable_to_notify", notification=message)
            return sent


def _describe(item: object) -> str:
    if isinstance(item, Item):
        return item.get_display_name()
    return repr(item)
