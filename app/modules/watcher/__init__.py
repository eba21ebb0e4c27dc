"""Config watcher module - Slack notifications for job configuration changes.

Usage:
    from modules.watcher import ConfigHistory, SlackWatcher

    watcher = SlackWatcher(notifier=dispatcher, history=ConfigHistory(plugin))
"""

from modules.watcher.events import LifecycleEvent, LifecycleEventKind
from modules.watcher.history import ConfigHistory
from modules.watcher.listener import SlackWatcher
from modules.watcher.messages import HISTORY_NOT_AVAILABLE, compose

__all__ = [
    "LifecycleEvent",
    "LifecycleEventKind",
    "ConfigHistory",
    "SlackWatcher",
    "HISTORY_NOT_AVAILABLE",
    "compose",
]
