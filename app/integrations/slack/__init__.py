"""Slack Integration Package.

- service: Transient Slack client used to publish config change notifications.
"""

from integrations.slack.service import SlackService, SlackServiceConfig

__all__ = ["SlackService", "SlackServiceConfig"]
