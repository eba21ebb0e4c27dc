"""Slack integration settings."""

from infrastructure.configuration.base import IntegrationSettings


class SlackSettings(IntegrationSettings):
    """Slack notifier configuration.

    These values describe where config change notifications are published.
    They are read again on every dispatch, so changes to the environment or
    `.env` file apply to the next notification without a restart.

    Environment Variables:
        SLACK_BASE_URL: Incoming webhook base URL, ignored for bot users
        SLACK_TEAM_DOMAIN: Slack workspace domain (e.g. "myteam")
        SLACK_ROOM: Channel to publish to, optionally "channel:thread_ts"
        SLACK_BOT_USER: Publish through the Web API as a bot user
        SLACK_ICON_EMOJI: Emoji used as the message icon
        SLACK_USERNAME: Username the message is posted as
        SLACK_TOKEN_CREDENTIAL_ID: Id of the string credential holding the token
        SLACK_TIMEOUT_SECONDS: Timeout applied to the publish call

    Example:
        ```python
        from infrastructure.configuration.integrations import SlackSettings

        slack = SlackSettings()
        if slack.is_configured:
            room = slack.SLACK_ROOM
        ```
    """

    SLACK_BASE_URL: str = ""
    SLACK_TEAM_DOMAIN: str = ""
    SLACK_ROOM: str = ""
    SLACK_BOT_USER: bool = False
    SLACK_ICON_EMOJI: str = ""
    SLACK_USERNAME: str = ""
    SLACK_TOKEN_CREDENTIAL_ID: str = ""
    SLACK_TIMEOUT_SECONDS: int = 30

    @property
    def is_configured(self) -> bool:
        """A notifier is considered configured once a room is set."""
        return bool(self.SLACK_ROOM.strip())
