"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.slack import SlackSettings
from infrastructure.configuration.integrations.jenkins import JenkinsSettings
from infrastructure.configuration.integrations.credentials import (
    CredentialsSettings,
)

__all__ = [
    "SlackSettings",
    "JenkinsSettings",
    "CredentialsSettings",
]
