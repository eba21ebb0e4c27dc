"""Jenkins Integration Package.

- client: Authenticated session for the Jenkins REST API.
- history: jobConfigHistory plugin adapter.
"""

from integrations.jenkins.client import JenkinsClient
from integrations.jenkins.history import (
    JenkinsConfigHistory,
    JenkinsConfigHistoryAction,
    history_url,
)

__all__ = [
    "JenkinsClient",
    "JenkinsConfigHistory",
    "JenkinsConfigHistoryAction",
    "history_url",
]
