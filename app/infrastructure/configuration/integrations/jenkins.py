"""Jenkins integration settings."""

from infrastructure.configuration.base import IntegrationSettings


class JenkinsSettings(IntegrationSettings):
    """Jenkins API access used to read job configuration history.

    Environment Variables:
        JENKINS_USER: User for HTTP basic auth against Jenkins
        JENKINS_API_TOKEN: API token for that user
        JENKINS_CONFIG_HISTORY_ENABLED: Whether the jobConfigHistory plugin is installed
        JENKINS_TIMEOUT_SECONDS: Timeout for history API requests
    """

    JENKINS_USER: str = ""
    JENKINS_API_TOKEN: str = ""
    JENKINS_CONFIG_HISTORY_ENABLED: bool = True
    JENKINS_TIMEOUT_SECONDS: int = 10
