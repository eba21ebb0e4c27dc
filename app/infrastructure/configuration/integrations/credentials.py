"""System credentials settings."""

from typing import Dict, List

from infrastructure.configuration.base import IntegrationSettings


class CredentialsSettings(IntegrationSettings):
    """Credentials available to the system credentials provider.

    Environment Variables:
        SYSTEM_CREDENTIALS: JSON object mapping a domain name to a list of
            credential entries. The empty string names the global domain.

    Example:
        ```
        SYSTEM_CREDENTIALS='{"": [{"id": "slack-token", "type": "string", "secret": "xoxb-..."}]}'
        ```
    """

    SYSTEM_CREDENTIALS: Dict[str, List[Dict[str, str]]] = {}
