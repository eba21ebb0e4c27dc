"""Jenkins REST API client."""

from typing import Any, Dict, Optional, Tuple

import requests

from infrastructure.configuration.integrations import JenkinsSettings


class JenkinsClient:
    """Thin wrapper around a requests session authenticated against Jenkins."""

    def __init__(
        self,
        auth: Optional[Tuple[str, str]] = None,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ):
        self.session = session or requests.Session()
        if auth:
            self.session.auth = auth
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: JenkinsSettings) -> "JenkinsClient":
        auth = None
        if settings.JENKINS_USER:
            auth = (settings.JENKINS_USER, settings.JENKINS_API_TOKEN)
        return cls(auth=auth, timeout=settings.JENKINS_TIMEOUT_SECONDS)

    def get_json(self, url: str) -> Dict[str, Any]:
        """GET a JSON document.

        Raises:
            requests.RequestException: On connection errors and non-2xx responses.
        """
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
