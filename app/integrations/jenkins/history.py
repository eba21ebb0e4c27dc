"""Job configuration history read from the Jenkins jobConfigHistory plugin.

The plugin exposes the recorded revisions of a job at
<job_url>jobConfigHistory/api/json. Errors are raised as
requests.RequestException, which is an OSError.
"""

from typing import List, Optional

from infrastructure.host.models import ConfigInfo, Job
from integrations.jenkins.client import JenkinsClient

HISTORY_PATH = "jobConfigHistory/"


def history_url(job: Job) -> str:
    """Base URL of the jobConfigHistory pages of a job."""
    base = job.absolute_url
    if not base.endswith("/"):
        base += "/"
    return base + HISTORY_PATH


class JenkinsConfigHistoryAction:
    """History of one job, fetched on demand."""

    def __init__(self, client: JenkinsClient, job: Job):
        self.client = client
        self.job = job

    def get_job_configs(self) -> List[ConfigInfo]:
        """List revisions, most recent first.

        Raises:
            requests.RequestException: If the history cannot be fetched.
            ValueError: If the response is not a jobConfigHistory document.
        """
        data = self.client.get_json(history_url(self.job) + "api/json")
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected history response: {type(data).__name__}")

        entries = data.get("jobConfigHistory") or []
        if not isinstance(entries, list):
            raise ValueError(
                f"Unexpected jobConfigHistory value: {type(entries).__name__}"
            )

        configs = [
            ConfigInfo(
                date=str(entry["date"]),
                user=entry.get("user", ""),
                operation=entry.get("operation", ""),
            )
            for entry in entries
            if isinstance(entry, dict) and entry.get("date")
        ]
        # yyyy-MM-dd_HH-mm-ss sorts chronologically as a string
        return sorted(configs, key=lambda c: c.date, reverse=True)


class JenkinsConfigHistory:
    """jobConfigHistory plugin accessed over the Jenkins REST API."""

    def __init__(self, client: JenkinsClient):
        self.client = client

    def project_action(self, job: Job) -> Optional[JenkinsConfigHistoryAction]:
        if not job.absolute_url:
            return None
        return JenkinsConfigHistoryAction(self.client, job)
