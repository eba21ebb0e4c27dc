"""Links to the latest configuration diff of a job."""

from typing import List, Optional

from infrastructure.host.models import ConfigInfo, Job
from infrastructure.host.runtime import JobConfigHistory
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DIFF_URL_TEMPLATE = (
    "{job_url}jobConfigHistory/showDiffFiles?timestamp1={older}&timestamp2={newer}"
)


class ConfigHistory:
    """Builds diff links from the configuration history collaborator.

    Every failure is soft: the lookup logs a warning and returns None.
    """

    def __init__(self, plugin: Optional[JobConfigHistory]):
        self.plugin = plugin

    def diff_link(self, job: Job) -> Optional[str]:
        """Link to the diff between the two newest revisions of a job.

        Args:
            job: Job to look up.

        Returns:
            The diff URL, or None when history is unavailable or the job has
            fewer than two revisions.
        """
        if self.plugin is None:
            logger.warning("config_history_plugin_not_available")
            return None

        configs = self._stored_configurations(job)
        if configs is None or len(configs) < 2:
            logger.warning(
                "config_history_not_available",
                revision_count=len(configs) if configs is not None else 0,
            )
            return None

        job_url = job.absolute_url
        if not job_url.endswith("/"):
            job_url += "/"

        # Revisions are most recent first
        return DIFF_URL_TEMPLATE.format(
            job_url=job_url, older=configs[1].date, newer=configs[0].date
        )

    def _stored_configurations(self, job: Job) -> Optional[List[ConfigInfo]]:
        try:
            action = self.plugin.project_action(job)
            if action is None:
                logger.warning("config_history_action_not_present")
                return None
            return list(action.get_job_configs())
        except (OSError, ValueError) as e:
            logger.warning(
                "config_history_read_failed", error=str(e), exc_info=True
            )
        except Exception as e:  # pylint: disable=broad-except
            # Lookup never raises to the listener
            logger.warning(
                "config_history_plugin_failed",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
        return None
