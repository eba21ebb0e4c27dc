"""Host collaborator interfaces.

Usage:
    from infrastructure.host import Job, SettingsRuntime

    job = Job(name="job-A", absolute_url="https://ci.example.com/job/job-A/")
"""

from infrastructure.host.models import ConfigInfo, Item, Job
from infrastructure.host.runtime import (
    ConfigHistoryProjectAction,
    HostRuntime,
    JobConfigHistory,
    SettingsRuntime,
)

__all__ = [
    "ConfigInfo",
    "Item",
    "Job",
    "ConfigHistoryProjectAction",
    "HostRuntime",
    "JobConfigHistory",
    "SettingsRuntime",
]
