"""Host-owned items the watcher receives in lifecycle callbacks.

The host owns these objects and may mutate them; the watcher only reads
them for the duration of one callback.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Item:
    """Any item the host can rename, update or delete (folders, views, jobs)."""

    name: str
    """Short name, unique within the parent."""

    display_name: Optional[str] = None
    """Human readable name, falls back to `name`."""

    def get_display_name(self) -> str:
        return self.display_name or self.name


@dataclass
class Job(Item):
    """A buildable item whose configuration changes are watched."""

    absolute_url: str = ""
    """Absolute URL of the job page, ending with a slash."""


@dataclass(frozen=True)
class ConfigInfo:
    """One recorded configuration revision of a job."""

    date: str
    """Revision timestamp as reported by the history collaborator."""

    user: str = ""
    operation: str = ""
