"""Lifecycle events raised by the host for watched jobs."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LifecycleEventKind(Enum):
    RENAMED = "renamed"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class LifecycleEvent:
    """One configuration change, created per callback."""

    kind: LifecycleEventKind
    old_name: Optional[str] = None
    new_name: Optional[str] = None

    @classmethod
    def renamed(cls, old_name: str, new_name: str) -> "LifecycleEvent":
        return cls(LifecycleEventKind.RENAMED, old_name=old_name, new_name=new_name)

    @classmethod
    def updated(cls) -> "LifecycleEvent":
        return cls(LifecycleEventKind.UPDATED)

    @classmethod
    def deleted(cls) -> "LifecycleEvent":
        return cls(LifecycleEventKind.DELETED)
