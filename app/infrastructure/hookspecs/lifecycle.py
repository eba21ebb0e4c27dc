"""Hook specifications for item lifecycle callbacks.

The host calls these hooks through the lifecycle plugin manager whenever an
item is renamed, updated or deleted. Implementations must not raise: a
failing listener must never fail the host operation.
"""

import pluggy
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.host.models import Item

hookspec = pluggy.HookspecMarker("config_watcher")


@hookspec
def on_renamed(item: "Item", old_name: str, new_name: str, actor: str) -> Optional[bool]:
    """Called after an item has been renamed.

    Args:
        item: The renamed item, already carrying its new name and URL.
        old_name: Name before the rename.
        new_name: Name after the rename.
        actor: Name of the user who performed the change.
    """


@hookspec
def on_updated(item: "Item", actor: str) -> Optional[bool]:
    """Called after an item configuration has been saved.

    Args:
        item: The updated item.
        actor: Name of the user who performed the change.
    """


@hookspec
def on_deleted(item: "Item", actor: str) -> Optional[bool]:
    """Called after an item has been deleted.

    Args:
        item: The deleted item.
        actor: Name of the user who performed the change.
    """
