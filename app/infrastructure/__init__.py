"""Infrastructure modules for the config watcher.

Centralized infrastructure components:
- configuration: Settings management (settings, SlackSettings)
- logging: Structured logging (get_module_logger, bind_event_context)
- host: Host collaborator interfaces (Item, Job, HostRuntime)
- credentials: Credential store and providers
- notifications: Payload models and the notification dispatcher
- hookspecs: Lifecycle hook specifications
- services: Plugin manager and providers
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

__all__ = [
    "settings",
    "get_module_logger",
]
