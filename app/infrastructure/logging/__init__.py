"""Structured logging infrastructure.

Centralized logging configuration and utilities using structlog.

Public API:
    - configure_logging(): Initialize logging
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_event_context(): Context manager for callback-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_event_context(): Clear all callback context

Formatters:
    - add_app_info(): Processor to add app name/version
    - mask_sensitive_data(): Processor to redact sensitive fields
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_event_context,
    get_correlation_id,
    clear_event_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_event_context",
    "get_correlation_id",
    "clear_event_context",
    # Formatters
    "add_app_info",
    "mask_sensitive_data",
    "SENSITIVE_PATTERNS",
]
