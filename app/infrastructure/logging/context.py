"""Callback context binding for structured logging.

Binds the identity of one lifecycle callback (correlation id, job, event
kind, actor) so that every log line emitted while handling it carries the
same context.

Usage:
    from infrastructure.logging import bind_event_context

    with bind_event_context(job_name="job-A", event_kind="updated"):
        logger.info("composing_notification")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_event_context(
    correlation_id: Optional[str] = None,
    job_name: Optional[str] = None,
    event_kind: Optional[str] = None,
    actor: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind callback-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique callback identifier. Auto-generated if not provided.
        job_name: Name of the job the event concerns.
        event_kind: Lifecycle event kind (renamed, updated, deleted).
        actor: User that triggered the change.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {}

    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    if job_name is not None:
        context["job_name"] = job_name

    if event_kind is not None:
        context["event_kind"] = event_kind

    if actor is not None:
        context["actor"] = actor

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_event_context() -> None:
    """Clear all callback-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
