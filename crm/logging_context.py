"""Correlation ID logging context for tracing requests across modules.

Attaches a request ID to every log record, making it easy to follow a
single webhook delivery from body parsing through customer resolution
to the booking append.

Usage:
    from crm.logging_context import set_request_id

    set_request_id("REQ-abc123")
    logger.info("Processing request")  # → [REQ-abc123] Processing request
"""

import logging
import uuid
from contextvars import ContextVar

_request_id: ContextVar[str] = ContextVar("request_id", default="-")


def new_request_id() -> str:
    """Generate a fresh correlation ID."""
    return f"REQ-{uuid.uuid4().hex[:12]}"


def set_request_id(request_id: str) -> None:
    """Set the correlation ID for the current context."""
    _request_id.set(request_id)


def get_request_id() -> str:
    """Retrieve the current correlation ID."""
    return _request_id.get()


class RequestIdFilter(logging.Filter):
    """Injects request_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()  # type: ignore[attr-defined]
        return True


def install_request_id_filter() -> None:
    """Attach a RequestIdFilter to every root handler.

    Handler-level filters also see records propagated from child loggers,
    so formatters can include ``%(request_id)s`` for the whole process.
    """
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())
