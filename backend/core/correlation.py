"""
Request correlation IDs.

A contact submission is answered with a single line of text, so the
``X-Correlation-ID`` response header is the only handle a client has when
reporting a failed request. The same ID is stamped on every log line and
Sentry event produced while handling that request.
"""

import uuid
from contextvars import ContextVar

CORRELATION_HEADER = "X-Correlation-ID"

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Return a fresh 8-character hex ID, short enough to read out over the phone."""
    return uuid.uuid4().hex[:8]


def get_correlation_id() -> str:
    """Return the ID of the request being handled, or "" at startup and in tests."""
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str) -> None:
    """
    Bind an ID to the current request.

    Args:
        correlation_id: Client-supplied ``X-Correlation-ID`` value, or a
            generated one when the client sent none.
    """
    correlation_id_var.set(correlation_id)
