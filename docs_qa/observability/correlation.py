"""
Correlation ID propagation.

One ID per request, held in a ContextVar so log records emitted from any
coroutine or worker thread of that request carry it.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
import uuid

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Current correlation ID, "" outside a request."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation ID for the duration of the block.

    The previous value is restored on exit, so nested scopes and
    interleaved requests do not leak IDs into each other.
    """
    token = _correlation_id.set(correlation_id or str(uuid.uuid4()))
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)
