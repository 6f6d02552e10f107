"""
Logging helpers for request and error context.

Dependencies: logging (stdlib)
System role: Bounded, structured log values for queries and domain errors
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 120) -> str:
    """
    Render a value for a log line, truncating long text.

    Query text is user input; only a bounded preview is logged.
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        text = str(value)

    if len(text) > max_length:
        return text[:max_length] + f"... ({len(text)} chars)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception at ERROR with its type, domain details and extra context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance; ``details`` is included when present
        **context: Additional key/values appended to the message
    """
    fields = {key: safe_log_value(value) for key, value in context.items()}
    fields["error_type"] = type(exc).__name__
    for key, value in getattr(exc, "details", {}).items():
        fields.setdefault(key, safe_log_value(value))

    rendered = ", ".join(f"{key}={value}" for key, value in fields.items())
    logger.error(f"{message} ({rendered})", exc_info=exc)
