"""
Observability module.

Provides logging configuration, correlation ID tracking and request logging
middleware.
"""

from docs_qa.observability.correlation import correlation_scope, get_correlation_id
from docs_qa.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
]
