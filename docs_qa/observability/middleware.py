"""
FastAPI middleware for observability.

Correlation ID propagation and one access-log line per request with its
duration.

Dependencies: fastapi, starlette, docs_qa.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from docs_qa.observability.correlation import correlation_scope

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access logging with wall-clock duration."""

    async def dispatch(self, request: Request, call_next):
        """
        Time the request and log method, path, status and duration.

        Errors that escape the exception handlers are logged and re-raised.
        """
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response: Response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(f"{route} - unhandled {type(e).__name__} after {elapsed_ms:.1f}ms")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[RESPONSE_TIME_HEADER] = f"{elapsed_ms:.1f}"
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, f"{route} - {response.status_code} in {elapsed_ms:.1f}ms")
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Use the caller's correlation ID (or a new one) for this request.

        Returns:
            Response: Response with correlation ID header
        """
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
