"""
Error translation for the HTTP API.

Reads JSON request bodies, validates them, and maps domain exceptions to
the ``{error, message}`` envelope with the right status code.

Dependencies: fastapi, starlette, pydantic, docs_qa.core.exceptions
System role: HTTP error contract
"""

import json
import logging
from typing import Any, TypeVar

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from docs_qa.core.exceptions import DocsQAException, RequestValidationError
from docs_qa.models.common import ErrorResponse
from docs_qa.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

INTERNAL_ERROR = "Internal server error"
METHOD_NOT_ALLOWED = "Method not allowed. Use POST."
INVALID_JSON = "Invalid JSON in request body"
INVALID_QUERY = 'Missing or invalid "query" field'


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Raises:
        RequestValidationError: If the body is empty or not valid JSON
    """
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestValidationError(INVALID_JSON, field="body") from e


def parse_body(model: type[ModelT], payload: Any) -> ModelT:
    """
    Validate a JSON payload into a request model.

    Only ``query`` can fail validation; other fields are lenient.

    Raises:
        RequestValidationError: If ``query`` is missing, empty or not a string
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(INVALID_QUERY, field="query") from e


def _error_response(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump(exclude_none=True),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{__name__}:request_validation_handler - {request.url.path}: {exc.message}")
    return _error_response(400, exc.message)


async def domain_error_handler(request: Request, exc: DocsQAException) -> JSONResponse:
    log_exception_with_context(
        logger,
        f"{__name__}:domain_error_handler - {exc.message}",
        exc,
        path=request.url.path,
    )
    return _error_response(500, INTERNAL_ERROR, exc.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log_exception_with_context(
        logger,
        f"{__name__}:unhandled_error_handler - Unhandled {type(exc).__name__}",
        exc,
        path=request.url.path,
    )
    return _error_response(500, INTERNAL_ERROR, str(exc) or type(exc).__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        return _error_response(405, METHOD_NOT_ALLOWED)
    return _error_response(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the API's exception handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DocsQAException, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
