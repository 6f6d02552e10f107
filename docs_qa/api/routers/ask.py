"""Ask API endpoint.

Routes:
- POST /ask - Answer a question from the documentation with sources

Dependencies: docs_qa.application.services.ask_service
System role: Question-answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request

from docs_qa.api.deps import get_ask_service
from docs_qa.api.errors import parse_body, read_json_body
from docs_qa.application.services import AskService
from docs_qa.models.ask import AskRequest, AskResponse
from docs_qa.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ask"])


@router.post(
    "/ask",
    response_model=AskResponse,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ask(
    request: Request,
    ask_service: AskService = Depends(get_ask_service),
) -> AskResponse:
    """Answer a question using retrieval plus tool-calling chat.

    Body: ``{"query": str, "sdk"?: str, "limit"?: int (1-20, default 8), "model"?: str}``.

    Args:
        request: Raw request (body parsed here to control error shapes)
        ask_service: Injected AskService

    Returns:
        AskResponse: Answer, sources, iterations and cost breakdown
    """
    ask_request = parse_body(AskRequest, await read_json_body(request))
    logger.info(f"{__name__}:ask - query_len={len(ask_request.query)}, sdk={ask_request.sdk}")
    return await ask_service.ask(ask_request)
