"""Search API endpoint.

Routes:
- POST /search - Semantic search over the documentation corpus

Dependencies: docs_qa.application.services.search_service
System role: Search HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request

from docs_qa.api.deps import get_search_service
from docs_qa.api.errors import parse_body, read_json_body
from docs_qa.application.services import SearchService
from docs_qa.models.common import ErrorResponse
from docs_qa.models.search import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


@router.post(
    "/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search(
    request: Request,
    search_service: SearchService = Depends(get_search_service),
) -> SearchResponse:
    """Rank documentation chunks against a query.

    Body: ``{"query": str, "limit"?: int (1-50, default 10), "sdk"?: str}``.
    Unknown SDKs are ignored.

    Args:
        request: Raw request (body parsed here to control error shapes)
        search_service: Injected SearchService

    Returns:
        SearchResponse: Ranked snippets and embedding cost
    """
    search_request = parse_body(SearchRequest, await read_json_body(request))
    logger.info(f"{__name__}:search - query_len={len(search_request.query)}, sdk={search_request.sdk}")
    return await search_service.search(search_request)
