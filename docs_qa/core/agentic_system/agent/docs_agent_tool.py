"""
Documentation agent search tool.

Defines the ``search_docs`` tool the chat model can call to run additional
retrieval. The tool delegates to a search callback owned by the running
conversation, so results land in that conversation's state.

Dependencies: langchain_core.tools, pydantic
System role: Search tool for documentation agent context retrieval
"""

import json
import logging
import math
from collections.abc import Awaitable, Callable
from typing import Any

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field, model_validator

from docs_qa.models.chunk import ScoredChunk
from docs_qa.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

SEARCH_DOCS_TOOL_NAME = "search_docs"
SEARCH_DOCS_DESCRIPTION = (
    "Search the Clerk documentation for relevant information. Use this when you need "
    "more specific information to answer the question accurately."
)

SearchCallback = Callable[[str, int], Awaitable[list[ScoredChunk]]]


class SearchDocsInput(BaseModel):
    """Arguments of the search_docs tool."""

    query: str = Field(description="The search query to find relevant documentation")
    limit: float | None = Field(
        default=5,
        description="Number of results to return (default: 5, max: 10)",
    )

    @model_validator(mode="before")
    @classmethod
    def _blank_missing_query(cls, data: Any) -> Any:
        # search_docs substitutes the user's question for a blank query
        if isinstance(data, dict) and data.get("query") is None:
            return {**data, "query": ""}
        return data


def clamp_tool_limit(limit: float | None, default_limit: int = 5, max_limit: int = 10) -> int:
    """Bound a model-requested result count to ``[1, max_limit]``."""
    if limit is None or not math.isfinite(limit) or limit < 1:
        return default_limit
    return min(int(limit), max_limit)


def format_tool_results(chunks: list[ScoredChunk]) -> str:
    """Serialize search hits for a tool message."""
    return json.dumps(
        [
            {
                "title": scored.title,
                "url": scored.url,
                "content": scored.content,
                "score": scored.score,
            }
            for scored in chunks
        ],
        indent=2,
    )


def create_search_docs_tool(
    run_search: SearchCallback,
    fallback_query: str,
    default_limit: int = 5,
    max_limit: int = 10,
) -> StructuredTool:
    """
    Create a search_docs tool bound to one conversation.

    Args:
        run_search: Coroutine ``(query, limit) -> chunks`` performing retrieval
        fallback_query: Query used when the model omits one (the original question)
        default_limit: Results when the model omits ``limit``
        max_limit: Upper bound on ``limit``

    Returns:
        StructuredTool: Async tool named ``search_docs``
    """

    async def search_docs(query: str = "", limit: float | None = None) -> str:
        search_query = query or fallback_query
        search_limit = clamp_tool_limit(limit, default_limit, max_limit)
        logger.info(
            f"{__name__}:search_docs - START query={safe_log_value(search_query)}, limit={search_limit}"
        )

        chunks = await run_search(search_query, search_limit)

        logger.info(f"{__name__}:search_docs - END results={len(chunks)}")
        return format_tool_results(chunks)

    return StructuredTool.from_function(
        coroutine=search_docs,
        name=SEARCH_DOCS_TOOL_NAME,
        description=SEARCH_DOCS_DESCRIPTION,
        args_schema=SearchDocsInput,
        handle_validation_error=True,
    )
