"""
Search service for semantic documentation search.

Clamps request limits, loads the corpus, runs retrieval and formats the
ranked hits with snippets and rounded scores.

Dependencies: fastapi.concurrency, docs_qa.boundary.corpus, docs_qa.core
System role: Search service orchestration layer
"""

import logging

from fastapi.concurrency import run_in_threadpool

from docs_qa.boundary.corpus import ChunkStore
from docs_qa.application.services.limits import clamp_limit
from docs_qa.configs.retrieval import SearchSettings
from docs_qa.core.cost import round_cost
from docs_qa.core.retriever import RetrievalService
from docs_qa.models.search import SearchCost, SearchRequest, SearchResponse, SearchResultItem

logger = logging.getLogger(__name__)

SCORE_DECIMALS = 3


def make_snippet(content: str, length: int = 500) -> str:
    """First ``length`` characters of ``content``, with "..." when truncated."""
    if len(content) > length:
        return content[:length] + "..."
    return content


class SearchService:
    """Semantic search over the documentation corpus."""

    def __init__(
        self,
        chunk_store: ChunkStore,
        retrieval_service: RetrievalService,
        settings: SearchSettings | None = None,
    ) -> None:
        """
        Initialize search service.

        Args:
            chunk_store: Shared corpus store
            retrieval_service: Query embedding and ranking
            settings: Limit and snippet configuration
        """
        self.chunk_store = chunk_store
        self.retrieval_service = retrieval_service
        self.settings = settings or SearchSettings()

    async def search(self, request: SearchRequest, rerank: bool = False) -> SearchResponse:
        """
        Run a search request.

        Args:
            request: Validated search request
            rerank: Re-order candidates with the LLM reranker

        Returns:
            SearchResponse: Ranked results and embedding cost

        Raises:
            CorpusLoadError: If the snapshot cannot be loaded
            EmbeddingProviderError: If the embedding credential is missing or embedding fails
            RerankError: If reranking was requested and failed
        """
        limit = clamp_limit(request.limit, self.settings.default_limit, self.settings.max_limit)
        corpus = await run_in_threadpool(self.chunk_store.load)

        result = await self.retrieval_service.search(
            request.query,
            corpus,
            target_sdk=request.sdk,
            limit=limit,
            rerank=rerank,
        )

        return SearchResponse(
            results=[
                SearchResultItem(
                    url=scored.url,
                    title=scored.title,
                    content=make_snippet(scored.content, self.settings.snippet_length),
                    score=round(scored.score, SCORE_DECIMALS),
                    chunk_index=scored.chunk_index,
                )
                for scored in result.chunks
            ],
            cost=SearchCost(
                tokens=result.tokens_used,
                cost=round_cost(result.dollar_cost),
                rerank_tokens=result.rerank_tokens,
                rerank_cost=None if result.rerank_cost is None else round_cost(result.rerank_cost),
            ),
        )
