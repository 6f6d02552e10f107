"""
Semantic retrieval over the in-memory corpus.

Embeds the query, scores every chunk, applies SDK-aware selection and
returns the top results with the embedding cost of the call. Optionally
reranks a wider candidate set with a chat model.

Dependencies: docs_qa.boundary, docs_qa.core
System role: Retrieval service shared by search and ask
"""

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from docs_qa.core.cost import EMBEDDING_PRICE_PER_1K, embedding_cost
from docs_qa.core.exceptions import ConfigurationError
from docs_qa.core.sdk_selector import select_by_sdk
from docs_qa.core.similarity import score_matrix
from docs_qa.core.token_estimator import estimate_tokens
from docs_qa.models.chunk import ScoredChunk

if TYPE_CHECKING:
    from docs_qa.boundary.corpus import Corpus
    from docs_qa.boundary.llm import OpenAIEmbeddingProvider
    from docs_qa.core.reranker import Reranker

logger = logging.getLogger(__name__)


class RetrievalResult(BaseModel):
    """Top chunks for one query and what embedding (and reranking) cost."""

    chunks: list[ScoredChunk] = Field(default_factory=list)
    tokens_used: int = Field(default=0, ge=0)
    dollar_cost: float = Field(default=0.0, ge=0.0)
    rerank_tokens: int | None = Field(default=None, ge=0, description="Set only when reranking ran")
    rerank_cost: float | None = Field(default=None, ge=0.0, description="Set only when reranking ran")

    @property
    def total_tokens(self) -> int:
        return self.tokens_used + (self.rerank_tokens or 0)

    @property
    def total_cost(self) -> float:
        return self.dollar_cost + (self.rerank_cost or 0.0)


class RetrievalService:
    """Query embedding, scoring and ranking."""

    def __init__(
        self,
        embedding_provider: "OpenAIEmbeddingProvider",
        price_per_1k: float = EMBEDDING_PRICE_PER_1K,
        reranker: "Reranker | None" = None,
        candidate_padding: int = 50,
        max_candidates: int = 200,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            embedding_provider: Provider exposing ``async embed(text)``
            price_per_1k: Embedding price in dollars per 1K tokens
            reranker: Second-stage scorer; required for ``rerank=True``
            candidate_padding: Candidates beyond ``limit`` handed to the reranker
            max_candidates: Upper bound on reranker candidates
        """
        self._embedding_provider = embedding_provider
        self._price_per_1k = price_per_1k
        self._reranker = reranker
        self._candidate_padding = candidate_padding
        self._max_candidates = max_candidates

    def candidate_limit(self, limit: int) -> int:
        """Number of similarity-ranked candidates the reranker scores."""
        return min(limit + self._candidate_padding, self._max_candidates)

    async def search(
        self,
        query_text: str,
        corpus: "Corpus",
        target_sdk: str | None = None,
        limit: int = 10,
        rerank: bool = False,
    ) -> RetrievalResult:
        """
        Rank the corpus against a query.

        ``limit`` is used as given; callers clamp it.

        Args:
            query_text: Free-text query
            corpus: Loaded corpus
            target_sdk: Preferred SDK variant, if any
            limit: Number of chunks to return
            rerank: Re-order a wider candidate set with the reranker

        Returns:
            RetrievalResult: Top ``limit`` chunks by descending score plus cost

        Raises:
            EmbeddingProviderError: If the embedding credential is missing or the call fails
            VectorDimensionError: If the query and corpus dimensions differ
            ConfigurationError: If reranking is requested without a reranker
                or the chat credential is missing
            RerankError: If reranking fails
        """
        if rerank and self._reranker is None:
            raise ConfigurationError("Reranking is not configured", setting="reranker")

        tokens_used = estimate_tokens(query_text)
        logger.info(
            f"{__name__}:search - START query_len={len(query_text)}, sdk={target_sdk}, limit={limit}, rerank={rerank}"
        )

        query_vector = await self._embedding_provider.embed(query_text)

        scores = score_matrix(query_vector, corpus.matrix, corpus.norms)
        scored = [
            ScoredChunk.model_construct(chunk=chunk, score=float(score))
            for chunk, score in zip(corpus, scores)
        ]

        selected = select_by_sdk(scored, target_sdk)
        ranked = sorted(selected, key=lambda item: item.score, reverse=True)
        result = RetrievalResult(
            tokens_used=tokens_used,
            dollar_cost=embedding_cost(tokens_used, self._price_per_1k),
        )

        if rerank:
            candidates = ranked[: max(self.candidate_limit(limit), 0)]
            reranked = await self._reranker.rerank(query_text, candidates, limit)
            result.chunks = reranked.chunks
            result.rerank_tokens = reranked.tokens
            result.rerank_cost = reranked.cost
        else:
            result.chunks = ranked[: max(limit, 0)]

        logger.info(f"{__name__}:search - END candidates={len(selected)}, returned={len(result.chunks)}")
        return result
