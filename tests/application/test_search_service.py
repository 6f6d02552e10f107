"""
Test suite for SearchService.

Covers limit clamping, snippet truncation, score rounding and cost mapping.

System role: Verification of search orchestration
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from docs_qa.application.services import SearchService
from docs_qa.boundary.corpus import ChunkStore
from docs_qa.application.services.limits import clamp_limit
from docs_qa.application.services.search_service import make_snippet
from docs_qa.core.reranker import RerankResult
from docs_qa.core.retriever import RetrievalService
from docs_qa.models.search import SearchRequest


@pytest.fixture
def search_service(chunk_store, mock_embedding_provider) -> SearchService:
    """Provide SearchService over the sample corpus."""
    return SearchService(
        chunk_store=chunk_store,
        retrieval_service=RetrievalService(mock_embedding_provider),
    )


@pytest.mark.parametrize(
    "requested, expected",
    [(None, 10), (0, 10), (-5, 10), (3, 3), (50, 50), (100, 50)],
)
def test_clamp_limit(requested, expected) -> None:
    assert clamp_limit(requested, default=10, maximum=50) == expected


def test_make_snippet() -> None:
    assert make_snippet("short", 500) == "short"
    assert make_snippet("x" * 501, 500) == "x" * 500 + "..."
    assert make_snippet("x" * 500, 500) == "x" * 500


class TestSearchService:
    """Test suite for SearchService.search."""

    @pytest.mark.asyncio
    async def test_returns_ranked_results(self, search_service) -> None:
        response = await search_service.search(SearchRequest(query="sign in"))

        assert [r.url for r in response.results][:2] == [
            "https://docs.example.com/auth/nextjs",
            "https://docs.example.com/auth/react",
        ]
        assert response.results[0].score == 1.0
        assert response.results[1].score == round(response.results[1].score, 3)

    @pytest.mark.asyncio
    async def test_limit_above_max_is_clamped(self, make_chunk, mock_embedding_provider) -> None:
        many = [make_chunk(f"c{i}", [1.0, float(i), 0.0], url=f"https://docs.example.com/{i}") for i in range(60)]
        service = SearchService(ChunkStore(lambda: many), RetrievalService(mock_embedding_provider))

        response = await service.search(SearchRequest(query="q", limit=100))

        assert len(response.results) == 50

    @pytest.mark.asyncio
    async def test_long_content_is_truncated(self, make_chunk, mock_embedding_provider) -> None:
        chunk = make_chunk("long", [1.0, 0.0, 0.0], content="y" * 800)
        service = SearchService(ChunkStore(lambda: [chunk]), RetrievalService(mock_embedding_provider))

        response = await service.search(SearchRequest(query="q"))

        assert response.results[0].content == "y" * 500 + "..."

    @pytest.mark.asyncio
    async def test_reports_cost(self, search_service) -> None:
        response = await search_service.search(SearchRequest(query="abcdefgh"))

        assert response.cost.tokens == 2
        assert response.cost.cost == pytest.approx(0.00000004)

    @pytest.mark.asyncio
    async def test_sdk_preference_applied(self, search_service) -> None:
        response = await search_service.search(SearchRequest(query="sign in", sdk="react"))

        urls = [r.url for r in response.results]
        assert "https://docs.example.com/auth/react" in urls
        assert "https://docs.example.com/auth/nextjs" not in urls

    @pytest.mark.asyncio
    async def test_rerank_reports_rerank_cost(self, chunk_store, mock_embedding_provider, make_scored) -> None:
        reranker = MagicMock()
        reranker.rerank = AsyncMock(
            return_value=RerankResult(chunks=[make_scored("sessions-0", 0.91234)], tokens=400, cost=0.0000712345678)
        )
        service = SearchService(chunk_store, RetrievalService(mock_embedding_provider, reranker=reranker))

        response = await service.search(SearchRequest(query="abcdefgh", limit=1), rerank=True)

        assert [r.score for r in response.results] == [0.912]
        assert response.cost.tokens == 2
        assert response.cost.rerank_tokens == 400
        assert response.cost.rerank_cost == 0.00007123

    @pytest.mark.asyncio
    async def test_plain_search_has_no_rerank_cost(self, search_service) -> None:
        response = await search_service.search(SearchRequest(query="q"))

        assert response.cost.rerank_tokens is None
        assert response.cost.rerank_cost is None
