"""
Test suite for search API endpoint.

Tests POST /api/search with FastAPI TestClient: success, request
validation, method errors and the internal error envelope.

System role: Verification of search HTTP API endpoint
"""

import pytest
from fastapi.testclient import TestClient

from docs_qa.core.exceptions import ConfigurationError, CorpusLoadError, EmbeddingProviderError
from docs_qa.models.search import SearchCost, SearchRequest, SearchResponse, SearchResultItem


@pytest.fixture
def sample_search_response() -> SearchResponse:
    """Provide sample search response."""
    return SearchResponse(
        results=[
            SearchResultItem(
                url="https://docs.example.com/auth",
                title="Authentication",
                content="Use the SignIn component...",
                score=0.912,
                chunk_index=0,
            )
        ],
        cost=SearchCost(tokens=3, cost=0.00000006),
    )


class TestSearchEndpointSuccessful:
    """Test suite for successful search requests."""

    def test_search_should_return_results(
        self, client: TestClient, mock_search_service, sample_search_response
    ) -> None:
        mock_search_service.search.return_value = sample_search_response

        response = client.post("/api/search", json={"query": "sign in"})

        assert response.status_code == 200
        assert response.json() == {
            "results": [
                {
                    "url": "https://docs.example.com/auth",
                    "title": "Authentication",
                    "content": "Use the SignIn component...",
                    "score": 0.912,
                    "chunk_index": 0,
                }
            ],
            "cost": {"tokens": 3, "cost": 0.00000006},
        }

    def test_search_should_pass_validated_request(
        self, client: TestClient, mock_search_service, sample_search_response
    ) -> None:
        mock_search_service.search.return_value = sample_search_response

        client.post("/api/search", json={"query": "sign in", "limit": 5, "sdk": "react"})

        request = mock_search_service.search.await_args.args[0]
        assert request == SearchRequest(query="sign in", limit=5, sdk="react")

    def test_search_should_ignore_unknown_sdk(
        self, client: TestClient, mock_search_service, sample_search_response
    ) -> None:
        mock_search_service.search.return_value = sample_search_response

        response = client.post("/api/search", json={"query": "sign in", "sdk": "cobol"})

        assert response.status_code == 200
        assert mock_search_service.search.await_args.args[0].sdk is None

    def test_search_should_echo_correlation_id(
        self, client: TestClient, mock_search_service, sample_search_response
    ) -> None:
        mock_search_service.search.return_value = sample_search_response

        response = client.post(
            "/api/search",
            json={"query": "sign in"},
            headers={"X-Correlation-ID": "test-correlation"},
        )

        assert response.headers["X-Correlation-ID"] == "test-correlation"


class TestSearchEndpointErrors:
    """Test suite for search request errors."""

    def test_get_should_return_405(self, client: TestClient) -> None:
        response = client.get("/api/search")

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed. Use POST."}

    def test_invalid_json_should_return_400(self, client: TestClient, mock_search_service) -> None:
        response = client.post(
            "/api/search",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON in request body"}
        mock_search_service.search.assert_not_awaited()

    @pytest.mark.parametrize(
        "payload",
        [{}, {"query": ""}, {"query": 123}, {"limit": 5}, ["query"], "query"],
    )
    def test_missing_query_should_return_400(self, client: TestClient, payload) -> None:
        response = client.post("/api/search", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": 'Missing or invalid "query" field'}

    @pytest.mark.parametrize(
        "error, message",
        [
            (
                EmbeddingProviderError("Failed to generate query embedding: boom", operation="embed"),
                "Failed to generate query embedding: boom",
            ),
            (
                ConfigurationError("OPENAI_API_KEY environment variable is not set", setting="OPENAI_API_KEY"),
                "OPENAI_API_KEY environment variable is not set",
            ),
            (
                CorpusLoadError("Failed to load embeddings: missing", path="dist/embeddings.json"),
                "Failed to load embeddings: missing",
            ),
        ],
    )
    def test_internal_failure_should_return_500_envelope(
        self, client: TestClient, mock_search_service, error, message
    ) -> None:
        mock_search_service.search.side_effect = error

        response = client.post("/api/search", json={"query": "sign in"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": message}

    def test_bare_exception_should_name_its_type(self, error_client: TestClient, mock_search_service) -> None:
        mock_search_service.search.side_effect = RuntimeError()

        response = error_client.post("/api/search", json={"query": "sign in"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": "RuntimeError"}
