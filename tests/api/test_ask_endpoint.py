"""
Test suite for ask API endpoint.

Tests POST /api/ask with FastAPI TestClient.

System role: Verification of ask HTTP API endpoint
"""

import pytest
from fastapi.testclient import TestClient

from docs_qa.core.exceptions import ChatProviderError
from docs_qa.models.ask import AskCost, AskResponse, AskSource


@pytest.fixture
def sample_ask_response() -> AskResponse:
    """Provide sample ask response."""
    return AskResponse(
        answer="Wrap your app in <ClerkProvider>.",
        sources=[AskSource(url="https://docs.example.com/quickstart", title="Quickstart", chunk_index=0)],
        iterations=2,
        cost=AskCost(
            search_tokens=10,
            search_cost=0.0000002,
            completion_tokens=1200,
            completion_cost=0.000234,
            total_cost=0.0002342,
        ),
    )


class TestAskEndpoint:
    """Test suite for POST /api/ask."""

    def test_ask_should_return_answer(self, client: TestClient, mock_ask_service, sample_ask_response) -> None:
        mock_ask_service.ask.return_value = sample_ask_response

        response = client.post("/api/ask", json={"query": "How do I get started?"})

        assert response.status_code == 200
        body = response.json()
        assert body["answer"] == "Wrap your app in <ClerkProvider>."
        assert body["sources"] == [
            {"url": "https://docs.example.com/quickstart", "title": "Quickstart", "chunk_index": 0}
        ]
        assert body["iterations"] == 2
        assert set(body["cost"]) == {
            "search_tokens",
            "search_cost",
            "completion_tokens",
            "completion_cost",
            "total_cost",
        }

    def test_ask_should_forward_options(self, client: TestClient, mock_ask_service, sample_ask_response) -> None:
        mock_ask_service.ask.return_value = sample_ask_response

        client.post(
            "/api/ask",
            json={"query": "q", "sdk": "nextjs", "limit": 12, "model": "gpt-4o"},
        )

        request = mock_ask_service.ask.await_args.args[0]
        assert (request.sdk, request.limit, request.model) == ("nextjs", 12, "gpt-4o")

    def test_get_should_return_405(self, client: TestClient) -> None:
        response = client.get("/api/ask")

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed. Use POST."}

    def test_missing_query_should_return_400(self, client: TestClient, mock_ask_service) -> None:
        response = client.post("/api/ask", json={"sdk": "react"})

        assert response.status_code == 400
        assert response.json() == {"error": 'Missing or invalid "query" field'}
        mock_ask_service.ask.assert_not_awaited()

    def test_chat_failure_should_return_500(self, client: TestClient, mock_ask_service) -> None:
        mock_ask_service.ask.side_effect = ChatProviderError("Chat completion failed: timeout", operation="chat")

        response = client.post("/api/ask", json={"query": "q"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "message": "Chat completion failed: timeout",
        }

    def test_unexpected_error_should_return_500_envelope(self, error_client: TestClient, mock_ask_service) -> None:
        mock_ask_service.ask.side_effect = OverflowError("cannot convert float infinity to integer")

        response = error_client.post("/api/ask", json={"query": "q"})

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {
            "error": "Internal server error",
            "message": "cannot convert float infinity to integer",
        }
