"""
API test fixtures.

Provides: application with real routers and error handlers, TestClient,
mocked search/ask services wired through dependency_overrides
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docs_qa.api.deps import get_ask_service, get_search_service
from docs_qa.main import create_app


@pytest.fixture
def app() -> FastAPI:
    """Create FastAPI application."""
    return create_app()


@pytest.fixture
def mock_search_service() -> AsyncMock:
    """Provide mocked SearchService."""
    return AsyncMock()


@pytest.fixture
def mock_ask_service() -> AsyncMock:
    """Provide mocked AskService."""
    return AsyncMock()


@pytest.fixture
def client(app: FastAPI, mock_search_service, mock_ask_service) -> TestClient:
    """Provide TestClient with services overridden."""
    app.dependency_overrides[get_search_service] = lambda: mock_search_service
    app.dependency_overrides[get_ask_service] = lambda: mock_ask_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def error_client(client: TestClient) -> TestClient:
    """Provide TestClient that returns server error responses instead of re-raising."""
    return TestClient(client.app, raise_server_exceptions=False)
