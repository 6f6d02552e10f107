"""
Shared test fixtures and configuration for entire test suite.

Provides: chunk factory, in-memory corpus, fake embedding provider, scripted chat provider
Dependencies: pytest, langchain_core, unittest.mock
System role: Test infrastructure and fixture management
"""

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from docs_qa.boundary.corpus import ChunkStore, Corpus
from docs_qa.boundary.llm import ChatCompletion, TokenUsage
from docs_qa.configs import get_settings
from docs_qa.models.chunk import DocumentChunk, ScoredChunk


def _make_chunk(
    chunk_id: str,
    embedding: list[float],
    url: str = "https://docs.example.com/page",
    title: str = "Page",
    chunk_index: int = 0,
    sdk: str | None = None,
    base_url: str | None = None,
    content: str | None = None,
) -> DocumentChunk:
    return DocumentChunk(
        id=chunk_id,
        content=content if content is not None else f"Content of {chunk_id}",
        embedding=embedding,
        url=url,
        title=title,
        chunk_index=chunk_index,
        sdk=sdk,
        base_url=base_url,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Isolate tests from cached settings and environment changes."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_chunk() -> Callable[..., DocumentChunk]:
    """Provide DocumentChunk factory."""
    return _make_chunk


@pytest.fixture
def make_scored(make_chunk) -> Callable[..., ScoredChunk]:
    """Provide ScoredChunk factory: ``make_scored(id, score, **chunk_fields)``."""

    def factory(chunk_id: str, score: float, **fields) -> ScoredChunk:
        return ScoredChunk(chunk=make_chunk(chunk_id, [1.0, 0.0, 0.0], **fields), score=score)

    return factory


@pytest.fixture
def sample_chunks(make_chunk) -> list[DocumentChunk]:
    """
    Provide a small corpus with two SDK variants of one page.

    Against the query vector [1, 0, 0] the scores are ordered
    auth-nextjs > auth-react > sessions-1 > sessions-0.
    """
    return [
        make_chunk(
            "auth-react",
            [0.9, 0.1, 0.0],
            url="https://docs.example.com/auth/react",
            title="Authentication (React)",
            sdk="react",
            base_url="https://docs.example.com/auth",
        ),
        make_chunk(
            "auth-nextjs",
            [1.0, 0.0, 0.0],
            url="https://docs.example.com/auth/nextjs",
            title="Authentication (Next.js)",
            sdk="nextjs",
            base_url="https://docs.example.com/auth",
        ),
        make_chunk(
            "sessions-0",
            [0.0, 1.0, 0.0],
            url="https://docs.example.com/sessions",
            title="Sessions",
            chunk_index=0,
        ),
        make_chunk(
            "sessions-1",
            [0.5, 0.5, 0.0],
            url="https://docs.example.com/sessions",
            title="Sessions",
            chunk_index=1,
        ),
    ]


@pytest.fixture
def corpus(sample_chunks) -> Corpus:
    """Provide in-memory corpus built from sample_chunks."""
    return Corpus(sample_chunks)


@pytest.fixture
def chunk_store(sample_chunks) -> ChunkStore:
    """Provide chunk store whose loader returns sample_chunks."""
    return ChunkStore(lambda: list(sample_chunks))


@pytest.fixture
def mock_embedding_provider() -> MagicMock:
    """
    Provide fake embedding provider.

    Returns:
        MagicMock: ``embed`` always returns [1, 0, 0]
    """
    provider = MagicMock()
    provider.embed = AsyncMock(return_value=[1.0, 0.0, 0.0])
    return provider


def make_completion(
    content: str | list = "",
    tool_calls: list[dict] | None = None,
    invalid_tool_calls: list[dict] | None = None,
    prompt_tokens: int = 100,
    completion_tokens: int = 20,
) -> ChatCompletion:
    message = AIMessage(
        content=content,
        tool_calls=tool_calls or [],
        invalid_tool_calls=invalid_tool_calls or [],
    )
    return ChatCompletion(
        message=message,
        usage=TokenUsage(prompt_tokens=prompt_tokens, completion_tokens=completion_tokens),
    )


def search_call(call_id: str, query: str | None = "follow-up", limit: int | None = None) -> dict:
    args = {}
    if query is not None:
        args["query"] = query
    if limit is not None:
        args["limit"] = limit
    return {"name": "search_docs", "args": args, "id": call_id}


@pytest.fixture
def completion_factory() -> Callable[..., ChatCompletion]:
    """Provide ChatCompletion factory."""
    return make_completion


@pytest.fixture
def search_call_factory() -> Callable[..., dict]:
    """Provide search_docs tool-call factory."""
    return search_call


@pytest.fixture
def scripted_chat_provider() -> MagicMock:
    """
    Provide chat provider whose replies are set per test.

    Assign ``provider.chat.side_effect`` to a list of ChatCompletion objects
    or a function of the call's keyword arguments.
    """
    provider = MagicMock()
    provider.chat = AsyncMock()
    return provider
