"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: docs_qa.configs, docs_qa.application, docs_qa.boundary, docs_qa.core
System role: DI container for service injection
"""

from docs_qa.application.services import AskService, SearchService
from docs_qa.boundary.corpus import ChunkStore, get_chunk_store
from docs_qa.boundary.llm import OpenAIChatProvider, OpenAIEmbeddingProvider
from docs_qa.configs import get_settings
from docs_qa.core.agentic_system.agent import DocsAgent
from docs_qa.core.reranker import Reranker
from docs_qa.core.retriever import RetrievalService


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._embedding_provider = None
        self._chat_provider = None
        self._reranker = None
        self._retrieval_service = None
        self._docs_agent = None

    @property
    def chunk_store(self) -> ChunkStore:
        """Get the process-wide chunk store."""
        return get_chunk_store()

    @property
    def embedding_provider(self) -> OpenAIEmbeddingProvider:
        """Get cached embedding provider."""
        if self._embedding_provider is None:
            openai_settings = get_settings().openai
            self._embedding_provider = OpenAIEmbeddingProvider(
                api_key=openai_settings.api_key,
                model=openai_settings.embedding_model,
                base_url=openai_settings.base_url,
            )
        return self._embedding_provider

    @property
    def chat_provider(self) -> OpenAIChatProvider:
        """Get cached chat provider."""
        if self._chat_provider is None:
            openai_settings = get_settings().openai
            self._chat_provider = OpenAIChatProvider(
                api_key=openai_settings.api_key,
                base_url=openai_settings.base_url,
            )
        return self._chat_provider

    @property
    def reranker(self) -> Reranker:
        """Get cached LLM reranker."""
        if self._reranker is None:
            rerank_settings = get_settings().rerank
            self._reranker = Reranker(
                self.chat_provider,
                model=rerank_settings.model,
                content_chars=rerank_settings.content_chars,
            )
        return self._reranker

    @property
    def retrieval_service(self) -> RetrievalService:
        """Get cached retrieval service."""
        if self._retrieval_service is None:
            rerank_settings = get_settings().rerank
            self._retrieval_service = RetrievalService(
                self.embedding_provider,
                reranker=self.reranker,
                candidate_padding=rerank_settings.candidate_padding,
                max_candidates=rerank_settings.max_candidates,
            )
        return self._retrieval_service

    @property
    def docs_agent(self) -> DocsAgent:
        """Get cached documentation agent."""
        if self._docs_agent is None:
            settings = get_settings()
            self._docs_agent = DocsAgent(
                retrieval_service=self.retrieval_service,
                chat_provider=self.chat_provider,
                default_model=settings.openai.chat_model,
                max_iterations=settings.ask.max_iterations,
                max_tokens=settings.openai.max_tokens,
                temperature=settings.openai.temperature,
                tool_default_limit=settings.ask.tool_default_limit,
                tool_max_limit=settings.ask.tool_max_limit,
            )
        return self._docs_agent

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_provider = None
        self._chat_provider = None
        self._reranker = None
        self._retrieval_service = None
        self._docs_agent = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_search_service() -> SearchService:
    """
    Get search service instance.

    Returns:
        SearchService: Search service over the shared corpus
    """
    cache = get_service_cache()
    return SearchService(
        chunk_store=cache.chunk_store,
        retrieval_service=cache.retrieval_service,
        settings=get_settings().search,
    )


def get_ask_service() -> AskService:
    """
    Get ask service instance.

    Returns:
        AskService: Ask service over the shared corpus
    """
    cache = get_service_cache()
    return AskService(
        chunk_store=cache.chunk_store,
        docs_agent=cache.docs_agent,
        settings=get_settings().ask,
    )
