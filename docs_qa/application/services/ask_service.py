"""
Ask service for documentation Q&A.

Clamps request limits, resolves the chat model, loads the corpus and runs
the documentation agent.

Dependencies: fastapi.concurrency, docs_qa.boundary.corpus, docs_qa.core.agentic_system
System role: Ask service orchestration layer
"""

import logging

from fastapi.concurrency import run_in_threadpool

from docs_qa.application.services.limits import clamp_limit
from docs_qa.boundary.corpus import ChunkStore
from docs_qa.configs.retrieval import AskSettings
from docs_qa.core.agentic_system.agent import DocsAgent
from docs_qa.models.ask import AskRequest, AskResponse

logger = logging.getLogger(__name__)


class AskService:
    """Question answering over the documentation corpus."""

    def __init__(
        self,
        chunk_store: ChunkStore,
        docs_agent: DocsAgent,
        settings: AskSettings | None = None,
    ) -> None:
        """
        Initialize ask service.

        Args:
            chunk_store: Shared corpus store
            docs_agent: Documentation agent instance
            settings: Limit configuration
        """
        self.chunk_store = chunk_store
        self.docs_agent = docs_agent
        self.settings = settings or AskSettings()

    async def ask(self, request: AskRequest) -> AskResponse:
        """
        Answer a question.

        Flow:
        1. Clamp limit and load the corpus
        2. Run the documentation agent
        3. Map the agent answer to the API response

        Args:
            request: Validated ask request

        Returns:
            AskResponse: Answer, sources, iterations and cost

        Raises:
            CorpusLoadError: If the snapshot cannot be loaded
            ConfigurationError: If the chat credential is missing
            ProviderError: If an embedding or chat call fails
        """
        limit = clamp_limit(request.limit, self.settings.default_limit, self.settings.max_limit)
        corpus = await run_in_threadpool(self.chunk_store.load)

        agent_answer = await self.docs_agent.answer(
            question=request.query,
            corpus=corpus,
            target_sdk=request.sdk,
            limit=limit,
            model=request.model,
        )

        return AskResponse(
            answer=agent_answer.answer,
            sources=agent_answer.sources,
            iterations=agent_answer.iterations,
            cost=agent_answer.cost,
        )
