"""
Documentation Q&A agent implementation.

Seeds context with one retrieval, then runs a bounded chat loop in which the
model may call ``search_docs`` for more context before answering. The last
permitted turn forces ``tool_choice="none"`` so the loop always ends with an
answer or a fallback.

Dependencies: langchain_core, docs_qa.boundary.llm, docs_qa.core
System role: Documentation agent orchestration
"""

import logging
from typing import TYPE_CHECKING

from langchain_core.messages import AIMessage, ToolMessage

from docs_qa.core.agentic_system.agent.answer_text import last_assistant_text, message_text
from docs_qa.core.agentic_system.agent.docs_agent_prompt import build_initial_messages
from docs_qa.core.agentic_system.agent.docs_agent_schema import AgentAnswer, ConversationState
from docs_qa.core.agentic_system.agent.docs_agent_tool import (
    SEARCH_DOCS_TOOL_NAME,
    create_search_docs_tool,
)
from docs_qa.core.cost import CostLedger
from docs_qa.core.retriever import RetrievalService
from docs_qa.models.chunk import ScoredChunk

if TYPE_CHECKING:
    from docs_qa.boundary.corpus import Corpus
    from docs_qa.boundary.llm import OpenAIChatProvider

logger = logging.getLogger(__name__)

NO_ANSWER_TEXT = "I apologize, but I could not generate an answer."
INCOMPLETE_ANSWER_TEXT = "I apologize, but I could not generate a complete answer."


class DocsAgent:
    """
    Documentation Q&A agent with tool-driven follow-up searches.

    One instance serves every request; all per-question state lives in a
    ConversationState and CostLedger created inside ``answer``.
    """

    def __init__(
        self,
        retrieval_service: RetrievalService,
        chat_provider: "OpenAIChatProvider",
        default_model: str = "gpt-4o-mini",
        max_iterations: int = 5,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        tool_default_limit: int = 5,
        tool_max_limit: int = 10,
    ) -> None:
        """
        Initialize documentation agent.

        Args:
            retrieval_service: Retrieval used for seeding and tool calls
            chat_provider: Chat-completion provider
            default_model: Model used when a request names none
            max_iterations: Maximum model turns per question
            max_tokens: Output token cap per turn
            temperature: Sampling temperature
            tool_default_limit: search_docs results when the model omits limit
            tool_max_limit: Upper bound for search_docs results
        """
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        self._retrieval = retrieval_service
        self._chat = chat_provider
        self._default_model = default_model
        self._max_iterations = max_iterations
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._tool_default_limit = tool_default_limit
        self._tool_max_limit = tool_max_limit

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    async def answer(
        self,
        question: str,
        corpus: "Corpus",
        target_sdk: str | None = None,
        limit: int = 8,
        model: str | None = None,
    ) -> AgentAnswer:
        """
        Answer a question from the documentation.

        Args:
            question: User's question
            corpus: Loaded corpus
            target_sdk: SDK preference applied to every search
            limit: Chunks retrieved for the initial context (already clamped)
            model: Chat model; defaults to the agent's model

        Returns:
            AgentAnswer: Answer, deduplicated sources, iterations and cost

        Raises:
            ConfigurationError: If the chat credential is missing
            EmbeddingProviderError: If any retrieval embedding fails
            ChatProviderError: If any model turn fails
        """
        model = model or self._default_model
        ledger = CostLedger()
        state = ConversationState()

        logger.info(
            f"{__name__}:answer - START question_len={len(question)}, sdk={target_sdk}, "
            f"limit={limit}, model={model}"
        )

        # Seeding
        seed = await self._retrieval.search(question, corpus, target_sdk, limit)
        ledger.add_search(seed.tokens_used, seed.dollar_cost)
        state.record_chunks(seed.chunks)
        state.messages.extend(build_initial_messages(question, seed.chunks, target_sdk))
        logger.info(f"{__name__}:answer - Seeded with {len(seed.chunks)} chunks")

        async def run_search(query: str, search_limit: int) -> list[ScoredChunk]:
            result = await self._retrieval.search(query, corpus, target_sdk, search_limit)
            ledger.add_search(result.tokens_used, result.dollar_cost)
            state.record_chunks(result.chunks)
            return result.chunks

        search_tool = create_search_docs_tool(
            run_search,
            fallback_query=question,
            default_limit=self._tool_default_limit,
            max_limit=self._tool_max_limit,
        )

        answer = ""
        for turn in range(self._max_iterations):
            if state.iterations > self._max_iterations:
                break

            final_turn = (
                state.iterations >= self._max_iterations
                or turn == self._max_iterations - 1
            )
            completion = await self._chat.chat(
                messages=state.messages,
                tools=[search_tool],
                tool_choice="none" if final_turn else "auto",
                model=model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
            ledger.add_completion(
                completion.usage.prompt_tokens,
                completion.usage.completion_tokens,
            )
            message = completion.message
            state.messages.append(message)

            if not (message.tool_calls or message.invalid_tool_calls):
                answer = message_text(message.content) or NO_ANSWER_TEXT
                logger.info(f"{__name__}:answer - Answered on turn {turn + 1}")
                break

            if final_turn:
                # No turn follows, so tool results would never be read
                logger.warning(f"{__name__}:answer - Tool calls on final turn ignored")
                break

            await self._run_tool_calls(message, search_tool, state)

        if not answer:
            logger.warning(
                f"{__name__}:answer - Iteration limit reached (iterations={state.iterations}), "
                f"using last assistant text"
            )
            answer = last_assistant_text(state.messages) or INCOMPLETE_ANSWER_TEXT

        result = AgentAnswer(
            answer=answer,
            sources=state.sources(),
            iterations=state.iterations,
            cost=ledger.finalize(model),
        )
        logger.info(
            f"{__name__}:answer - END iterations={result.iterations}, sources={len(result.sources)}, "
            f"total_cost={result.cost.total_cost}"
        )
        return result

    async def _run_tool_calls(self, message: AIMessage, search_tool, state: ConversationState) -> None:
        """Answer every tool call in ``message`` with a tool message."""
        for tool_call in message.tool_calls:
            if tool_call["name"] == SEARCH_DOCS_TOOL_NAME:
                tool_message = await search_tool.ainvoke({**tool_call, "type": "tool_call"})
                state.iterations += 1
            else:
                logger.warning(f"{__name__}:_run_tool_calls - Unknown tool requested: {tool_call['name']}")
                tool_message = ToolMessage(
                    content=f"Unknown tool: {tool_call['name']}",
                    tool_call_id=tool_call["id"],
                    status="error",
                )
            state.messages.append(tool_message)

        for invalid_call in message.invalid_tool_calls:
            logger.warning(f"{__name__}:_run_tool_calls - Malformed tool call arguments: {invalid_call.get('name')}")
            state.messages.append(
                ToolMessage(
                    content=f"Invalid arguments for tool {invalid_call.get('name')}: {invalid_call.get('error') or 'could not parse JSON'}",
                    tool_call_id=invalid_call.get("id") or "",
                    status="error",
                )
            )
