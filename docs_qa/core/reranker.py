"""
LLM reranking of retrieval candidates.

Asks a chat model in JSON mode to score each candidate's relevance to the
query, then re-sorts the candidates by those scores.

Dependencies: docs_qa.boundary.llm, docs_qa.core
System role: Optional second ranking stage for search
"""

import json
import logging
import math
import re
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from docs_qa.core.agentic_system.agent.answer_text import message_text
from docs_qa.core.cost import chat_cost
from docs_qa.core.exceptions import ChatProviderError, RerankError
from docs_qa.models.chunk import ScoredChunk

if TYPE_CHECKING:
    from docs_qa.boundary.llm import OpenAIChatProvider

logger = logging.getLogger(__name__)

CANDIDATE_SEPARATOR = "\n\n---\n\n"
_SCORE_ARRAY = re.compile(r"\[[\d.,\s]+\]")


class RerankResult(BaseModel):
    """Reranked chunks and the chat usage spent scoring them."""

    chunks: list[ScoredChunk] = Field(default_factory=list)
    tokens: int = Field(default=0, ge=0)
    cost: float = Field(default=0.0, ge=0.0)


def build_rerank_prompt(query: str, chunks: list[ScoredChunk], content_chars: int = 1000) -> str:
    """Prompt asking for one relevance score per numbered candidate."""
    documents = CANDIDATE_SEPARATOR.join(
        f"[{index}] {scored.title}\n{scored.content[:content_chars]}"
        for index, scored in enumerate(chunks)
    )
    return (
        "Given a search query and multiple documents, rate each document's relevance to the query.\n"
        f'Return a JSON object with a "scores" array containing exactly {len(chunks)} relevance scores '
        "(0.0 = not relevant, 1.0 = highly relevant), one score per document in order.\n\n"
        f"Query: {query}\n\n"
        f"Documents:\n{documents}\n\n"
        'Respond with JSON: {"scores": [0.9, 0.7, 0.3, ...]}'
    )


def _as_score(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    value = float(value)
    return value if math.isfinite(value) else 0.0


def parse_rerank_scores(content: str, expected: int) -> list[float]:
    """
    Read relevance scores from a model reply.

    Accepts ``{"scores": [...]}`` or a bare array, and falls back to the
    first numeric array found in the text. Non-numeric entries score 0.

    Raises:
        RerankError: If no scores can be read or their count is not ``expected``
    """
    if not content or not content.strip():
        raise RerankError("Failed to rerank chunks: empty response", operation="rerank")

    try:
        parsed: Any = json.loads(content)
    except json.JSONDecodeError:
        parsed = None

    raw: Any = None
    if isinstance(parsed, list):
        raw = parsed
    elif isinstance(parsed, dict) and isinstance(parsed.get("scores"), list):
        raw = parsed["scores"]

    if raw is None:
        match = _SCORE_ARRAY.search(content)
        if match is None:
            raise RerankError(
                "Failed to rerank chunks: could not parse scores from response",
                operation="rerank",
                details={"response_len": len(content)},
            )
        try:
            raw = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise RerankError(
                "Failed to rerank chunks: could not parse scores from response",
                operation="rerank",
            ) from e

    if len(raw) != expected:
        raise RerankError(
            f"Failed to rerank chunks: expected {expected} scores, got {len(raw)}",
            operation="rerank",
            details={"expected": expected, "received": len(raw)},
        )
    return [_as_score(value) for value in raw]


class Reranker:
    """Scores candidates with a chat model and keeps the best ``top_k``."""

    def __init__(
        self,
        chat_provider: "OpenAIChatProvider",
        model: str = "gpt-4o-mini",
        content_chars: int = 1000,
    ) -> None:
        """
        Initialize reranker.

        Args:
            chat_provider: Provider exposing ``async complete_json(prompt, model)``
            model: Chat model that scores candidates
            content_chars: Characters of each candidate included in the prompt
        """
        self._chat = chat_provider
        self._model = model
        self._content_chars = content_chars

    async def rerank(self, query: str, chunks: list[ScoredChunk], top_k: int) -> RerankResult:
        """
        Re-order candidates by model-assigned relevance.

        Fewer than two candidates are returned as they are, without a model call.

        Args:
            query: Free-text query
            chunks: Candidates in similarity order
            top_k: Number of chunks to keep

        Returns:
            RerankResult: Top ``top_k`` chunks carrying rerank scores, plus usage

        Raises:
            ConfigurationError: If the chat credential is missing
            RerankError: If the model call fails or its scores are unusable
        """
        if len(chunks) <= 1:
            logger.info(f"{__name__}:rerank - Skipped, candidates={len(chunks)}")
            return RerankResult(chunks=chunks[: max(top_k, 0)])

        logger.info(f"{__name__}:rerank - START candidates={len(chunks)}, top_k={top_k}, model={self._model}")
        prompt = build_rerank_prompt(query, chunks, self._content_chars)
        try:
            completion = await self._chat.complete_json(prompt, model=self._model, temperature=0.0)
        except ChatProviderError as e:
            raise RerankError(
                f"Failed to rerank chunks: {e.message}",
                operation="rerank",
                details={"model": self._model},
            ) from e

        scores = parse_rerank_scores(message_text(completion.message.content), len(chunks))
        rescored = [
            ScoredChunk.model_construct(chunk=scored.chunk, score=score)
            for scored, score in zip(chunks, scores)
        ]
        ranked = sorted(rescored, key=lambda item: item.score, reverse=True)[: max(top_k, 0)]

        usage = completion.usage
        result = RerankResult(
            chunks=ranked,
            tokens=usage.prompt_tokens + usage.completion_tokens,
            cost=chat_cost(usage.prompt_tokens, usage.completion_tokens, self._model),
        )
        logger.info(f"{__name__}:rerank - END returned={len(result.chunks)}, tokens={result.tokens}")
        return result
