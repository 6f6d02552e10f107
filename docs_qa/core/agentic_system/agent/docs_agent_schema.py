"""
Documentation agent schemas.

Conversation state carried through the tool-calling loop and the
structured result of answering one question.

Dependencies: pydantic, langchain_core.messages
System role: Agent state and response schema definitions
"""

from dataclasses import dataclass, field

from langchain_core.messages import BaseMessage
from pydantic import BaseModel, Field

from docs_qa.models.ask import AskCost, AskSource
from docs_qa.models.chunk import ScoredChunk


@dataclass
class ConversationState:
    """Message history, iteration count and every chunk retrieved so far."""

    messages: list[BaseMessage] = field(default_factory=list)
    iterations: int = 1
    chunks: dict[str, ScoredChunk] = field(default_factory=dict)

    def record_chunks(self, chunks: list[ScoredChunk]) -> None:
        """Add chunks not seen before, keyed by chunk id."""
        for scored in chunks:
            self.chunks.setdefault(scored.id, scored)

    def sources(self) -> list[AskSource]:
        """
        One source per page URL, keeping the lowest chunk index.

        Pages appear in the order they were first retrieved.
        """
        by_url: dict[str, AskSource] = {}
        for scored in self.chunks.values():
            current = by_url.get(scored.url)
            if current is None or current.chunk_index > scored.chunk_index:
                by_url[scored.url] = AskSource(
                    url=scored.url,
                    title=scored.title,
                    chunk_index=scored.chunk_index,
                )
        return list(by_url.values())


class AgentAnswer(BaseModel):
    """Final answer produced by the documentation agent."""

    answer: str = Field(description="Answer text; never empty")
    sources: list[AskSource] = Field(default_factory=list, description="Pages retrieved, one per URL")
    iterations: int = Field(ge=1, description="1 plus the number of search_docs calls executed")
    cost: AskCost
