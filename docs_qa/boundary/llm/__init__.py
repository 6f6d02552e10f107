"""Embedding and chat-completion provider clients."""

from docs_qa.boundary.llm.chat_provider import ChatCompletion, OpenAIChatProvider, TokenUsage
from docs_qa.boundary.llm.embedding_provider import OpenAIEmbeddingProvider

__all__ = [
    "ChatCompletion",
    "OpenAIChatProvider",
    "OpenAIEmbeddingProvider",
    "TokenUsage",
]
