"""
Core business logic module.

Contains the retrieval pipeline, SDK-aware selection, cost accounting,
the conversation orchestrator and the exception hierarchy.
"""

from docs_qa.core.exceptions import (
    ChatProviderError,
    ConfigurationError,
    CorpusLoadError,
    DocsQAException,
    EmbeddingProviderError,
    ProviderError,
    RequestValidationError,
    RerankError,
    VectorDimensionError,
)

__all__ = [
    "ChatProviderError",
    "ConfigurationError",
    "CorpusLoadError",
    "DocsQAException",
    "EmbeddingProviderError",
    "ProviderError",
    "RequestValidationError",
    "RerankError",
    "VectorDimensionError",
]
