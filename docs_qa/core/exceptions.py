"""
Exception hierarchy for the documentation Q&A service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocsQAException(Exception):
    """Base exception for all documentation Q&A errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RequestValidationError(DocsQAException):
    """Raised when a request body fails validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConfigurationError(DocsQAException):
    """Raised when required configuration (e.g. a provider credential) is missing."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class CorpusLoadError(DocsQAException):
    """Raised when the embeddings snapshot is missing, unreadable or malformed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize corpus load error.

        Args:
            message: Error message
            path: Snapshot path that failed to load
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class ProviderError(DocsQAException):
    """Base exception for upstream model provider failures."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            operation: Provider operation that failed (embed, chat)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class EmbeddingProviderError(ProviderError):
    """Raised when generating a query embedding fails."""

    pass


class ChatProviderError(ProviderError):
    """Raised when a chat-completion call fails."""

    pass


class RerankError(ProviderError):
    """Raised when LLM reranking fails or returns unusable scores."""

    pass


class VectorDimensionError(DocsQAException):
    """Raised when a query vector and a chunk vector differ in length."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(
            "Vectors must have the same length",
            {"left_dimension": left, "right_dimension": right},
        )
