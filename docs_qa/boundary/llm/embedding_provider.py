"""
OpenAI embedding provider.

Turns query text into a dense vector with the same model that produced the
corpus snapshot.

Dependencies: langchain_openai, docs_qa.core.exceptions
System role: Query embedding for semantic retrieval
"""

import logging

from langchain_openai import OpenAIEmbeddings
from pydantic import SecretStr

from docs_qa.boundary.llm.credentials import require_api_key
from docs_qa.core.exceptions import ConfigurationError, EmbeddingProviderError

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider:
    """Async query embedding through langchain's OpenAIEmbeddings."""

    def __init__(
        self,
        api_key: SecretStr | None,
        model: str = "text-embedding-3-small",
        base_url: str | None = None,
    ) -> None:
        """
        Initialize embedding provider.

        The underlying client is created on first use so that a missing key
        only fails the requests that need it.

        Args:
            api_key: OpenAI API key
            model: Embedding model identifier
            base_url: Optional API base URL override
        """
        self._api_key = api_key
        self._model = model
        self._base_url = base_url
        self._client: OpenAIEmbeddings | None = None

    def _get_client(self) -> OpenAIEmbeddings:
        if self._client is None:
            api_key = require_api_key(self._api_key)
            self._client = OpenAIEmbeddings(
                model=self._model,
                api_key=api_key,
                base_url=self._base_url,
            )
        return self._client

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single query string.

        Args:
            text: Query text

        Returns:
            list[float]: Query embedding

        Raises:
            EmbeddingProviderError: If the API key is missing (no call is made)
                or the provider call fails
        """
        try:
            client = self._get_client()
        except ConfigurationError as e:
            raise EmbeddingProviderError(e.message, operation="embed", details=dict(e.details)) from e

        try:
            vector = await client.aembed_query(text)
        except Exception as e:
            logger.error(f"{__name__}:embed - FAILED: {type(e).__name__}: {e}")
            raise EmbeddingProviderError(
                f"Failed to generate query embedding: {e}",
                operation="embed",
                details={"model": self._model},
            ) from e

        logger.debug(f"{__name__}:embed - OK dimension={len(vector)}")
        return vector
