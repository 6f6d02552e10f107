"""
Chunk domain models.

Precomputed documentation chunks as stored in the embeddings snapshot, and
their per-query scored form.

Dependencies: pydantic
System role: Document chunk data structures
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DocumentChunk(BaseModel):
    """
    Immutable unit of retrievable documentation text.

    The snapshot file uses camelCase keys (chunkIndex, baseUrl, ...); snake_case
    names are accepted too.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Unique chunk identifier across the corpus")
    content: str = Field(description="Chunk text body")
    embedding: list[float] = Field(description="Dense embedding vector")
    url: str = Field(description="URL of the source documentation page")
    title: str = Field(description="Title of the source documentation page")
    chunk_index: int = Field(description="Ordinal position of the chunk within its page")
    file_path: str = Field(default="", description="Originating source file (diagnostic only)")
    sdk: str | None = Field(default=None, description="SDK variant the page belongs to")
    base_url: str | None = Field(
        default=None,
        description="Canonical URL shared by all SDK variants of the same page",
    )
    heading_slug: str | None = Field(default=None, description="Anchor of the chunk's heading")

    @property
    def group_key(self) -> str:
        """Key identifying the logical page this chunk is a variant of."""
        return self.base_url or self.url


class ScoredChunk(BaseModel):
    """A chunk paired with its similarity to the current query."""

    chunk: DocumentChunk
    score: float = Field(description="Relevance to the query: cosine similarity, or the rerank score")

    @property
    def id(self) -> str:
        return self.chunk.id

    @property
    def url(self) -> str:
        return self.chunk.url

    @property
    def title(self) -> str:
        return self.chunk.title

    @property
    def content(self) -> str:
        return self.chunk.content

    @property
    def chunk_index(self) -> int:
        return self.chunk.chunk_index

    @property
    def sdk(self) -> str | None:
        return self.chunk.sdk

    @property
    def group_key(self) -> str:
        return self.chunk.group_key


class EmbeddingsSnapshot(BaseModel):
    """Top-level structure of the embeddings snapshot file."""

    chunks: list[DocumentChunk]
