"""
Search domain models and schemas.

Request/response schemas for the semantic search endpoint.

Dependencies: pydantic
System role: Search API contracts
"""

from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator

from docs_qa.models._coercion import coerce_limit, coerce_sdk


class SearchRequest(BaseModel):
    """Request schema for semantic search."""

    query: StrictStr = Field(min_length=1, description="Free-text search query")
    limit: int | None = Field(default=None, description="Number of results (1-50, default 10)")
    sdk: str | None = Field(default=None, description="Preferred SDK variant")

    @field_validator("limit", mode="before")
    @classmethod
    def _lenient_limit(cls, value: Any) -> int | None:
        return coerce_limit(value)

    @field_validator("sdk", mode="before")
    @classmethod
    def _known_sdk(cls, value: Any) -> str | None:
        return coerce_sdk(value)


class SearchResultItem(BaseModel):
    """Single ranked search hit."""

    url: str
    title: str
    content: str = Field(description="Content snippet, ellipsised when truncated")
    score: float = Field(description="Similarity rounded to 3 decimals")
    chunk_index: int


class SearchCost(BaseModel):
    """Embedding cost of a search, plus reranking cost when reranking ran."""

    tokens: int
    cost: float = Field(description="Dollar cost rounded to 8 decimals")
    rerank_tokens: int | None = None
    rerank_cost: float | None = Field(default=None, description="Dollar cost rounded to 8 decimals")


class SearchResponse(BaseModel):
    """Response schema for semantic search."""

    results: list[SearchResultItem]
    cost: SearchCost
