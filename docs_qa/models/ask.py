"""
Ask domain models and schemas.

Request/response schemas for the question-answering endpoint.

Dependencies: pydantic
System role: Ask API contracts
"""

from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator

from docs_qa.models._coercion import coerce_limit, coerce_sdk


class AskRequest(BaseModel):
    """Request schema for questions."""

    query: StrictStr = Field(min_length=1, description="Natural-language question")
    sdk: str | None = Field(default=None, description="Preferred SDK variant")
    limit: int | None = Field(default=None, description="Initial context chunks (1-20, default 8)")
    model: str | None = Field(default=None, description="Chat model override")

    @field_validator("limit", mode="before")
    @classmethod
    def _lenient_limit(cls, value: Any) -> int | None:
        return coerce_limit(value)

    @field_validator("sdk", mode="before")
    @classmethod
    def _known_sdk(cls, value: Any) -> str | None:
        return coerce_sdk(value)

    @field_validator("model", mode="before")
    @classmethod
    def _non_empty_model(cls, value: Any) -> str | None:
        if isinstance(value, str) and value:
            return value
        return None


class AskSource(BaseModel):
    """Documentation page cited by an answer."""

    url: str
    title: str
    chunk_index: int


class AskCost(BaseModel):
    """Cost breakdown of one question, all dollar figures rounded to 8 decimals."""

    search_tokens: int = Field(ge=0)
    search_cost: float = Field(ge=0.0)
    completion_tokens: int = Field(ge=0)
    completion_cost: float = Field(ge=0.0)
    total_cost: float = Field(ge=0.0)


class AskResponse(BaseModel):
    """Response schema for questions."""

    answer: str
    sources: list[AskSource]
    iterations: int
    cost: AskCost
