"""
Retrieval and conversation limits.

Result-count bounds for the search and ask endpoints, the iteration
budget of the tool-calling conversation loop and reranking parameters.

Dependencies: pydantic, pydantic_settings
System role: Request limit and loop budget configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    """Limits for the search endpoint."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_",
        case_sensitive=False,
        extra="ignore",
    )

    default_limit: int = Field(default=10, description="Results returned when no limit is given")
    max_limit: int = Field(default=50, description="Upper bound applied to requested limits")
    snippet_length: int = Field(default=500, description="Characters of content per result")


class AskSettings(BaseSettings):
    """Limits for the ask endpoint and conversation loop."""

    model_config = SettingsConfigDict(
        env_prefix="ASK_",
        case_sensitive=False,
        extra="ignore",
    )

    max_iterations: int = Field(default=5, ge=1, description="Maximum model turns per question")
    default_limit: int = Field(default=8, description="Initial context chunks when no limit is given")
    max_limit: int = Field(default=20, description="Upper bound for the initial context size")
    tool_default_limit: int = Field(default=5, description="search_docs results when the model omits limit")
    tool_max_limit: int = Field(default=10, description="Upper bound for search_docs results")


class RerankSettings(BaseSettings):
    """LLM reranking of search candidates."""

    model_config = SettingsConfigDict(
        env_prefix="RERANK_",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(default="gpt-4o-mini", description="Chat model that scores candidates")
    candidate_padding: int = Field(default=50, ge=0, description="Extra candidates beyond the requested limit")
    max_candidates: int = Field(default=200, ge=1, description="Upper bound on candidates sent for scoring")
    content_chars: int = Field(default=1000, ge=1, description="Characters of each candidate shown to the model")
