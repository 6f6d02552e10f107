"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docs_qa.configs.base import BaseSettings
from docs_qa.configs.corpus import CorpusSettings
from docs_qa.configs.openai import OpenAISettings
from docs_qa.configs.retrieval import AskSettings, RerankSettings, SearchSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    corpus: CorpusSettings = Field(default_factory=CorpusSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    ask: AskSettings = Field(default_factory=AskSettings)
    rerank: RerankSettings = Field(default_factory=RerankSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from docs_qa.configs import get_settings
        settings = get_settings()
    """
    return Settings()
