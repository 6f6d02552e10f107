"""
OpenAI provider configuration settings.

Credential, model identifiers and generation parameters for the embedding
and chat-completion providers.

Dependencies: pydantic, pydantic_settings
System role: External model provider configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    """OpenAI embedding and chat configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPENAI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="OpenAI API key (required for any provider call)",
    )
    base_url: str | None = Field(
        default=None,
        description="Optional API base URL override (proxies, compatible servers)",
    )

    embedding_model: str = Field(
        default="text-embedding-3-small",
        description="Embedding model used for query vectors (must match the corpus)",
    )
    chat_model: str = Field(default="gpt-4o-mini", description="Default chat model")
    max_tokens: int = Field(default=1000, description="Maximum output tokens per model turn")
    temperature: float = Field(default=0.7, description="Sampling temperature for answers")
