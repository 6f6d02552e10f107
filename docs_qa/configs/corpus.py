"""
Corpus snapshot configuration.

Dependencies: pydantic_settings
System role: Location of the precomputed embeddings snapshot
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CorpusSettings(BaseSettings):
    """Settings for the on-disk embeddings snapshot."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CORPUS_",
        case_sensitive=False,
        extra="ignore",
    )

    embeddings_path: str = Field(
        default="dist/embeddings.json",
        description="Path to the JSON snapshot of precomputed chunks",
    )
