"""
Shared wiring for the command-line tools.

Dependencies: docs_qa.boundary, docs_qa.configs, docs_qa.models.sdk
System role: CLI service construction and argument checks
"""

import sys
from functools import partial

from docs_qa.boundary.corpus import ChunkStore, load_snapshot
from docs_qa.boundary.llm import OpenAIChatProvider, OpenAIEmbeddingProvider
from docs_qa.configs import Settings
from docs_qa.core.reranker import Reranker
from docs_qa.core.retriever import RetrievalService
from docs_qa.models.sdk import VALID_SDKS, parse_sdk

RULE = "=" * 80


def build_chunk_store(embeddings_path: str) -> ChunkStore:
    return ChunkStore(partial(load_snapshot, embeddings_path))


def build_retrieval_service(settings: Settings) -> RetrievalService:
    reranker = Reranker(
        OpenAIChatProvider(api_key=settings.openai.api_key, base_url=settings.openai.base_url),
        model=settings.rerank.model,
        content_chars=settings.rerank.content_chars,
    )
    return RetrievalService(
        OpenAIEmbeddingProvider(
            api_key=settings.openai.api_key,
            model=settings.openai.embedding_model,
            base_url=settings.openai.base_url,
        ),
        reranker=reranker,
        candidate_padding=settings.rerank.candidate_padding,
        max_candidates=settings.rerank.max_candidates,
    )


def check_cli_options(limit: int, sdk: str | None) -> bool:
    """Print an error and return False for a non-positive limit or unknown SDK."""
    if limit <= 0:
        print("Error: Invalid limit value", file=sys.stderr)
        return False
    if sdk is not None and parse_sdk(sdk) is None:
        print(f'Error: Invalid SDK "{sdk}"', file=sys.stderr)
        print(f"Valid SDKs: {', '.join(sorted(VALID_SDKS))}", file=sys.stderr)
        return False
    return True
