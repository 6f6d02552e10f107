"""Embeddings snapshot loading and the in-memory chunk store."""

from docs_qa.boundary.corpus.chunk_store import ChunkStore, Corpus, get_chunk_store
from docs_qa.boundary.corpus.snapshot import load_snapshot

__all__ = ["ChunkStore", "Corpus", "get_chunk_store", "load_snapshot"]
