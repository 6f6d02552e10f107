"""
In-memory chunk store.

Process-scoped, lazily populated holder of the documentation corpus. The
snapshot is read at most once; afterwards every caller shares the same
read-only Corpus.

Dependencies: numpy, docs_qa.boundary.corpus.snapshot, docs_qa.configs
System role: Corpus cache shared by all requests
"""

import logging
import threading
from collections.abc import Callable, Iterable, Sequence
from functools import partial

import numpy as np

from docs_qa.boundary.corpus.snapshot import load_snapshot
from docs_qa.configs import get_settings
from docs_qa.core.exceptions import CorpusLoadError
from docs_qa.models.chunk import DocumentChunk

logger = logging.getLogger(__name__)

ChunkLoader = Callable[[], list[DocumentChunk]]


class Corpus(Sequence[DocumentChunk]):
    """
    Immutable sequence of chunks with a precomputed embedding matrix.

    The matrix and row norms are built once so that each query is scored
    with a single matrix-vector product.
    """

    def __init__(self, chunks: Iterable[DocumentChunk]) -> None:
        """
        Build the corpus and its embedding matrix.

        Args:
            chunks: Chunks sharing one embedding dimension

        Raises:
            CorpusLoadError: If embeddings differ in length
        """
        self._chunks: tuple[DocumentChunk, ...] = tuple(chunks)
        if self._chunks:
            try:
                self._matrix = np.asarray(
                    [chunk.embedding for chunk in self._chunks],
                    dtype=np.float64,
                )
            except ValueError as e:
                raise CorpusLoadError(
                    "Failed to load embeddings: chunks have mixed embedding dimensions"
                ) from e
            self._norms = np.linalg.norm(self._matrix, axis=1)
        else:
            self._matrix = np.zeros((0, 0), dtype=np.float64)
            self._norms = np.zeros(0, dtype=np.float64)
        self._matrix.setflags(write=False)

    def __getitem__(self, index):
        return self._chunks[index]

    def __len__(self) -> int:
        return len(self._chunks)

    @property
    def matrix(self) -> np.ndarray:
        """Embeddings, shape (N, D)."""
        return self._matrix

    @property
    def norms(self) -> np.ndarray:
        """Row magnitudes of ``matrix``, shape (N,)."""
        return self._norms


class ChunkStore:
    """Lazily loaded, process-wide corpus cache with an injectable loader."""

    def __init__(self, loader: ChunkLoader) -> None:
        """
        Initialize chunk store.

        Args:
            loader: Callable returning all chunks; invoked at most once
                after it first succeeds
        """
        self._loader = loader
        self._corpus: Corpus | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._corpus is not None

    def load(self) -> Corpus:
        """
        Return the corpus, reading it on first use.

        Returns:
            Corpus: Cached chunks

        Raises:
            CorpusLoadError: If the loader fails; the next call retries
        """
        if self._corpus is not None:
            return self._corpus

        with self._lock:
            if self._corpus is None:
                chunks = self._loader()
                self._corpus = Corpus(chunks)
                logger.info(f"{__name__}:load - Corpus ready with {len(self._corpus)} chunks")
        return self._corpus


_chunk_store: ChunkStore | None = None
_chunk_store_lock = threading.Lock()


def get_chunk_store() -> ChunkStore:
    """
    Get the process-wide chunk store bound to the configured snapshot path.

    Returns:
        ChunkStore: Shared store instance
    """
    global _chunk_store
    if _chunk_store is None:
        with _chunk_store_lock:
            if _chunk_store is None:
                path = get_settings().corpus.embeddings_path
                _chunk_store = ChunkStore(partial(load_snapshot, path))
    return _chunk_store
