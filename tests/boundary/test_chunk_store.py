"""
Tests for Corpus and ChunkStore.

System role: Verification of lazy, load-once corpus caching
"""

from unittest.mock import MagicMock

import numpy as np
import pytest

from docs_qa.boundary.corpus import ChunkStore, Corpus
from docs_qa.core.exceptions import CorpusLoadError


class TestCorpus:
    """Test suite for Corpus."""

    def test_builds_matrix_and_norms(self, sample_chunks) -> None:
        corpus = Corpus(sample_chunks)

        assert len(corpus) == 4
        assert corpus[0].id == "auth-react"
        assert corpus.matrix.shape == (4, 3)
        assert corpus.norms.tolist() == pytest.approx(
            [float(np.linalg.norm(c.embedding)) for c in sample_chunks]
        )

    def test_matrix_is_read_only(self, corpus) -> None:
        with pytest.raises(ValueError):
            corpus.matrix[0, 0] = 5.0

    def test_empty_corpus(self) -> None:
        corpus = Corpus([])

        assert len(corpus) == 0
        assert corpus.matrix.shape == (0, 0)

    def test_ragged_embeddings_rejected(self, make_chunk) -> None:
        with pytest.raises(CorpusLoadError):
            Corpus([make_chunk("a", [1.0, 0.0]), make_chunk("b", [1.0])])


class TestChunkStore:
    """Test suite for ChunkStore."""

    def test_loads_once(self, sample_chunks) -> None:
        loader = MagicMock(return_value=sample_chunks)
        store = ChunkStore(loader)

        assert store.is_loaded is False
        first = store.load()
        second = store.load()

        assert first is second
        assert store.is_loaded is True
        loader.assert_called_once_with()

    def test_failed_load_is_retried(self, sample_chunks) -> None:
        loader = MagicMock(side_effect=[CorpusLoadError("Failed to load embeddings: gone"), sample_chunks])
        store = ChunkStore(loader)

        with pytest.raises(CorpusLoadError):
            store.load()
        assert store.is_loaded is False

        assert len(store.load()) == 4
        assert loader.call_count == 2
