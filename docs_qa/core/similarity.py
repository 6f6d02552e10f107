"""
Cosine similarity scoring.

Scalar scorer for a single pair of vectors and a vectorised scorer for a
query against a whole embedding matrix. Both return 0 for zero-magnitude
vectors instead of NaN.

Dependencies: numpy
System role: Relevance scoring between query and chunk embeddings
"""

from collections.abc import Sequence

import numpy as np

from docs_qa.core.exceptions import VectorDimensionError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two equal-length vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: Similarity in [-1, 1], or 0.0 when either vector has zero magnitude

    Raises:
        VectorDimensionError: If the vectors differ in length
    """
    if len(a) != len(b):
        raise VectorDimensionError(len(a), len(b))

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    denominator = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if denominator == 0.0:
        return 0.0

    return float(np.clip(np.dot(va, vb) / denominator, -1.0, 1.0))


def score_matrix(query_vector: Sequence[float], matrix: np.ndarray, norms: np.ndarray) -> np.ndarray:
    """
    Cosine similarity of a query against every row of an embedding matrix.

    Args:
        query_vector: Query embedding
        matrix: Chunk embeddings, shape (N, D)
        norms: Precomputed row magnitudes of ``matrix``, shape (N,)

    Returns:
        np.ndarray: Scores, shape (N,); rows or queries with zero magnitude score 0

    Raises:
        VectorDimensionError: If the query dimension differs from the matrix
    """
    if matrix.shape[0] == 0:
        return np.zeros(0, dtype=np.float64)

    query = np.asarray(query_vector, dtype=np.float64)
    if query.shape[0] != matrix.shape[1]:
        raise VectorDimensionError(query.shape[0], matrix.shape[1])

    query_norm = float(np.linalg.norm(query))
    if query_norm == 0.0:
        return np.zeros(matrix.shape[0], dtype=np.float64)

    denominators = norms * query_norm
    dots = matrix @ query
    scores = np.divide(
        dots,
        denominators,
        out=np.zeros_like(dots),
        where=denominators != 0.0,
    )
    return np.clip(scores, -1.0, 1.0)
