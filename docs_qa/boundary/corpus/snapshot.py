"""
Embeddings snapshot reader.

Reads the JSON snapshot produced by the offline embedding build
(``{"chunks": [...]}``) and validates it into DocumentChunk models.

Dependencies: pydantic, docs_qa.models
System role: Corpus file parsing
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from docs_qa.core.exceptions import CorpusLoadError
from docs_qa.models.chunk import DocumentChunk, EmbeddingsSnapshot

logger = logging.getLogger(__name__)


def load_snapshot(path: str | Path) -> list[DocumentChunk]:
    """
    Load and validate an embeddings snapshot.

    Args:
        path: Location of the JSON snapshot

    Returns:
        list[DocumentChunk]: All chunks in file order

    Raises:
        CorpusLoadError: If the file is missing, unreadable, not valid JSON,
            does not match the snapshot schema, or mixes embedding dimensions
    """
    snapshot_path = Path(path)
    logger.info(f"{__name__}:load_snapshot - Reading {snapshot_path}")

    try:
        raw = snapshot_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CorpusLoadError(
            f"Failed to load embeddings: {e}",
            path=str(snapshot_path),
        ) from e

    try:
        snapshot = EmbeddingsSnapshot.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise CorpusLoadError(
            f"Failed to load embeddings: invalid JSON ({e})",
            path=str(snapshot_path),
        ) from e
    except ValidationError as e:
        raise CorpusLoadError(
            f"Failed to load embeddings: snapshot does not match schema ({e.error_count()} errors)",
            path=str(snapshot_path),
        ) from e

    chunks = snapshot.chunks
    dimensions = {len(chunk.embedding) for chunk in chunks}
    if len(dimensions) > 1:
        raise CorpusLoadError(
            "Failed to load embeddings: chunks have mixed embedding dimensions",
            path=str(snapshot_path),
            details={"dimensions": sorted(dimensions)},
        )

    logger.info(f"{__name__}:load_snapshot - Loaded {len(chunks)} chunks")
    return chunks
