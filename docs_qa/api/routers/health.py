"""
Health check API endpoints.

Routes: GET /health, GET /health/corpus

Dependencies: docs_qa.boundary.corpus
System role: Health check HTTP API
"""

from fastapi import APIRouter
from pydantic import BaseModel

from docs_qa.boundary.corpus import get_chunk_store


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/corpus", response_model=HealthResponse)
async def health_check_corpus() -> HealthResponse:
    """Report whether the corpus has been loaded, without loading it."""
    store = get_chunk_store()
    if not store.is_loaded:
        return HealthResponse(status="degraded", message="Corpus not loaded yet")
    return HealthResponse(status="healthy", message=f"Corpus loaded ({len(store.load())} chunks)")
