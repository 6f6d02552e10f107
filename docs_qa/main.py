"""
FastAPI application entry point.

Initializes FastAPI app, registers routers and exception handlers, adds
middleware, and configures lifespan.

Dependencies: fastapi, docs_qa.api, docs_qa.observability, docs_qa.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from docs_qa import __version__
from docs_qa.api import api_router
from docs_qa.api.deps import get_service_cache
from docs_qa.api.errors import register_exception_handlers
from docs_qa.configs import get_settings
from docs_qa.core.exceptions import CorpusLoadError
from docs_qa.observability.logger import configure_logging
from docs_qa.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and pre-loads the corpus. A failed pre-load is logged
    and retried lazily by the first request that needs the corpus.
    """
    # Startup
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        corpus = await run_in_threadpool(cache.chunk_store.load)
        logger.info(f"Corpus pre-loaded: {len(corpus)} chunks")
    except CorpusLoadError as e:
        logger.warning(f"Corpus pre-load failed, will retry on first request: {e}")

    yield

    # Shutdown
    cache.clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()
    app = FastAPI(
        title="Documentation Q&A API",
        description="Semantic search and tool-calling question answering over documentation",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register API routes
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "docs_qa.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
