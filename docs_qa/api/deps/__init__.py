"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_ask_service,
    get_search_service,
    get_service_cache,
)

__all__ = [
    "get_ask_service",
    "get_search_service",
    "get_service_cache",
]
