"""Service orchestrators."""

from .ask_service import AskService
from .search_service import SearchService

__all__ = [
    "AskService",
    "SearchService",
]
