"""Models package - entities and socket messages."""

from app.models.common import BaseEntity
from app.models.search import (
    CacheEntry,
    ErrorMessage,
    SearchRequest,
    SearchResultsMessage,
    VideoItem,
    VideoSummary,
)

__all__ = [
    # Common
    "BaseEntity",
    # Search
    "CacheEntry",
    "VideoSummary",
    "ErrorMessage",
    "SearchRequest",
    "SearchResultsMessage",
    "VideoItem",
]
