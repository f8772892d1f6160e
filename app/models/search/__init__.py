"""Search domain models."""

from app.models.search.entities import CacheEntry, VideoSummary
from app.models.search.messages import (
    ErrorMessage,
    SearchRequest,
    SearchResultsMessage,
    VideoItem,
)

__all__ = [
    # Entities
    "CacheEntry",
    "VideoSummary",
    # Messages
    "ErrorMessage",
    "SearchRequest",
    "SearchResultsMessage",
    "VideoItem",
]
