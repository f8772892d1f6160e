"""Search API client."""

from youtube_client.search.client import SearchClient
from youtube_client.search.schemas import (
    SearchIdSchema,
    SearchListSchema,
    SearchResultSchema,
    SnippetSchema,
    ThumbnailSchema,
    ThumbnailsSchema,
)

__all__ = [
    "SearchClient",
    "SearchIdSchema",
    "SearchListSchema",
    "SearchResultSchema",
    "SnippetSchema",
    "ThumbnailSchema",
    "ThumbnailsSchema",
]
