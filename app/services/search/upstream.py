"""Upstream search backends."""

from typing import Protocol

from app.models.search import VideoSummary
from youtube_client import SearchClient
from youtube_client.search import SearchResultSchema


class SearchBackend(Protocol):
    """Anything that can turn a query into video summaries, or raise."""

    async def search(self, query: str) -> list[VideoSummary]: ...


def to_summary(item: SearchResultSchema) -> VideoSummary:
    """Map a search.list hit to a VideoSummary."""
    snippet = item.snippet
    return VideoSummary(
        id=item.id.video_id,
        title=snippet.title,
        description=snippet.description,
        channel_title=snippet.channel_title,
        channel_id=snippet.channel_id,
        thumbnail_url=snippet.thumbnails.default.url,
        published_at=snippet.published_at,
    )


class YouTubeSearchBackend:
    """SearchBackend over the YouTube search.list endpoint."""

    def __init__(self, client: SearchClient, max_results: int = 10):
        self._client = client
        self._max_results = max_results

    async def search(self, query: str) -> list[VideoSummary]:
        items = await self._client.search(query, max_results=self._max_results)
        return [to_summary(i) for i in items]
