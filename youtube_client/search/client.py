"""Search API client."""

import httpx
from loguru import logger
from pydantic import ValidationError

from youtube_client.base import BaseClient, UpstreamError
from youtube_client.search.schemas import SearchListSchema, SearchResultSchema


class SearchClient(BaseClient):
    """Client for the YouTube search.list endpoint."""

    async def search(self, query: str, max_results: int = 10) -> list[SearchResultSchema]:
        """GET /search - latest videos matching a query, newest first."""
        params = {
            "part": "snippet",
            "q": query,
            "type": "video",
            "maxResults": max_results,
            "order": "date",
        }
        try:
            data = await self._get("search", params)
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamError(f"Search failed for '{query}': {e}") from e

        try:
            page = SearchListSchema.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(f"Malformed search response for '{query}': {e.error_count()} errors") from e

        logger.debug("Search '{}': {} items", query, len(page.items))
        return page.items
