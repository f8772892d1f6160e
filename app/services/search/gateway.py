"""Query gateway - entry point for client queries and periodic refreshes."""

import asyncio

from loguru import logger

from app.errors import UpstreamError, validate_query
from app.models.search import VideoSummary
from app.repositories.common.cache import ResultCache
from app.services.search.broadcast import BroadcastEngine
from app.services.search.upstream import SearchBackend


class QueryGateway:
    """Decides between cached broadcast and upstream fetch for each query.

    At most one refresh per query is in flight at any time. A refresh stamps
    the query's fetch time before calling upstream, so identical queries that
    arrive while it runs are answered from cache instead of fetching again.
    """

    def __init__(self, cache: ResultCache, backend: SearchBackend, broadcaster: BroadcastEngine):
        self._cache = cache
        self._backend = backend
        self._broadcaster = broadcaster
        self._in_flight: set[str] = set()
        self._tasks: set[asyncio.Task] = set()
        logger.debug("QueryGateway initialized")

    @property
    def in_flight(self) -> frozenset[str]:
        return frozenset(self._in_flight)

    async def handle(self, query: str) -> asyncio.Task | None:
        """Serve a client query. Returns the refresh task if one was started."""
        validate_query(query)
        logger.info("New search query received: {}", query)

        self._cache.touch(query)
        if self._cache.is_fresh(query):
            logger.info("Returning cached results for query: {}", query)
            await self._broadcaster.broadcast(query, self._cache.results(query))
            return None

        return self._start_refresh(query)

    def refresh_all(self) -> int:
        """Refetch every tracked query regardless of freshness. Returns refreshes started."""
        self._cache.evict_idle(skip=self._in_flight)
        started = 0
        for query in self._cache.queries():
            if self._start_refresh(query) is not None:
                started += 1
        return started

    def _start_refresh(self, query: str) -> asyncio.Task | None:
        if query in self._in_flight:
            logger.debug("Refresh already in flight: {}", query)
            return None

        self._cache.mark_refreshing(query)
        self._in_flight.add(query)
        task = asyncio.get_running_loop().create_task(self.refresh(query), name=f"refresh:{query}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def refresh(self, query: str) -> bool:
        """Fetch, merge and broadcast one query. Returns False if any step failed."""
        self._in_flight.add(query)
        try:
            logger.info("Fetching results for query: {}", query)
            try:
                videos = await self._backend.search(query)
                if not isinstance(videos, list) or not all(isinstance(v, VideoSummary) for v in videos):
                    raise UpstreamError(f"Malformed results: {type(videos).__name__}")
            except Exception as e:
                logger.error("Error fetching results for query '{}': {}", query, e)
                return False

            try:
                results = await self._cache.merge(query, videos)
                delivered = await self._broadcaster.broadcast(query, results)
            except Exception as e:
                logger.exception("Error updating results for query '{}': {}", query, e)
                return False
        finally:
            self._in_flight.discard(query)

        # a client still receiving this query keeps it from idle eviction
        if delivered:
            self._cache.touch(query)
        return True

    async def drain(self) -> None:
        """Wait for every refresh started so far."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
