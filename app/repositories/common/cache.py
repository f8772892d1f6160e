"""Result cache - ranked per-query video results held in memory."""

import asyncio
from collections.abc import Callable, Collection, Iterable
from datetime import datetime, timedelta, timezone

from loguru import logger

from app.models.search import CacheEntry, VideoSummary
from settings import FRESHNESS_WINDOW, IDLE_TTL, MAX_RESULTS


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResultCache:
    """Query -> ranked results, with per-query write serialization.

    Results are ordered by ``published_at`` descending. Ties keep insertion
    order: videos already cached stay ahead of newly merged ones.
    """

    def __init__(
        self,
        max_results: int = MAX_RESULTS,
        freshness_window: timedelta = timedelta(seconds=FRESHNESS_WINDOW),
        idle_ttl: timedelta = timedelta(seconds=IDLE_TTL),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.max_results = max_results
        self.freshness_window = freshness_window
        self.idle_ttl = idle_ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        logger.debug("ResultCache initialized (max_results={}, fresh={})", max_results, freshness_window)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, query: str) -> bool:
        return query in self._entries

    def _lock(self, query: str) -> asyncio.Lock:
        lock = self._locks.get(query)
        if lock is None:
            lock = self._locks[query] = asyncio.Lock()
        return lock

    def ensure_tracked(self, query: str) -> CacheEntry:
        """Get the entry for a query, creating an empty one if missing."""
        entry = self._entries.get(query)
        if entry is None:
            entry = self._entries[query] = CacheEntry(query=query)
            logger.debug("Tracking query '{}'", query)
        return entry

    def get_recency(self, query: str) -> datetime | None:
        """Last fetch time, or None if never fetched."""
        entry = self._entries.get(query)
        return entry.last_fetched_at if entry else None

    def is_fresh(self, query: str) -> bool:
        """Check if query was fetched within the freshness window."""
        fetched_at = self.get_recency(query)
        if fetched_at is None:
            return False
        return self._clock() - fetched_at < self.freshness_window

    def mark_refreshing(self, query: str) -> None:
        """Stamp the query as fetched now, before the fetch resolves."""
        self.ensure_tracked(query).last_fetched_at = self._clock()

    def touch(self, query: str) -> None:
        """Record client interest in a query (a request or a delivered broadcast)."""
        self.ensure_tracked(query).last_requested_at = self._clock()

    def results(self, query: str) -> list[VideoSummary]:
        """Snapshot of the cached results (empty if untracked)."""
        entry = self._entries.get(query)
        return list(entry.results) if entry else []

    def queries(self) -> list[str]:
        """Snapshot of tracked queries."""
        return list(self._entries)

    async def merge(self, query: str, items: Iterable[VideoSummary]) -> list[VideoSummary]:
        """Merge new videos into a query's results and return the new ranking."""
        async with self._lock(query):
            entry = self.ensure_tracked(query)
            seen = {v.id for v in entry.results}
            merged = list(entry.results)
            added = 0
            for video in items:
                if video.id in seen:
                    continue
                seen.add(video.id)
                merged.append(video)
                added += 1

            # list.sort is stable, reverse=True included
            merged.sort(key=lambda v: v.published_at, reverse=True)
            entry.results = merged[: self.max_results]
            entry.last_fetched_at = self._clock()

            logger.debug("Merged '{}': +{} new, {} kept", query, added, len(entry.results))
            return list(entry.results)

    def evict_idle(self, skip: Collection[str] = ()) -> list[str]:
        """Drop entries nobody has asked for or received within ``idle_ttl``.

        Queries in ``skip`` (e.g. with a fetch in flight) are kept.
        """
        cutoff = self._clock() - self.idle_ttl
        evicted = []
        for query, entry in list(self._entries.items()):
            if query in skip:
                continue
            if entry.last_requested_at is not None and entry.last_requested_at >= cutoff:
                continue
            del self._entries[query]
            self._locks.pop(query, None)
            evicted.append(query)

        if evicted:
            logger.info("Evicted {} idle queries", len(evicted))
        return evicted

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()
        self._locks.clear()
        logger.info("All cache cleared")
