"""Tests for the result cache."""

import asyncio

import pytest

from app.repositories.common.cache import ResultCache
from tests.helpers import video


def ids(videos):
    return [v.id for v in videos]


class TestTracking:
    def test_untracked_has_no_recency(self, cache):
        assert cache.get_recency("akka") is None
        assert not cache.is_fresh("akka")
        assert "akka" not in cache

    def test_ensure_tracked_is_idempotent(self, cache):
        first = cache.ensure_tracked("akka")
        second = cache.ensure_tracked("akka")
        assert first is second
        assert len(cache) == 1
        assert cache.results("akka") == []
        assert cache.get_recency("akka") is None

    def test_queries_are_case_sensitive(self, cache):
        cache.ensure_tracked("Akka")
        cache.ensure_tracked("akka")
        assert sorted(cache.queries()) == ["Akka", "akka"]


class TestFreshness:
    def test_mark_refreshing_makes_fresh(self, cache, clock):
        cache.mark_refreshing("akka")
        assert cache.get_recency("akka") == clock.now
        assert cache.is_fresh("akka")

    def test_stale_after_window(self, cache, clock):
        cache.mark_refreshing("akka")
        clock.advance(minutes=9, seconds=59)
        assert cache.is_fresh("akka")
        clock.advance(seconds=1)
        assert not cache.is_fresh("akka")

    @pytest.mark.asyncio
    async def test_merge_updates_recency(self, cache, clock):
        await cache.merge("akka", [video("A", "2024-01-01")])
        assert cache.get_recency("akka") == clock.now


class TestMerge:
    @pytest.mark.asyncio
    async def test_scenario_merge_and_rank(self, cache):
        first = await cache.merge("akka", [video("A", "2024-01-01"), video("B", "2024-01-03")])
        assert ids(first) == ["B", "A"]

        second = await cache.merge("akka", [video("A", "2024-01-01"), video("C", "2024-01-02")])
        assert ids(second) == ["B", "C", "A"]

    @pytest.mark.asyncio
    async def test_keeps_ten_most_recent(self, cache):
        for day in range(1, 12):
            await cache.merge("akka", [video(f"v{day}", f"2024-01-{day:02d}")])

        results = cache.results("akka")
        assert len(results) == 10
        assert "v1" not in ids(results)
        assert ids(results)[0] == "v11"

    @pytest.mark.asyncio
    async def test_merge_same_item_twice(self, cache):
        item = video("A", "2024-01-01")
        await cache.merge("akka", [item, item])
        await cache.merge("akka", [item])
        assert ids(cache.results("akka")) == ["A"]

    @pytest.mark.asyncio
    async def test_duplicate_id_keeps_cached_copy(self, cache):
        await cache.merge("akka", [video("A", "2024-01-01", title="old")])
        await cache.merge("akka", [video("A", "2024-01-05", title="new")])
        assert [v.title for v in cache.results("akka")] == ["old"]

    @pytest.mark.asyncio
    async def test_ties_keep_insertion_order(self, cache):
        await cache.merge("akka", [video("X", "2024-01-01")])
        await cache.merge("akka", [video("Y", "2024-01-01"), video("Z", "2024-01-01")])
        assert ids(cache.results("akka")) == ["X", "Y", "Z"]

    @pytest.mark.asyncio
    async def test_merge_auto_tracks(self, cache):
        await cache.merge("new", [])
        assert "new" in cache
        assert cache.get_recency("new") is not None

    @pytest.mark.asyncio
    async def test_results_are_snapshots(self, cache):
        await cache.merge("akka", [video("A", "2024-01-01")])
        snapshot = cache.results("akka")
        snapshot.clear()
        assert ids(cache.results("akka")) == ["A"]

    @pytest.mark.asyncio
    async def test_concurrent_merges_stay_ranked(self, cache):
        batches = [[video(f"q{i}-{j}", f"2024-02-{(i * 3 + j) % 28 + 1:02d}") for j in range(3)] for i in range(8)]
        await asyncio.gather(*(cache.merge("akka", b) for b in batches))

        results = cache.results("akka")
        assert len(results) == 10
        assert len(set(ids(results))) == 10
        dates = [v.published_at for v in results]
        assert dates == sorted(dates, reverse=True)

    @pytest.mark.asyncio
    async def test_custom_max_results(self, clock):
        small = ResultCache(max_results=2, clock=clock)
        await small.merge("akka", [video("A", "2024-01-01"), video("B", "2024-01-02"), video("C", "2024-01-03")])
        assert ids(small.results("akka")) == ["C", "B"]


class TestEviction:
    def test_evicts_idle_queries(self, cache, clock):
        cache.touch("old")
        clock.advance(minutes=20)
        cache.touch("recent")
        clock.advance(minutes=11)

        assert cache.evict_idle() == ["old"]
        assert cache.queries() == ["recent"]

    def test_touch_keeps_entry_alive(self, cache, clock):
        cache.touch("akka")
        clock.advance(minutes=25)
        cache.touch("akka")
        clock.advance(minutes=25)
        assert cache.evict_idle() == []

    def test_skipped_queries_are_kept(self, cache, clock):
        cache.touch("akka")
        cache.touch("play")
        clock.advance(minutes=31)

        assert cache.evict_idle(skip={"akka"}) == ["play"]
        assert cache.queries() == ["akka"]

    @pytest.mark.asyncio
    async def test_entry_never_requested_is_idle(self, cache):
        cache.ensure_tracked("tracked")
        await cache.merge("merged", [video("A", "2024-01-01")])

        assert cache.ensure_tracked("tracked").last_requested_at is None
        assert sorted(cache.evict_idle()) == ["merged", "tracked"]

    def test_clear(self, cache):
        cache.touch("a")
        cache.touch("b")
        cache.clear()
        assert len(cache) == 0
