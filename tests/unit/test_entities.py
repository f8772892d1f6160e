"""Tests for domain entities and their wire mapping."""

import dataclasses

import pytest

from app.models.search import CacheEntry
from app.models.search.messages import VideoItem
from tests.helpers import video


class TestEntities:
    def test_video_to_dict(self):
        item = video("A", "2024-01-01")
        data = item.to_dict()

        assert data["id"] == "A"
        assert data["thumbnail_url"] == "https://i.ytimg.com/vi/A/default.jpg"
        assert data["published_at"] == item.published_at

    def test_video_is_immutable(self):
        item = video("A", "2024-01-01")
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.title = "changed"

    def test_cache_entry_to_dict(self):
        entry = CacheEntry(query="akka", results=[video("A", "2024-01-01")])
        data = entry.to_dict()

        assert data["query"] == "akka"
        assert data["results"][0]["id"] == "A"
        assert data["last_fetched_at"] is None
        assert data["last_requested_at"] is None

    def test_video_item_from_entity(self):
        item = VideoItem.from_entity(video("A", "2024-01-01"))
        wire = item.model_dump(mode="json", by_alias=True)

        assert wire["thumbnail"] == "https://i.ytimg.com/vi/A/default.jpg"
        assert wire["channelTitle"] == "Channel"
        assert wire["publishedAt"].startswith("2024-01-01T00:00:00")
