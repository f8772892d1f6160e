"""Test fakes and builders."""

import asyncio
from datetime import datetime, timedelta, timezone

from app.models.search import VideoSummary


def video(video_id: str, published: str, title: str | None = None) -> VideoSummary:
    """Build a VideoSummary published on an ISO date."""
    return VideoSummary(
        id=video_id,
        title=title or f"Video {video_id}",
        description=f"About {video_id}",
        channel_title="Channel",
        channel_id="UC123",
        thumbnail_url=f"https://i.ytimg.com/vi/{video_id}/default.jpg",
        published_at=datetime.fromisoformat(published).replace(tzinfo=timezone.utc),
    )


class Clock:
    """Manually advanced clock."""

    def __init__(self):
        self.now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeBackend:
    """SearchBackend returning canned results and recording calls."""

    def __init__(self, results: dict[str, list[VideoSummary]] | None = None, delay: float = 0.0):
        self.results = results or {}
        self.delay = delay
        self.calls: list[str] = []
        self.errors: dict[str, Exception] = {}

    async def search(self, query: str) -> list[VideoSummary]:
        self.calls.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if query in self.errors:
            raise self.errors[query]
        return list(self.results.get(query, []))


class FakeSubscriber:
    """Subscriber that records messages, optionally failing on send."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.messages: list[dict] = []

    async def send(self, message: dict) -> None:
        if self.fail:
            raise ConnectionError("connection reset")
        self.messages.append(message)
