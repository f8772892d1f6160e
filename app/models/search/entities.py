"""Search domain entities - videos and cached result sets."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity


@dataclass(frozen=True)
class VideoSummary(BaseEntity):
    """A single video search hit."""

    id: str
    title: str
    description: str
    channel_title: str
    channel_id: str
    thumbnail_url: str
    published_at: datetime


@dataclass
class CacheEntry(BaseEntity):
    """Ranked results for one query.

    ``results`` holds at most ``max_results`` videos with unique ids, newest
    ``published_at`` first. ``last_fetched_at`` is None until the first fetch
    is started. ``last_requested_at`` is the last time a client asked for it
    or received it, None if that never happened.
    """

    query: str
    results: list[VideoSummary] = field(default_factory=list)
    last_fetched_at: datetime | None = None
    last_requested_at: datetime | None = None
