"""Socket message schemas - inbound queries and outbound result sets."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.search.entities import VideoSummary


class SearchRequest(BaseModel):
    """Inbound client message."""

    query: str


class VideoItem(BaseModel):
    """One video in an outbound result set."""

    id: str
    title: str
    description: str
    channel_title: str = Field(alias="channelTitle")
    channel_id: str = Field(alias="channelId")
    thumbnail: str
    published_at: datetime = Field(alias="publishedAt")

    class Config:
        populate_by_name = True

    @classmethod
    def from_entity(cls, video: VideoSummary) -> "VideoItem":
        data = video.to_dict()
        data["thumbnail"] = data.pop("thumbnail_url")
        return cls(**data)


class SearchResultsMessage(BaseModel):
    """Full current result set for a query."""

    query: str
    results: list[VideoItem]

    @classmethod
    def build(cls, query: str, videos: list[VideoSummary]) -> "SearchResultsMessage":
        return cls(query=query, results=[VideoItem.from_entity(v) for v in videos])

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ErrorMessage(BaseModel):
    """Error reply sent to the originating client only."""

    error: str
    query: str | None = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json")
