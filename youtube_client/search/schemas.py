"""Search API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ThumbnailSchema(BaseModel):
    """Single thumbnail rendition."""

    url: str
    width: int | None = None
    height: int | None = None


class ThumbnailsSchema(BaseModel):
    """Thumbnail renditions keyed by size."""

    default: ThumbnailSchema
    medium: ThumbnailSchema | None = None
    high: ThumbnailSchema | None = None


class SearchIdSchema(BaseModel):
    """Resource id of a search hit."""

    kind: str = "youtube#video"
    video_id: str = Field(alias="videoId")

    class Config:
        populate_by_name = True


class SnippetSchema(BaseModel):
    """Search hit snippet."""

    published_at: datetime = Field(alias="publishedAt")
    channel_id: str = Field(alias="channelId")
    title: str
    description: str = ""
    thumbnails: ThumbnailsSchema
    channel_title: str = Field(alias="channelTitle", default="")

    class Config:
        populate_by_name = True


class SearchResultSchema(BaseModel):
    """Search hit (search#result)."""

    id: SearchIdSchema
    snippet: SnippetSchema


class SearchListSchema(BaseModel):
    """search.list response page."""

    items: list[SearchResultSchema] = []
    next_page_token: str | None = Field(alias="nextPageToken", default=None)

    class Config:
        populate_by_name = True
