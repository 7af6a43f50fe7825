"""Pydantic models for feed entries."""

from datetime import datetime

from pydantic import BaseModel, Field


class FeedAuthor(BaseModel):
    """Author attribution attached to a feed entry."""

    id: str
    full_name: str
    expertise_area: str
    trust_tier: str
    is_verified: bool


class FeedEntry(BaseModel):
    """An approved video paired with its author."""

    id: str
    title: str
    description: str
    video_url: str
    thumbnail_url: str | None = None
    duration_sec: int = Field(ge=0)
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    author: FeedAuthor
