"""Announcement Schemas — announcement creation."""

from pydantic import BaseModel, Field


class AnnouncementCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str | None = Field(None, max_length=10_000)
