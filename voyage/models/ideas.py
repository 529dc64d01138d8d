"""Saved ideas and the boards that group them."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class Idea(BaseModel):
    """Curated suggestion, independent of any trip."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str
    tag: str = ""
    image_url: str = ""
    city: str = ""
    country: str = ""
    activity_type: str = ""
    source: str = ""
    location: str = ""
    place_id: str | None = None
    photo_reference: str | None = None
    board_ids: list[uuid.UUID] = Field(default_factory=list)
    trip_ids: list[uuid.UUID] = Field(default_factory=list)
    date_added: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def default_location(self) -> "Idea":
        if not self.location:
            self.location = ", ".join(part for part in (self.city, self.country) if part)
        return self

    @property
    def trip_count(self) -> int:
        return len(self.trip_ids)


class Board(BaseModel):
    """User-defined collection of ideas."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str
    ideas_count: int = Field(0, ge=0)
    preview_image_urls: list[str] = Field(default_factory=list)
    collaborator_image_urls: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
