"""Place lookup contract types and the activity template built from them."""

import uuid
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from voyage.models.common import Geo

T = TypeVar("T")


class PlaceSuggestion(BaseModel):
    """Autocomplete suggestion: minimal fields only."""

    id: str
    name: str
    address: str = ""


class PlaceDetails(BaseModel):
    """Full place record returned by a details lookup."""

    place_id: str
    name: str
    formatted_address: str = ""
    geo: Geo
    types: list[str] = Field(default_factory=list)
    photo_reference: str | None = None
    rating: float | None = None


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Outcome of a place lookup: a value or a failure reason.

    Lookups report failures through this type instead of raising.
    """

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "LookupResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "LookupResult[T]":
        return cls(error=error)


class ActivityTemplate(BaseModel):
    """Source-agnostic data used to create an activity.

    Built from a search suggestion, full place details, a saved idea or
    manual entry.
    """

    title: str = Field(..., min_length=1)
    location: str = ""
    source_type: str = ""
    place_id: str | None = None
    idea_id: uuid.UUID | None = None
    photo_reference: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    category: str | None = None
    rating: float | None = Field(None, ge=0, le=5)

    @model_validator(mode="after")
    def check_coordinates_paired(self) -> "ActivityTemplate":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")
        return self

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def needs_enrichment(self) -> bool:
        """True when a place reference exists but coordinates are missing."""
        return bool(self.place_id) and not self.has_coordinates
