"""Itinerary models - trip days, their segments and planned activities."""

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from voyage.models.common import TimeOfDay


class Activity(BaseModel):
    """Single planned activity owned by one day segment.

    Frozen: moving an activity to another segment means removing it and
    inserting a new one.
    """

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str
    location: str = ""
    source_type: str = ""
    place_id: str | None = None
    idea_id: uuid.UUID | None = None
    photo_reference: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    category: str | None = None
    rating: float | None = Field(None, ge=0, le=5)
    time_of_day: TimeOfDay = TimeOfDay.morning

    @model_validator(mode="after")
    def check_coordinates_paired(self) -> "Activity":
        """Latitude and longitude are both present or both absent."""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")
        return self

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None


class DaySegments(BaseModel):
    """Morning, afternoon and evening activity lists of a day."""

    morning: list[Activity] = Field(default_factory=list)
    afternoon: list[Activity] = Field(default_factory=list)
    evening: list[Activity] = Field(default_factory=list)

    def segment(self, time_of_day: TimeOfDay) -> list[Activity]:
        """Return the live list backing the given segment."""
        if time_of_day == TimeOfDay.morning:
            return self.morning
        if time_of_day == TimeOfDay.afternoon:
            return self.afternoon
        return self.evening

    @property
    def is_empty(self) -> bool:
        return not (self.morning or self.afternoon or self.evening)

    @property
    def activity_count(self) -> int:
        return len(self.morning) + len(self.afternoon) + len(self.evening)


class TripDay(BaseModel):
    """One calendar day of a trip."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    trip_id: uuid.UUID
    date: date
    city: str
    segments: DaySegments = Field(default_factory=DaySegments)

    @classmethod
    def empty(cls, trip_id: uuid.UUID, day: date, city: str) -> "TripDay":
        """Create a day with no activities."""
        return cls(trip_id=trip_id, date=day, city=city, segments=DaySegments())

    @property
    def is_empty(self) -> bool:
        return self.segments.is_empty

    @property
    def formatted_date(self) -> str:
        """Display date, e.g. "Sun, Jun 1"."""
        return f"{self.date:%a}, {self.date:%b} {self.date.day}"
