"""Trip aggregate - identity, dates and locations of a journey."""

import uuid
from datetime import date

from pydantic import BaseModel, Field, model_validator


def _medium_date(value: date) -> str:
    return f"{value:%b} {value.day}, {value.year}"


class Trip(BaseModel):
    """Top-level planning aggregate for a date-bounded journey.

    Days are not embedded; they reference the trip through ``trip_id``.
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(..., min_length=1)
    destination: str = ""
    start_date: date
    end_date: date
    cities: list[str] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)
    notes: str = ""
    is_completed: bool = False
    is_favorite: bool = False
    collaborators: list[str] = Field(default_factory=list)
    ideas_count: int = Field(0, ge=0)

    @model_validator(mode="after")
    def check_date_order(self) -> "Trip":
        """Reject trips that end before they start."""
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} precedes start_date {self.start_date}"
            )
        return self

    @property
    def city(self) -> str:
        return self.cities[0] if self.cities else ""

    @property
    def country(self) -> str:
        return self.countries[0] if self.countries else ""

    @property
    def day_count(self) -> int:
        """Inclusive number of calendar days covered by the trip."""
        return (self.end_date - self.start_date).days + 1

    @property
    def date_range_text(self) -> str:
        return f"{_medium_date(self.start_date)} – {_medium_date(self.end_date)}"

    @property
    def location_display_text(self) -> str:
        """Short location label, e.g. "Paris, France" or "3 cities in 1 country"."""
        if len(self.cities) == 1 and len(self.countries) == 1:
            return f"{self.cities[0]}, {self.countries[0]}"

        cities_text = "1 city" if len(self.cities) == 1 else f"{len(self.cities)} cities"
        countries_text = (
            "1 country" if len(self.countries) == 1 else f"{len(self.countries)} countries"
        )
        return f"{cities_text} in {countries_text}"
