"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, Field


class TimeOfDay(str, Enum):
    """Segment of a trip day."""

    morning = "Morning"
    afternoon = "Afternoon"
    evening = "Evening"


class Geo(BaseModel):
    """Geographic coordinates (WGS84)."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
