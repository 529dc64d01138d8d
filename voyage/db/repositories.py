"""Repository protocol interfaces for data access."""

import uuid
from typing import Protocol

from voyage.models.itinerary import TripDay
from voyage.models.trip import Trip


class KeyValueStore(Protocol):
    """Opaque blob store keyed by string."""

    def get(self, key: str) -> bytes | None:
        """Return the blob stored under key, or None if absent."""
        ...

    def set(self, key: str, value: bytes) -> None:
        """Store blob under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...


class TripRepository(Protocol):
    """Write access to trips used by the itinerary store."""

    def update_trip(self, trip: Trip) -> None:
        """Persist an edited trip.

        Args:
            trip: Trip with the same id as a stored trip
        """
        ...


class DayRepository(Protocol):
    """Storage for the day lists of trips, correlated by trip id."""

    def get_days(self, trip_id: uuid.UUID) -> list[TripDay]:
        """Get stored days for a trip.

        Args:
            trip_id: Owning trip

        Returns:
            Days sorted by date, or an empty list when none were stored
        """
        ...

    def save_days(self, trip_id: uuid.UUID, days: list[TripDay]) -> None:
        """Replace the stored days of a trip."""
        ...

    def delete_days(self, trip_id: uuid.UUID) -> None:
        """Remove all stored days of a trip."""
        ...
