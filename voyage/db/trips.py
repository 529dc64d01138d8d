"""Blob persistence for trips and trip days.

The whole trip list is one JSON blob under a single key; days are one blob
per trip. Encode, decode and backend failures are logged and swallowed:
loads fall back to an empty list and saves become no-ops.
"""

import logging
import uuid

from pydantic import TypeAdapter, ValidationError

from voyage.db.repositories import KeyValueStore
from voyage.models.itinerary import TripDay
from voyage.models.trip import Trip

logger = logging.getLogger(__name__)

_trip_list = TypeAdapter(list[Trip])
_day_list = TypeAdapter(list[TripDay])


class TripDataService:
    """Saves and loads the full trip list as one opaque blob."""

    def __init__(self, kv: KeyValueStore, key: str = "savedTrips") -> None:
        self._kv = kv
        self._key = key

    def save_trips(self, trips: list[Trip]) -> None:
        """Replace the stored trip list."""
        try:
            encoded = _trip_list.dump_json(trips)
            self._kv.set(self._key, encoded)
        except Exception as e:
            logger.warning(
                "Failed to save trips: %s",
                type(e).__name__,
                extra={"structured": {"key": self._key, "count": len(trips)}},
            )

    def load_trips(self) -> list[Trip]:
        """Load the stored trip list; empty when missing or unreadable."""
        try:
            data = self._kv.get(self._key)
        except Exception as e:
            logger.warning("Failed to read trips: %s", type(e).__name__)
            return []

        if data is None:
            return []

        try:
            return _trip_list.validate_json(data)
        except ValidationError as e:
            logger.warning(
                "Discarding unreadable trips blob",
                extra={"structured": {"key": self._key, "errors": e.error_count()}},
            )
            return []


class KeyValueDayRepository:
    """DayRepository storing each trip's days as one blob."""

    def __init__(self, kv: KeyValueStore, prefix: str = "tripDays") -> None:
        self._kv = kv
        self._prefix = prefix

    def _key(self, trip_id: uuid.UUID) -> str:
        return f"{self._prefix}:{trip_id}"

    def get_days(self, trip_id: uuid.UUID) -> list[TripDay]:
        """Get stored days for a trip."""
        try:
            data = self._kv.get(self._key(trip_id))
        except Exception as e:
            logger.warning("Failed to read days for trip %s: %s", trip_id, type(e).__name__)
            return []

        if data is None:
            return []

        try:
            days = _day_list.validate_json(data)
        except ValidationError as e:
            logger.warning(
                "Discarding unreadable days blob",
                extra={"structured": {"trip_id": str(trip_id), "errors": e.error_count()}},
            )
            return []

        return sorted(days, key=lambda d: d.date)

    def save_days(self, trip_id: uuid.UUID, days: list[TripDay]) -> None:
        """Replace the stored days of a trip."""
        try:
            self._kv.set(self._key(trip_id), _day_list.dump_json(days))
        except Exception as e:
            logger.warning("Failed to save days for trip %s: %s", trip_id, type(e).__name__)

    def delete_days(self, trip_id: uuid.UUID) -> None:
        """Remove all stored days of a trip."""
        try:
            self._kv.delete(self._key(trip_id))
        except Exception as e:
            logger.warning("Failed to delete days for trip %s: %s", trip_id, type(e).__name__)
