"""Trip collection - the user's trips with upcoming/completed views."""

import logging
import uuid
from collections.abc import Callable

from voyage.db.trips import TripDataService
from voyage.models.trip import Trip

logger = logging.getLogger(__name__)


class TripCollection:
    """Owns the trip list; every mutation is persisted as a whole-list save."""

    def __init__(
        self,
        data_service: TripDataService,
        sample_factory: Callable[[], list[Trip]] | None = None,
    ) -> None:
        """Initialize collection.

        Args:
            data_service: Trip blob persistence
            sample_factory: Trips to show when storage is empty (not persisted
                until the first mutation)
        """
        self._data = data_service
        self._sample_factory = sample_factory
        self.trips: list[Trip] = []

    def load_trips(self) -> list[Trip]:
        self.trips = self._data.load_trips()
        if not self.trips and self._sample_factory is not None:
            self.trips = self._sample_factory()
            logger.info("No stored trips, using %d sample trips", len(self.trips))
        return self.trips

    @property
    def upcoming_trips(self) -> list[Trip]:
        return [t for t in self.trips if not t.is_completed]

    @property
    def completed_trips(self) -> list[Trip]:
        return [t for t in self.trips if t.is_completed]

    def get_trip(self, trip_id: uuid.UUID) -> Trip | None:
        return next((t for t in self.trips if t.id == trip_id), None)

    def add_trip(self, trip: Trip) -> None:
        self.trips.append(trip)
        self._save()

    def update_trip(self, trip: Trip) -> None:
        """Replace the stored trip with the same id; unknown ids are ignored."""
        index = self._index_of(trip.id)
        if index is None:
            return
        self.trips[index] = trip
        self._save()

    def delete_trip(self, trip_id: uuid.UUID) -> bool:
        index = self._index_of(trip_id)
        if index is None:
            return False
        del self.trips[index]
        self._save()
        return True

    def toggle_favorite(self, trip_id: uuid.UUID) -> Trip | None:
        trip = self.get_trip(trip_id)
        if trip is None:
            return None
        trip.is_favorite = not trip.is_favorite
        self._save()
        return trip

    def mark_as_completed(self, trip_id: uuid.UUID) -> Trip | None:
        trip = self.get_trip(trip_id)
        if trip is None:
            return None
        trip.is_completed = True
        self._save()
        return trip

    def _index_of(self, trip_id: uuid.UUID) -> int | None:
        return next((i for i, t in enumerate(self.trips) if t.id == trip_id), None)

    def _save(self) -> None:
        self._data.save_trips(self.trips)
