"""Itinerary store - owns the days of one open trip and mediates every mutation.

Segment mutations are serialized per day with an asyncio.Lock. Adding an
activity with a place reference but no coordinates first awaits a details
lookup; lookup failure or timeout falls back to the template's own data.
"""

import asyncio
import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from voyage.db.repositories import DayRepository, TripRepository
from voyage.itinerary.generator import generate_days_for_trip, reconcile_days
from voyage.itinerary.templates import build_activity, merge_details
from voyage.models.common import TimeOfDay
from voyage.models.ideas import Idea
from voyage.models.itinerary import Activity, TripDay
from voyage.models.places import ActivityTemplate
from voyage.models.trip import Trip
from voyage.places.client import PlaceLookup
from voyage.services.ideas import IdeaRepository
from voyage.utils.metrics import PrometheusLookupMetrics

logger = logging.getLogger(__name__)


class StoreEventKind(str, Enum):
    """Kind of change announced to store listeners."""

    loaded = "loaded"
    day_toggled = "day_toggled"
    activity_added = "activity_added"
    activity_removed = "activity_removed"
    activities_reordered = "activities_reordered"
    notes_updated = "notes_updated"
    ideas_linked = "ideas_linked"
    idea_unlinked = "idea_unlinked"


@dataclass(frozen=True)
class StoreEvent:
    """Change notification emitted after a mutation is applied."""

    kind: StoreEventKind
    trip_id: uuid.UUID
    day_id: uuid.UUID | None = None
    time_of_day: TimeOfDay | None = None
    activity_id: uuid.UUID | None = None


Listener = Callable[[StoreEvent], None]


@dataclass
class CancelToken:
    """Cancellation flag scoped to the store's lifetime."""

    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ItineraryStore:
    """Authoritative in-memory day list for one trip."""

    def __init__(
        self,
        trip: Trip,
        *,
        places: PlaceLookup | None = None,
        trips: TripRepository | None = None,
        days: DayRepository | None = None,
        ideas: IdeaRepository | None = None,
        enrichment_timeout_ms: int = 4000,
        metrics: PrometheusLookupMetrics | None = None,
    ) -> None:
        """Initialize store.

        Args:
            trip: Trip whose itinerary is opened
            places: Place lookup used to enrich activities (optional)
            trips: Trip persistence, saved after each mutation (optional)
            days: Day persistence (optional, in-memory only without it)
            ideas: Source of ideas linked to the trip (optional)
            enrichment_timeout_ms: Upper bound on one enrichment lookup
            metrics: Metrics recorder
        """
        self.trip = trip
        self.linked_ideas: list[Idea] = []
        self.expanded_days: set[uuid.UUID] = set()
        self.is_loaded = False

        self._places = places
        self._trip_repo = trips
        self._day_repo = days
        self._idea_repo = ideas
        self._enrichment_timeout_s = enrichment_timeout_ms / 1000
        self._metrics = metrics or PrometheusLookupMetrics()

        self._days: list[TripDay] = []
        self._locks: dict[uuid.UUID, asyncio.Lock] = {}
        self._listeners: list[Listener] = []
        self._cancel_token = CancelToken()

    # Read access

    @property
    def days(self) -> list[TripDay]:
        """Snapshot of the day list; mutate only through store operations."""
        return list(self._days)

    @property
    def is_closed(self) -> bool:
        return self._cancel_token.cancelled

    def get_day(self, day_id: uuid.UUID) -> TripDay | None:
        return next((d for d in self._days if d.id == day_id), None)

    # Lifecycle

    def load(self) -> list[TripDay]:
        """Populate days once: stored days if any, otherwise freshly generated.

        Raises:
            EmptyCityListError: days must be generated and the trip has no cities
        """
        if self.is_loaded:
            return self.days

        if not self._days:
            stored = self._day_repo.get_days(self.trip.id) if self._day_repo else []
            if stored:
                self._days = stored
            else:
                self._days = generate_days_for_trip(self.trip)
                if self._day_repo is not None:
                    self._day_repo.save_days(self.trip.id, self._days)

        if self._idea_repo is not None:
            self.linked_ideas = self._idea_repo.ideas_for_trip(self.trip.id)

        self.is_loaded = True
        logger.info(
            "Loaded itinerary",
            extra={"structured": {"trip_id": str(self.trip.id), "days": len(self._days)}},
        )
        self._notify(StoreEvent(StoreEventKind.loaded, self.trip.id))
        return self.days

    def close(self) -> None:
        """Dispose the store; in-flight enrichments are dropped, later mutations ignored."""
        self._cancel_token.cancel()
        self._listeners.clear()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Presentation state

    def toggle_day_expanded(self, day_id: uuid.UUID) -> bool:
        """Flip expansion of a day; returns the new state."""
        if day_id in self.expanded_days:
            self.expanded_days.discard(day_id)
        else:
            self.expanded_days.add(day_id)
        self._notify(StoreEvent(StoreEventKind.day_toggled, self.trip.id, day_id=day_id))
        return day_id in self.expanded_days

    def is_day_expanded(self, day_id: uuid.UUID) -> bool:
        return day_id in self.expanded_days

    # Activity operations

    async def add_activity(
        self,
        day_id: uuid.UUID,
        time_of_day: TimeOfDay,
        template: ActivityTemplate,
    ) -> Activity | None:
        """Append a new activity built from ``template`` to a day segment.

        Returns:
            The inserted activity, or None when the day is unknown or the
            store was closed before the insertion could happen
        """
        if self.is_closed or self.get_day(day_id) is None:
            return None

        if template.needs_enrichment:
            template = await self._enrich(template)
            if self.is_closed:
                self._metrics.inc_enrichment("cancelled")
                logger.info("Store closed during enrichment, dropping activity %r", template.title)
                return None

        async with self._day_lock(day_id):
            day = self.get_day(day_id)
            if day is None:
                return None

            activity = build_activity(template, time_of_day)
            day.segments.segment(time_of_day).append(activity)
            self._save()

        self._notify(
            StoreEvent(
                StoreEventKind.activity_added,
                self.trip.id,
                day_id=day_id,
                time_of_day=time_of_day,
                activity_id=activity.id,
            )
        )
        return activity

    async def remove_activity(
        self,
        day_id: uuid.UUID,
        activity_id: uuid.UUID,
        time_of_day: TimeOfDay,
    ) -> bool:
        """Remove the first activity with ``activity_id``; unknown ids are a no-op."""
        if self.is_closed:
            return False

        async with self._day_lock(day_id):
            day = self.get_day(day_id)
            if day is None:
                return False

            segment = day.segments.segment(time_of_day)
            index = next((i for i, a in enumerate(segment) if a.id == activity_id), None)
            if index is None:
                return False

            del segment[index]
            self._save()

        self._notify(
            StoreEvent(
                StoreEventKind.activity_removed,
                self.trip.id,
                day_id=day_id,
                time_of_day=time_of_day,
                activity_id=activity_id,
            )
        )
        return True

    async def reorder_activities(
        self,
        day_id: uuid.UUID,
        time_of_day: TimeOfDay,
        from_index: int,
        to_index: int,
    ) -> bool:
        """Move the activity at ``from_index`` to ``to_index`` within one segment.

        Out-of-range indices (stale UI positions) leave the segment untouched.
        """
        if self.is_closed:
            return False

        async with self._day_lock(day_id):
            day = self.get_day(day_id)
            if day is None:
                return False

            segment = day.segments.segment(time_of_day)
            if not (0 <= from_index < len(segment) and 0 <= to_index < len(segment)):
                logger.debug(
                    "Ignoring reorder %d -> %d on segment of %d", from_index, to_index, len(segment)
                )
                return False
            if from_index == to_index:
                return False

            activity = segment.pop(from_index)
            segment.insert(to_index, activity)
            self._save()

        self._notify(
            StoreEvent(
                StoreEventKind.activities_reordered,
                self.trip.id,
                day_id=day_id,
                time_of_day=time_of_day,
                activity_id=activity.id,
            )
        )
        return True

    # Linked ideas

    def unlink_idea(self, idea_id: uuid.UUID) -> bool:
        """Drop one idea from the linked list, keeping the others in order."""
        remaining = [idea for idea in self.linked_ideas if idea.id != idea_id]
        if len(remaining) == len(self.linked_ideas):
            return False

        self.linked_ideas = remaining
        if self._idea_repo is not None:
            self._idea_repo.unlink_from_trip(idea_id, self.trip.id)
        self._notify(StoreEvent(StoreEventKind.idea_unlinked, self.trip.id))
        return True

    def link_ideas(self, ideas: list[Idea]) -> int:
        """Append ideas chosen by the selection flow; already linked ones are skipped."""
        linked = {idea.id for idea in self.linked_ideas}
        added = 0
        for idea in ideas:
            if idea.id in linked:
                continue
            self.linked_ideas.append(idea)
            linked.add(idea.id)
            if self._idea_repo is not None:
                self._idea_repo.link_to_trip(idea.id, self.trip.id)
            added += 1

        if added:
            self._notify(StoreEvent(StoreEventKind.ideas_linked, self.trip.id))
        return added

    # Notes

    def update_notes(self, notes: str) -> bool:
        """Commit edited notes; unchanged text does not trigger a save."""
        if self.is_closed or notes == self.trip.notes:
            return False

        self.trip.notes = notes
        self._save_trip()
        self._notify(StoreEvent(StoreEventKind.notes_updated, self.trip.id))
        return True

    def apply_trip_edit(self, trip: Trip) -> list[TripDay]:
        """Adopt an edited trip and fit the day list to its new dates and cities.

        Raises:
            EmptyCityListError: the edited trip has no cities
        """
        if trip.id != self.trip.id:
            raise ValueError(f"store for trip {self.trip.id} cannot adopt trip {trip.id}")

        days = reconcile_days(trip, self._days)
        self.trip = trip
        self._days = days
        self.expanded_days &= {d.id for d in days}
        self._save()
        self._notify(StoreEvent(StoreEventKind.loaded, self.trip.id))
        return self.days

    # Internals

    def _day_lock(self, day_id: uuid.UUID) -> asyncio.Lock:
        return self._locks.setdefault(day_id, asyncio.Lock())

    async def _enrich(self, template: ActivityTemplate) -> ActivityTemplate:
        """Fetch coordinates for a template; the template itself is the fallback."""
        if self._places is None or template.place_id is None:
            return template

        try:
            result = await asyncio.wait_for(
                self._places.get_details(template.place_id),
                timeout=self._enrichment_timeout_s,
            )
        except TimeoutError:
            self._metrics.inc_enrichment("timeout")
            logger.warning("Enrichment timed out for place %s", template.place_id)
            return template
        except Exception as e:
            self._metrics.inc_enrichment("failed")
            logger.warning("Enrichment raised for place %s: %s", template.place_id, type(e).__name__)
            return template

        if not result.ok or result.value is None:
            self._metrics.inc_enrichment("failed")
            logger.warning("Enrichment failed for place %s: %s", template.place_id, result.error)
            return template

        self._metrics.inc_enrichment("enriched")
        return merge_details(template, result.value)

    def _save_trip(self) -> None:
        if self._trip_repo is not None:
            self._trip_repo.update_trip(self.trip)

    def _save(self) -> None:
        self._save_trip()
        if self._day_repo is not None:
            self._day_repo.save_days(self.trip.id, self._days)

    def _notify(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Store listener failed on %s", event.kind.value)


class ItineraryRegistry:
    """One store per open trip, built by a factory on first access."""

    def __init__(self, factory: Callable[[Trip], ItineraryStore]) -> None:
        self._factory = factory
        self._stores: dict[uuid.UUID, ItineraryStore] = {}

    def open(self, trip: Trip) -> ItineraryStore:
        """Get the loaded store for a trip, creating it if needed."""
        store = self._stores.get(trip.id)
        if store is None or store.is_closed:
            store = self._factory(trip)
            self._stores[trip.id] = store
        store.load()
        return store

    def get(self, trip_id: uuid.UUID) -> ItineraryStore | None:
        return self._stores.get(trip_id)

    def close(self, trip_id: uuid.UUID) -> None:
        store = self._stores.pop(trip_id, None)
        if store is not None:
            store.close()

    def close_all(self) -> None:
        for trip_id in list(self._stores):
            self.close(trip_id)
