"""Service wiring for the API - built once per process from settings."""

from dataclasses import dataclass
from functools import lru_cache

from voyage.config import Settings, get_settings
from voyage.db.inmemory import InMemoryKeyValueStore
from voyage.db.redis_store import RedisKeyValueStore
from voyage.db.repositories import KeyValueStore
from voyage.db.seed_dev import sample_trips, seed_idea_repository
from voyage.db.trips import KeyValueDayRepository, TripDataService
from voyage.itinerary.store import ItineraryRegistry, ItineraryStore
from voyage.models.trip import Trip
from voyage.places.client import PlaceLookup
from voyage.places.factory import create_place_lookup
from voyage.services.ideas import IdeaRepository
from voyage.services.trips import TripCollection


@dataclass
class Services:
    """Explicitly constructed collaborators shared by the routes."""

    settings: Settings
    kv: KeyValueStore
    trips: TripCollection
    days: KeyValueDayRepository
    ideas: IdeaRepository
    places: PlaceLookup
    itineraries: ItineraryRegistry


def build_services(
    settings: Settings,
    kv: KeyValueStore | None = None,
    places: PlaceLookup | None = None,
) -> Services:
    """Wire persistence, trips, ideas, place lookup and the itinerary registry."""
    if kv is None:
        if settings.redis_url:
            kv = RedisKeyValueStore.from_url(settings.redis_url)
        else:
            kv = InMemoryKeyValueStore()

    trips = TripCollection(
        TripDataService(kv, key=settings.trips_storage_key),
        sample_factory=sample_trips if settings.seed_sample_data else None,
    )
    trips.load_trips()

    days = KeyValueDayRepository(kv, prefix=settings.days_storage_prefix)
    ideas = seed_idea_repository(trips.trips) if settings.seed_sample_data else IdeaRepository()
    lookup = places or create_place_lookup(settings)

    def open_store(trip: Trip) -> ItineraryStore:
        return ItineraryStore(
            trip,
            places=lookup,
            trips=trips,
            days=days,
            ideas=ideas,
            enrichment_timeout_ms=settings.enrichment_timeout_ms,
        )

    return Services(
        settings=settings,
        kv=kv,
        trips=trips,
        days=days,
        ideas=ideas,
        places=lookup,
        itineraries=ItineraryRegistry(open_store),
    )


@lru_cache
def get_services() -> Services:
    """Get cached services instance."""
    return build_services(get_settings())
