"""Shared pytest fixtures for all test suites."""

import uuid
from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from voyage.api.deps import Services, build_services, get_services
from voyage.config import Settings
from voyage.db.inmemory import InMemoryKeyValueStore
from voyage.main import app
from voyage.models.common import Geo
from voyage.models.places import PlaceDetails
from voyage.models.trip import Trip
from voyage.places.fixtures import FixturePlaceLookup


@pytest.fixture
def paris_nice_trip() -> Trip:
    """Three-day trip across two cities."""
    return Trip(
        id=uuid.UUID("00000000-0000-0000-0000-00000000a001"),
        name="Riviera",
        destination="France",
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 3),
        cities=["Paris", "Nice"],
        countries=["France", "France"],
        notes="Book trains",
    )


@pytest.fixture
def louvre_details() -> PlaceDetails:
    return PlaceDetails(
        place_id="fx_louvre",
        name="Louvre Museum",
        formatted_address="Rue de Rivoli, 75001 Paris, France",
        geo=Geo(lat=48.8606, lon=2.3376),
        types=["museum", "tourist_attraction"],
        photo_reference="photo_louvre_1",
        rating=4.7,
    )


@pytest.fixture
def services() -> Services:
    """Services on in-memory storage and fixture places, without sample data."""
    settings = Settings(seed_sample_data=False, redis_url=None, places_api_key="")
    return build_services(settings, kv=InMemoryKeyValueStore(), places=FixturePlaceLookup())


@pytest.fixture
def client(services: Services) -> Generator[TestClient, None, None]:
    """Test client bound to isolated services."""
    app.dependency_overrides[get_services] = lambda: services
    yield TestClient(app)
    app.dependency_overrides.clear()
