"""Fixture-backed place lookup for development and tests."""

import json
from pathlib import Path
from typing import Any

from voyage.models.common import Geo
from voyage.models.places import LookupResult, PlaceDetails, PlaceSuggestion

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def load_place_fixtures(path: Path | None = None) -> list[PlaceDetails]:
    """Load place records from the fixtures JSON file."""
    fixtures_path = path or FIXTURES_DIR / "places.json"
    with open(fixtures_path) as f:
        data: list[dict[str, Any]] = json.load(f)

    return [
        PlaceDetails(
            place_id=record["place_id"],
            name=record["name"],
            formatted_address=record["formatted_address"],
            geo=Geo(lat=record["lat"], lon=record["lng"]),
            types=record.get("types", []),
            photo_reference=record.get("photo_reference"),
            rating=record.get("rating"),
        )
        for record in data
    ]


class FixturePlaceLookup:
    """Deterministic PlaceLookup over a fixed set of places (no API key required)."""

    def __init__(self, places: list[PlaceDetails] | None = None) -> None:
        records = places if places is not None else load_place_fixtures()
        self._places = {p.place_id: p for p in records}

    async def get_suggestions(self, query: str) -> LookupResult[list[PlaceSuggestion]]:
        """Places whose name or address contains the query (case-insensitive)."""
        needle = query.strip().lower()
        if not needle:
            return LookupResult.success([])

        matches = [
            PlaceSuggestion(id=p.place_id, name=p.name, address=p.formatted_address)
            for p in self._places.values()
            if needle in p.name.lower() or needle in p.formatted_address.lower()
        ]
        return LookupResult.success(matches)

    async def get_details(self, place_id: str) -> LookupResult[PlaceDetails]:
        """Details for a known place id; failure for unknown ids."""
        details = self._places.get(place_id)
        if details is None:
            return LookupResult.failure(f"unknown place {place_id}")
        return LookupResult.success(details)
