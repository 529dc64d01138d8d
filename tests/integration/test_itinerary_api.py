"""Integration tests for itinerary endpoints."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from voyage.api.deps import Services, build_services, get_services
from voyage.config import Settings
from voyage.db.inmemory import InMemoryKeyValueStore
from voyage.main import app
from voyage.places.fixtures import FixturePlaceLookup

TRIP_BODY: dict[str, Any] = {
    "name": "Riviera",
    "destination": "France",
    "start_date": "2025-06-01",
    "end_date": "2025-06-03",
    "cities": ["Paris", "Nice"],
    "countries": ["France"],
}


@pytest.fixture
def seeded_services() -> Services:
    """Services with sample trips and ideas; the first trip has linked ideas."""
    settings = Settings(seed_sample_data=True, redis_url=None, places_api_key="")
    return build_services(settings, kv=InMemoryKeyValueStore(), places=FixturePlaceLookup())


@pytest.fixture
def seeded_client(seeded_services: Services) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_services] = lambda: seeded_services
    yield TestClient(app)
    app.dependency_overrides.clear()


def new_trip(client: TestClient) -> str:
    trip_id: str = client.post("/trips", json=TRIP_BODY).json()["trip"]["id"]
    return trip_id


def itinerary(client: TestClient, trip_id: str) -> dict[str, Any]:
    response = client.get(f"/trips/{trip_id}/itinerary")
    assert response.status_code == 200
    data: dict[str, Any] = response.json()
    return data


def add(client: TestClient, trip_id: str, day_id: str, body: dict[str, Any]) -> Any:
    return client.post(f"/trips/{trip_id}/itinerary/days/{day_id}/activities", json=body)


class TestGetItinerary:
    def test_days_generated_on_first_open(self, client: TestClient) -> None:
        trip_id = new_trip(client)

        data = itinerary(client, trip_id)

        assert [d["city"] for d in data["days"]] == ["Paris", "Paris", "Nice"]
        assert [d["date"] for d in data["days"]] == ["2025-06-01", "2025-06-02", "2025-06-03"]
        assert data["expanded_day_ids"] == []
        assert data["linked_ideas"] == []

    def test_days_are_stable_across_opens(self, client: TestClient) -> None:
        trip_id = new_trip(client)

        first = [d["id"] for d in itinerary(client, trip_id)["days"]]
        second = [d["id"] for d in itinerary(client, trip_id)["days"]]

        assert first == second

    def test_unknown_trip_is_404(self, client: TestClient) -> None:
        response = client.get("/trips/00000000-0000-0000-0000-000000000000/itinerary")

        assert response.status_code == 404

    def test_toggle_day(self, client: TestClient) -> None:
        trip_id = new_trip(client)
        day_id = itinerary(client, trip_id)["days"][0]["id"]

        opened = client.post(f"/trips/{trip_id}/itinerary/days/{day_id}/toggle").json()

        assert opened == {"day_id": day_id, "expanded": True}
        assert itinerary(client, trip_id)["expanded_day_ids"] == [day_id]

        closed = client.post(f"/trips/{trip_id}/itinerary/days/{day_id}/toggle").json()
        assert closed["expanded"] is False


class TestAddActivity:
    def test_add_from_suggestion_is_enriched(self, client: TestClient) -> None:
        trip_id = new_trip(client)
        day_id = itinerary(client, trip_id)["days"][0]["id"]

        response = add(
            client,
            trip_id,
            day_id,
            {
                "time_of_day": "Afternoon",
                "suggestion": {
                    "id": "fx_louvre",
                    "name": "Louvre Museum",
                    "address": "Rue de Rivoli, 75001 Paris, France",
                },
            },
        )

        assert response.status_code == 201
        activity = response.json()
        assert activity["time_of_day"] == "Afternoon"
        assert activity["source_type"] == "Google Places"
        assert (activity["latitude"], activity["longitude"]) == (48.8606, 2.3376)
        assert activity["category"] == "Museum"
        assert activity["rating"] == 4.7

        day = itinerary(client, trip_id)["days"][0]
        assert [a["id"] for a in day["segments"]["afternoon"]] == [activity["id"]]
        assert day["segments"]["morning"] == []

    def test_unknown_place_is_added_without_coordinates(self, client: TestClient) -> None:
        trip_id = new_trip(client)
        day_id = itinerary(client, trip_id)["days"][0]["id"]

        response = add(
            client,
            trip_id,
            day_id,
            {"time_of_day": "Evening", "suggestion": {"id": "nowhere", "name": "Mystery Bar"}},
        )

        assert response.status_code == 201
        assert response.json()["latitude"] is None
        assert response.json()["title"] == "Mystery Bar"

    def test_add_manual_template(self, client: TestClient) -> None:
        trip_id = new_trip(client)
        day_id = itinerary(client, trip_id)["days"][2]["id"]

        response = add(
            client,
            trip_id,
            day_id,
            {"time_of_day": "Morning", "template": {"title": "Beach walk", "location": "Nice"}},
        )

        assert response.status_code == 201
        assert response.json()["location"] == "Nice"

    def test_exactly_one_source_required(self, client: TestClient) -> None:
        trip_id = new_trip(client)
        day_id = itinerary(client, trip_id)["days"][0]["id"]

        none_given = add(client, trip_id, day_id, {"time_of_day": "Morning"})
        two_given = add(
            client,
            trip_id,
            day_id,
            {
                "time_of_day": "Morning",
                "template": {"title": "A"},
                "suggestion": {"id": "fx_louvre", "name": "Louvre"},
            },
        )

        assert none_given.status_code == 422
        assert two_given.status_code == 422

    def test_unknown_day_is_404(self, client: TestClient) -> None:
        trip_id = new_trip(client)
        itinerary(client, trip_id)

        response = add(
            client,
            trip_id,
            "00000000-0000-0000-0000-000000000000",
            {"time_of_day": "Morning", "template": {"title": "Lost"}},
        )

        assert response.status_code == 404

    def test_unknown_idea_is_404(self, client: TestClient) -> None:
        trip_id = new_trip(client)
        day_id = itinerary(client, trip_id)["days"][0]["id"]

        response = add(
            client,
            trip_id,
            day_id,
            {"time_of_day": "Morning", "idea_id": "00000000-0000-0000-0000-000000000000"},
        )

        assert response.status_code == 404

    def test_add_from_linked_idea(
        self, seeded_client: TestClient, seeded_services: Services
    ) -> None:
        trip = seeded_services.trips.trips[0]
        data = itinerary(seeded_client, str(trip.id))
        cafe = next(i for i in data["linked_ideas"] if i["title"] == "Paris Cafe")

        response = add(
            seeded_client,
            str(trip.id),
            data["days"][0]["id"],
            {"time_of_day": "Morning", "idea_id": cafe["id"]},
        )

        assert response.status_code == 201
        activity = response.json()
        assert activity["idea_id"] == cafe["id"]
        assert activity["source_type"] == "Instagram"
        assert activity["category"] == "Food"
        assert activity["latitude"] is not None


class TestRemoveAndReorder:
    def add_three(self, client: TestClient) -> tuple[str, str, list[str]]:
        trip_id = new_trip(client)
        day_id = itinerary(client, trip_id)["days"][0]["id"]
        ids = [
            add(client, trip_id, day_id, {"time_of_day": "Morning", "template": {"title": t}})
            .json()["id"]
            for t in ("A", "B", "C")
        ]
        return trip_id, day_id, ids

    def morning_titles(self, client: TestClient, trip_id: str) -> list[str]:
        day = itinerary(client, trip_id)["days"][0]
        return [a["title"] for a in day["segments"]["morning"]]

    def test_reorder_moves_activity(self, client: TestClient) -> None:
        trip_id, day_id, _ = self.add_three(client)

        response = client.post(
            f"/trips/{trip_id}/itinerary/days/{day_id}/segments/Morning/reorder",
            json={"from_index": 0, "to_index": 2},
        )

        assert response.json() == {"moved": True}
        assert self.morning_titles(client, trip_id) == ["B", "C", "A"]

    def test_stale_reorder_is_ignored(self, client: TestClient) -> None:
        trip_id, day_id, _ = self.add_three(client)

        response = client.post(
            f"/trips/{trip_id}/itinerary/days/{day_id}/segments/Morning/reorder",
            json={"from_index": 5, "to_index": 0},
        )

        assert response.json() == {"moved": False}
        assert self.morning_titles(client, trip_id) == ["A", "B", "C"]

    def test_remove_activity(self, client: TestClient) -> None:
        trip_id, day_id, ids = self.add_three(client)

        response = client.delete(
            f"/trips/{trip_id}/itinerary/days/{day_id}/activities/{ids[1]}",
            params={"time_of_day": "Morning"},
        )

        assert response.status_code == 204
        assert self.morning_titles(client, trip_id) == ["A", "C"]

    def test_remove_from_wrong_segment_is_noop(self, client: TestClient) -> None:
        trip_id, day_id, ids = self.add_three(client)

        response = client.delete(
            f"/trips/{trip_id}/itinerary/days/{day_id}/activities/{ids[0]}",
            params={"time_of_day": "Evening"},
        )

        assert response.status_code == 204
        assert self.morning_titles(client, trip_id) == ["A", "B", "C"]

    def test_changes_survive_reopening(self, client: TestClient, services: Services) -> None:
        trip_id, _, _ = self.add_three(client)

        services.itineraries.close_all()

        assert self.morning_titles(client, trip_id) == ["A", "B", "C"]


class TestNotes:
    def test_update_notes(self, client: TestClient) -> None:
        trip_id = new_trip(client)

        response = client.put(f"/trips/{trip_id}/notes", json={"notes": "Pack adapters"})

        assert response.json() == {"updated": True, "notes": "Pack adapters"}
        assert client.get(f"/trips/{trip_id}").json()["trip"]["notes"] == "Pack adapters"

    def test_unchanged_notes_not_committed(self, client: TestClient) -> None:
        trip_id = new_trip(client)
        client.put(f"/trips/{trip_id}/notes", json={"notes": "Same"})

        response = client.put(f"/trips/{trip_id}/notes", json={"notes": "Same"})

        assert response.json()["updated"] is False


class TestLinkedIdeas:
    def test_seeded_trip_lists_linked_ideas(
        self, seeded_client: TestClient, seeded_services: Services
    ) -> None:
        trip_id = seeded_services.trips.trips[0].id

        ideas = seeded_client.get(f"/trips/{trip_id}/ideas").json()

        assert [i["title"] for i in ideas] == ["Paris Cafe", "Tokyo Street", "Mountain Hike"]

    def test_unlink_idea(self, seeded_client: TestClient, seeded_services: Services) -> None:
        trip_id = seeded_services.trips.trips[0].id
        first = seeded_client.get(f"/trips/{trip_id}/ideas").json()[0]

        response = seeded_client.delete(f"/trips/{trip_id}/ideas/{first['id']}")

        assert response.status_code == 204
        remaining = seeded_client.get(f"/trips/{trip_id}/ideas").json()
        assert first["id"] not in [i["id"] for i in remaining]

    def test_link_ideas_skips_already_linked(
        self, seeded_client: TestClient, seeded_services: Services
    ) -> None:
        trip_id = seeded_services.trips.trips[0].id
        linked = seeded_client.get(f"/trips/{trip_id}/ideas").json()
        loose = seeded_services.ideas.unorganized[0]

        response = seeded_client.post(
            f"/trips/{trip_id}/ideas",
            json={"idea_ids": [linked[0]["id"], str(loose.id)]},
        )

        assert response.json() == {"linked": 1}
        assert len(seeded_client.get(f"/trips/{trip_id}/ideas").json()) == 4

    def test_link_unknown_idea_is_404(
        self, seeded_client: TestClient, seeded_services: Services
    ) -> None:
        trip_id = seeded_services.trips.trips[0].id

        response = seeded_client.post(
            f"/trips/{trip_id}/ideas",
            json={"idea_ids": ["00000000-0000-0000-0000-000000000000"]},
        )

        assert response.status_code == 404
