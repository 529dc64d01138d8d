"""Integration tests for place search and idea browsing endpoints."""

from fastapi.testclient import TestClient

from voyage.api.deps import Services
from voyage.models import Board


class TestPlaces:
    def test_suggestions_from_fixtures(self, client: TestClient) -> None:
        response = client.get("/places/suggestions", params={"q": "eiffel"})

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": "fx_eiffel",
                "name": "Eiffel Tower",
                "address": "Champ de Mars, 5 Av. Anatole France, 75007 Paris, France",
            }
        ]

    def test_blank_query_is_empty(self, client: TestClient) -> None:
        assert client.get("/places/suggestions").json() == []

    def test_details_include_activity_template(self, client: TestClient) -> None:
        response = client.get("/places/fx_louvre")

        assert response.status_code == 200
        data = response.json()
        assert data["details"]["geo"] == {"lat": 48.8606, "lon": 2.3376}
        assert data["template"]["category"] == "Museum"
        assert data["template"]["source_type"] == "Google Places"

    def test_unknown_place_is_404(self, client: TestClient) -> None:
        response = client.get("/places/fx_missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "unknown place fx_missing"


class TestIdeas:
    def test_boards_and_board_ideas(self, client: TestClient, services: Services) -> None:
        board = Board(title="Japan 2025", ideas_count=2)
        services.ideas.add_board(board)

        boards = client.get("/boards").json()
        ideas = client.get(f"/boards/{board.id}/ideas").json()

        assert [b["title"] for b in boards] == ["Japan 2025"]
        assert [i["city"] for i in ideas] == ["Tokyo", "Kyoto"]

    def test_unknown_board_is_404(self, client: TestClient) -> None:
        response = client.get("/boards/00000000-0000-0000-0000-000000000000/ideas")

        assert response.status_code == 404

    def test_ideas_and_filters_empty_without_seed(self, client: TestClient) -> None:
        assert client.get("/ideas").json() == []

        filters = client.get("/ideas/filters").json()
        assert filters["tags"] == []
        assert "Food" in filters["popular"]
