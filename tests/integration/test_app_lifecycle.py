"""Integration tests for application startup and shutdown."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from voyage.main import app


@patch("voyage.main.get_services")
def test_shutdown_closes_open_itineraries(mock_get_services: MagicMock) -> None:
    mock_get_services.cache_info.return_value.currsize = 1

    with TestClient(app):
        mock_get_services.return_value.itineraries.close_all.assert_not_called()

    mock_get_services.return_value.itineraries.close_all.assert_called_once_with()


@patch("voyage.main.get_services")
def test_shutdown_skips_unbuilt_services(mock_get_services: MagicMock) -> None:
    mock_get_services.cache_info.return_value.currsize = 0

    with TestClient(app):
        pass

    mock_get_services.assert_not_called()
