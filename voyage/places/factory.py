"""Select the place lookup implementation from settings."""

import logging

from voyage.config import Settings
from voyage.places.client import GooglePlacesClient, PlaceLookup
from voyage.places.fixtures import FixturePlaceLookup

logger = logging.getLogger(__name__)


def create_place_lookup(settings: Settings) -> PlaceLookup:
    """Google Places when an API key is configured, fixtures otherwise."""
    if settings.places_api_key:
        return GooglePlacesClient(
            api_key=settings.places_api_key,
            base_url=settings.places_base_url,
            timeout_s=settings.places_timeout_s,
        )

    logger.info("PLACES_API_KEY not set, using fixture place lookup")
    return FixturePlaceLookup()
