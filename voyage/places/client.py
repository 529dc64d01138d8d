"""Place lookup boundary: protocol and the Google Places client.

Both operations return a LookupResult; transport and payload errors become
failure values and are never raised to the caller.
"""

import logging
import time
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from voyage.models.common import Geo
from voyage.models.places import LookupResult, PlaceDetails, PlaceSuggestion
from voyage.utils.logging import StructuredLookupLogger
from voyage.utils.metrics import PrometheusLookupMetrics

logger = logging.getLogger(__name__)

DETAILS_FIELDS = "place_id,name,formatted_address,geometry,types,photos,rating"


class PlaceLookup(Protocol):
    """Protocol for place lookup implementations."""

    async def get_suggestions(self, query: str) -> LookupResult[list[PlaceSuggestion]]:
        """Autocomplete suggestions for a free-text query.

        Args:
            query: Text typed by the user

        Returns:
            LookupResult wrapping suggestions, or a failure reason
        """
        ...

    async def get_details(self, place_id: str) -> LookupResult[PlaceDetails]:
        """Full details of one place.

        Args:
            place_id: External place reference

        Returns:
            LookupResult wrapping details, or a failure reason
        """
        ...


def parse_suggestion(prediction: dict[str, Any]) -> PlaceSuggestion:
    """Build a suggestion from an autocomplete prediction."""
    formatting = prediction.get("structured_formatting") or {}
    description = prediction.get("description", "")
    return PlaceSuggestion(
        id=prediction["place_id"],
        name=formatting.get("main_text") or description,
        address=formatting.get("secondary_text") or description,
    )


def parse_details(result: dict[str, Any]) -> PlaceDetails:
    """Build place details from a details `result` object."""
    location = result["geometry"]["location"]
    photos = result.get("photos") or []
    return PlaceDetails(
        place_id=result["place_id"],
        name=result["name"],
        formatted_address=result.get("formatted_address", ""),
        geo=Geo(lat=location["lat"], lon=location["lng"]),
        types=result.get("types") or [],
        photo_reference=photos[0].get("photo_reference") if photos else None,
        rating=result.get("rating"),
    )


class GooglePlacesClient:
    """Client for the Google Places Autocomplete and Details endpoints."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://maps.googleapis.com/maps/api/place",
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
        metrics: PrometheusLookupMetrics | None = None,
        lookup_logger: StructuredLookupLogger | None = None,
    ) -> None:
        """Initialize client.

        Args:
            api_key: Places API key
            base_url: Places API base URL
            timeout_s: Per-request timeout when the client is created here
            client: Optional httpx client (for testing with mocks)
            metrics: Metrics recorder
            lookup_logger: Structured logger
        """
        if not api_key:
            raise ValueError("PLACES_API_KEY is required for GooglePlacesClient")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._client = client
        self._metrics = metrics or PrometheusLookupMetrics()
        self._log = lookup_logger or StructuredLookupLogger()

    async def _get_json(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        close_client = False
        client = self._client
        if client is None:
            client = httpx.AsyncClient(timeout=self._timeout_s)
            close_client = True

        try:
            response = await client.get(
                f"{self.base_url}/{path}", params={**params, "key": self.api_key}
            )
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return data
        finally:
            if close_client:
                await client.aclose()

    def _fail(self, operation: str, start: float, reason: str, ref: str) -> None:
        elapsed_ms = (time.monotonic() - start) * 1000
        self._metrics.record_latency(operation, "error", elapsed_ms)
        self._metrics.inc_error(operation, reason)
        self._log.log_lookup(operation, "error", elapsed_ms, ref=ref, error_reason=reason)

    def _succeed(self, operation: str, start: float, ref: str) -> None:
        elapsed_ms = (time.monotonic() - start) * 1000
        self._metrics.record_latency(operation, "success", elapsed_ms)
        self._log.log_lookup(operation, "success", elapsed_ms, ref=ref)

    async def get_suggestions(self, query: str) -> LookupResult[list[PlaceSuggestion]]:
        """Fetch autocomplete suggestions."""
        query = query.strip()
        if not query:
            return LookupResult.success([])

        operation = "suggestions"
        start = time.monotonic()
        try:
            data = await self._get_json("autocomplete/json", {"input": query})
        except (httpx.HTTPError, ValueError) as e:
            self._fail(operation, start, type(e).__name__, query)
            return LookupResult.failure(f"request failed: {type(e).__name__}")

        status = data.get("status")
        if status == "ZERO_RESULTS":
            self._succeed(operation, start, query)
            return LookupResult.success([])
        if status != "OK":
            self._fail(operation, start, str(status), query)
            return LookupResult.failure(data.get("error_message") or f"status {status}")

        try:
            suggestions = [parse_suggestion(p) for p in data.get("predictions", [])]
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            self._fail(operation, start, "malformed_response", query)
            return LookupResult.failure(f"malformed response: {type(e).__name__}")

        self._succeed(operation, start, query)
        return LookupResult.success(suggestions)

    async def get_details(self, place_id: str) -> LookupResult[PlaceDetails]:
        """Fetch place details."""
        operation = "details"
        start = time.monotonic()
        try:
            data = await self._get_json(
                "details/json", {"place_id": place_id, "fields": DETAILS_FIELDS}
            )
        except (httpx.HTTPError, ValueError) as e:
            self._fail(operation, start, type(e).__name__, place_id)
            return LookupResult.failure(f"request failed: {type(e).__name__}")

        status = data.get("status")
        if status != "OK":
            self._fail(operation, start, str(status), place_id)
            return LookupResult.failure(data.get("error_message") or f"status {status}")

        try:
            details = parse_details(data["result"])
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            self._fail(operation, start, "malformed_response", place_id)
            return LookupResult.failure(f"malformed response: {type(e).__name__}")

        self._succeed(operation, start, place_id)
        return LookupResult.success(details)


async def search_places(lookup: PlaceLookup, query: str) -> list[PlaceSuggestion]:
    """Suggestions for a query, empty on any lookup failure."""
    result = await lookup.get_suggestions(query)
    if not result.ok or result.value is None:
        logger.info("Suggestion lookup failed for %r: %s", query, result.error)
        return []
    return result.value
