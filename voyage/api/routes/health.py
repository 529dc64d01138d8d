"""Health check endpoints.

Checks Redis connectivity when configured; the in-memory store is always ok.
"""

import json
from typing import Annotated, Any

import redis
from fastapi import APIRouter, Depends, Response

from voyage.api.deps import Services, get_services
from voyage.config import Settings
from voyage.places.fixtures import FixturePlaceLookup

router = APIRouter()


async def check_redis(settings: Settings) -> tuple[bool, str]:
    """Check Redis connectivity.

    Returns:
        (is_ok, status_message)
    """
    if not settings.redis_url:
        return (True, "not_configured")

    try:
        client = redis.from_url(settings.redis_url)  # type: ignore[no-untyped-call]
        client.ping()
        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz(
    services: Annotated[Services, Depends(get_services)],
) -> dict[str, Any] | Response:
    """Component health check.

    Returns:
        200 with component status if storage is reachable
        503 otherwise
    """
    redis_ok, redis_status = await check_redis(services.settings)
    places_status = "fixtures" if isinstance(services.places, FixturePlaceLookup) else "google"

    response_body = {
        "status": "ok" if redis_ok else "degraded",
        "components": {
            "storage": redis_status,
            "places": places_status,
            "trips": str(len(services.trips.trips)),
        },
    }

    if not redis_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
