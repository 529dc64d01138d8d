"""FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from voyage.api.deps import get_services
from voyage.api.routes.health import router as health_router
from voyage.api.routes.ideas import router as ideas_router
from voyage.api.routes.itinerary import router as itinerary_router
from voyage.api.routes.metrics import router as metrics_router
from voyage.api.routes.places import router as places_router
from voyage.api.routes.trips import router as trips_router
from voyage.config import get_settings
from voyage.utils.logging import configure_logging

configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Close open itineraries on shutdown."""
    yield
    # Services are built lazily; nothing to close if no request needed them.
    if get_services.cache_info().currsize:
        get_services().itineraries.close_all()
        logger.info("Closed open itineraries")


app = FastAPI(title="Voyage Itinerary API", version="0.1.0", lifespan=lifespan)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(trips_router)
app.include_router(itinerary_router)
app.include_router(places_router)
app.include_router(ideas_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Voyage Itinerary API", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
