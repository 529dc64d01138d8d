"""Place search endpoints backed by the configured place lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from voyage.api.deps import Services, get_services
from voyage.itinerary.templates import template_from_place_details
from voyage.models.places import ActivityTemplate, PlaceDetails, PlaceSuggestion
from voyage.places.client import search_places

router = APIRouter(prefix="/places", tags=["places"])


class PlaceDetailsResponse(BaseModel):
    """Place details plus the activity template they map to."""

    details: PlaceDetails
    template: ActivityTemplate


@router.get("/suggestions", response_model=list[PlaceSuggestion])
async def get_suggestions(
    services: Annotated[Services, Depends(get_services)],
    q: Annotated[str, Query(max_length=200)] = "",
) -> list[PlaceSuggestion]:
    """Autocomplete suggestions; lookup failures yield an empty list."""
    return await search_places(services.places, q)


@router.get("/{place_id}", response_model=PlaceDetailsResponse)
async def get_place_details(
    place_id: str,
    services: Annotated[Services, Depends(get_services)],
) -> PlaceDetailsResponse:
    result = await services.places.get_details(place_id)
    if not result.ok or result.value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    return PlaceDetailsResponse(
        details=result.value, template=template_from_place_details(result.value)
    )
