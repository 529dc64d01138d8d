"""Itinerary endpoints - days, activities, notes and linked ideas of one trip."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field, model_validator

from voyage.api.deps import Services, get_services
from voyage.api.routes.trips import get_trip_or_404
from voyage.errors import ConfigurationError
from voyage.itinerary.store import ItineraryStore
from voyage.itinerary.templates import template_from_idea, template_from_suggestion
from voyage.models.common import TimeOfDay
from voyage.models.ideas import Idea
from voyage.models.itinerary import Activity, TripDay
from voyage.models.places import ActivityTemplate, PlaceSuggestion

router = APIRouter(prefix="/trips/{trip_id}", tags=["itinerary"])


class ItineraryResponse(BaseModel):
    """Response for GET /trips/{trip_id}/itinerary."""

    trip_id: uuid.UUID
    days: list[TripDay]
    expanded_day_ids: list[uuid.UUID]
    linked_ideas: list[Idea]


class AddActivityRequest(BaseModel):
    """Request body for adding an activity; exactly one source must be given."""

    time_of_day: TimeOfDay
    template: ActivityTemplate | None = None
    suggestion: PlaceSuggestion | None = None
    idea_id: uuid.UUID | None = None

    @model_validator(mode="after")
    def check_single_source(self) -> "AddActivityRequest":
        sources = [s for s in (self.template, self.suggestion, self.idea_id) if s is not None]
        if len(sources) != 1:
            raise ValueError("provide exactly one of template, suggestion or idea_id")
        return self


class ReorderRequest(BaseModel):
    """Request body for reordering within a segment."""

    from_index: int
    to_index: int


class ReorderResponse(BaseModel):
    moved: bool


class ToggleDayResponse(BaseModel):
    day_id: uuid.UUID
    expanded: bool


class NotesRequest(BaseModel):
    notes: str


class NotesResponse(BaseModel):
    updated: bool
    notes: str


class LinkIdeasRequest(BaseModel):
    idea_ids: list[uuid.UUID] = Field(..., min_length=1)


class LinkIdeasResponse(BaseModel):
    linked: int


def open_itinerary(services: Services, trip_id: uuid.UUID) -> ItineraryStore:
    """Loaded store for a trip; 404 for unknown trips, 422 when days cannot be generated."""
    trip = get_trip_or_404(services, trip_id)
    try:
        return services.itineraries.open(trip)
    except ConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e


@router.get("/itinerary", response_model=ItineraryResponse)
async def get_itinerary(
    trip_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> ItineraryResponse:
    """Days of the trip, generated on first access."""
    store = open_itinerary(services, trip_id)
    return ItineraryResponse(
        trip_id=trip_id,
        days=store.days,
        expanded_day_ids=sorted(store.expanded_days, key=str),
        linked_ideas=store.linked_ideas,
    )


@router.post("/itinerary/days/{day_id}/toggle", response_model=ToggleDayResponse)
async def toggle_day(
    trip_id: uuid.UUID,
    day_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> ToggleDayResponse:
    store = open_itinerary(services, trip_id)
    return ToggleDayResponse(day_id=day_id, expanded=store.toggle_day_expanded(day_id))


@router.post(
    "/itinerary/days/{day_id}/activities",
    response_model=Activity,
    status_code=status.HTTP_201_CREATED,
)
async def add_activity(
    trip_id: uuid.UUID,
    day_id: uuid.UUID,
    request: AddActivityRequest,
    services: Annotated[Services, Depends(get_services)],
) -> Activity:
    """Append an activity to a day segment, enriching it with coordinates when possible."""
    store = open_itinerary(services, trip_id)

    template = request.template
    if request.idea_id is not None:
        idea = services.ideas.get_idea(request.idea_id)
        if idea is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Idea not found")
        template = template_from_idea(idea)
    elif request.suggestion is not None:
        template = template_from_suggestion(request.suggestion)

    if template is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Missing activity source"
        )

    activity = await store.add_activity(day_id, request.time_of_day, template)
    if activity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Day not found")
    return activity


@router.delete(
    "/itinerary/days/{day_id}/activities/{activity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_activity(
    trip_id: uuid.UUID,
    day_id: uuid.UUID,
    activity_id: uuid.UUID,
    time_of_day: Annotated[TimeOfDay, Query()],
    services: Annotated[Services, Depends(get_services)],
) -> Response:
    """Remove an activity. Unknown days or activities are not an error."""
    store = open_itinerary(services, trip_id)
    await store.remove_activity(day_id, activity_id, time_of_day)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/itinerary/days/{day_id}/segments/{time_of_day}/reorder",
    response_model=ReorderResponse,
)
async def reorder_activities(
    trip_id: uuid.UUID,
    day_id: uuid.UUID,
    time_of_day: TimeOfDay,
    request: ReorderRequest,
    services: Annotated[Services, Depends(get_services)],
) -> ReorderResponse:
    """Move an activity within one segment; stale indices are ignored."""
    store = open_itinerary(services, trip_id)
    moved = await store.reorder_activities(
        day_id, time_of_day, request.from_index, request.to_index
    )
    return ReorderResponse(moved=moved)


@router.put("/notes", response_model=NotesResponse)
async def update_notes(
    trip_id: uuid.UUID,
    request: NotesRequest,
    services: Annotated[Services, Depends(get_services)],
) -> NotesResponse:
    """Commit notes edited locally by the client."""
    store = open_itinerary(services, trip_id)
    updated = store.update_notes(request.notes)
    return NotesResponse(updated=updated, notes=store.trip.notes)


@router.get("/ideas", response_model=list[Idea])
async def list_linked_ideas(
    trip_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> list[Idea]:
    return open_itinerary(services, trip_id).linked_ideas


@router.post("/ideas", response_model=LinkIdeasResponse)
async def link_ideas(
    trip_id: uuid.UUID,
    request: LinkIdeasRequest,
    services: Annotated[Services, Depends(get_services)],
) -> LinkIdeasResponse:
    """Link ideas picked by the client's selection flow."""
    store = open_itinerary(services, trip_id)

    ideas = []
    for idea_id in request.idea_ids:
        idea = services.ideas.get_idea(idea_id)
        if idea is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=f"Idea {idea_id} not found"
            )
        ideas.append(idea)

    return LinkIdeasResponse(linked=store.link_ideas(ideas))


@router.delete("/ideas/{idea_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unlink_idea(
    trip_id: uuid.UUID,
    idea_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> Response:
    open_itinerary(services, trip_id).unlink_idea(idea_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
