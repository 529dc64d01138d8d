"""Trip endpoints - list, create, edit, delete, favorite and complete."""

import uuid
from datetime import date
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field, model_validator

from voyage.api.deps import Services, get_services
from voyage.errors import ConfigurationError
from voyage.itinerary.generator import reconcile_days
from voyage.models.trip import Trip

router = APIRouter(prefix="/trips", tags=["trips"])


class CreateTripRequest(BaseModel):
    """Request body for POST /trips."""

    name: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    cities: list[str] = Field(..., min_length=1)
    countries: list[str] = Field(..., min_length=1)
    notes: str = ""
    collaborators: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_date_order(self) -> "CreateTripRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not precede start_date")
        return self


class UpdateTripRequest(BaseModel):
    """Request body for PATCH /trips/{trip_id}; omitted fields are unchanged."""

    name: str | None = Field(None, min_length=1)
    destination: str | None = Field(None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None
    cities: list[str] | None = Field(None, min_length=1)
    countries: list[str] | None = Field(None, min_length=1)
    notes: str | None = None
    collaborators: list[str] | None = None


class TripResponse(BaseModel):
    """Trip plus its display helpers."""

    trip: Trip
    location_display_text: str
    date_range_text: str
    day_count: int

    @classmethod
    def from_trip(cls, trip: Trip) -> "TripResponse":
        return cls(
            trip=trip,
            location_display_text=trip.location_display_text,
            date_range_text=trip.date_range_text,
            day_count=trip.day_count,
        )


def get_trip_or_404(services: Services, trip_id: uuid.UUID) -> Trip:
    trip = services.trips.get_trip(trip_id)
    if trip is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")
    return trip


@router.get("", response_model=list[TripResponse])
async def list_trips(
    services: Annotated[Services, Depends(get_services)],
    state: Annotated[Literal["all", "upcoming", "completed"], Query()] = "all",
) -> list[TripResponse]:
    """List trips, optionally only upcoming or completed ones."""
    if state == "upcoming":
        trips = services.trips.upcoming_trips
    elif state == "completed":
        trips = services.trips.completed_trips
    else:
        trips = services.trips.trips
    return [TripResponse.from_trip(t) for t in trips]


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    request: CreateTripRequest,
    services: Annotated[Services, Depends(get_services)],
) -> TripResponse:
    """Create a trip. Its days are generated when the itinerary is first opened."""
    trip = Trip(**request.model_dump())
    services.trips.add_trip(trip)
    return TripResponse.from_trip(trip)


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    trip_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> TripResponse:
    return TripResponse.from_trip(get_trip_or_404(services, trip_id))


@router.patch("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: uuid.UUID,
    request: UpdateTripRequest,
    services: Annotated[Services, Depends(get_services)],
) -> TripResponse:
    """Edit a trip; stored days are fitted to changed dates or cities."""
    current = get_trip_or_404(services, trip_id)

    changes = request.model_dump(exclude_none=True)
    merged = current.model_dump()
    merged.update(changes)
    if merged["end_date"] < merged["start_date"]:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="end_date must not precede start_date",
        )
    updated = Trip(**merged)

    reshaped = {"start_date", "end_date", "cities"} & changes.keys()
    store = services.itineraries.get(trip_id)
    try:
        if reshaped and store is not None and not store.is_closed:
            store.apply_trip_edit(updated)
        elif reshaped:
            stored_days = services.days.get_days(trip_id)
            if stored_days:
                services.days.save_days(trip_id, reconcile_days(updated, stored_days))
        elif store is not None:
            store.trip = updated
    except ConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    services.trips.update_trip(updated)
    return TripResponse.from_trip(updated)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    trip_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> Response:
    """Delete a trip together with its stored days."""
    get_trip_or_404(services, trip_id)
    services.itineraries.close(trip_id)
    services.days.delete_days(trip_id)
    services.trips.delete_trip(trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{trip_id}/favorite", response_model=TripResponse)
async def toggle_favorite(
    trip_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> TripResponse:
    trip = services.trips.toggle_favorite(trip_id)
    if trip is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")
    return TripResponse.from_trip(trip)


@router.post("/{trip_id}/complete", response_model=TripResponse)
async def mark_completed(
    trip_id: uuid.UUID,
    services: Annotated[Services, Depends(get_services)],
) -> TripResponse:
    trip = services.trips.mark_as_completed(trip_id)
    if trip is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")
    return TripResponse.from_trip(trip)
