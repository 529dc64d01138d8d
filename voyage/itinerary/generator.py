"""Day-range generation for a trip's itinerary."""

import uuid
from datetime import date, timedelta

from voyage.errors import EmptyCityListError, InvalidDateRangeError
from voyage.models.itinerary import TripDay
from voyage.models.trip import Trip


def city_index_for_offset(offset: int, total_days: int, city_count: int) -> int:
    """Index of the city assigned to the day at ``offset``.

    Days are split into contiguous, roughly equal city blocks; the result is
    non-decreasing in ``offset``.
    """
    return min(city_count - 1, (offset * city_count) // total_days)


def generate_days(
    trip_id: uuid.UUID,
    start_date: date,
    end_date: date,
    cities: list[str],
) -> list[TripDay]:
    """Generate one empty day per calendar date in ``[start_date, end_date]``.

    Args:
        trip_id: Owning trip
        start_date: First day (inclusive)
        end_date: Last day (inclusive)
        cities: Ordered, non-empty list of city names

    Returns:
        Days sorted by date ascending

    Raises:
        InvalidDateRangeError: end_date precedes start_date
        EmptyCityListError: no cities to assign
    """
    if end_date < start_date:
        raise InvalidDateRangeError(f"end date {end_date} precedes start date {start_date}")
    if not cities:
        raise EmptyCityListError(f"trip {trip_id} has no cities to assign to its days")

    total_days = (end_date - start_date).days + 1

    days = []
    for offset in range(total_days):
        city = cities[city_index_for_offset(offset, total_days, len(cities))]
        days.append(TripDay.empty(trip_id, start_date + timedelta(days=offset), city))

    return days


def generate_days_for_trip(trip: Trip) -> list[TripDay]:
    """Generate the empty day list spanning a trip."""
    return generate_days(trip.id, trip.start_date, trip.end_date, trip.cities)


def reconcile_days(trip: Trip, existing: list[TripDay]) -> list[TripDay]:
    """Fit an existing day list to a trip whose dates or cities changed.

    Days inside the new range keep their id and activities; dates outside it
    are dropped and uncovered dates get fresh empty days. Every day gets the
    city the generator would assign to its date.
    """
    fresh = generate_days_for_trip(trip)
    by_date = {day.date: day for day in existing}

    days = []
    for generated in fresh:
        kept = by_date.get(generated.date)
        if kept is None:
            days.append(generated)
        else:
            days.append(kept.model_copy(update={"city": generated.city}))
    return days
