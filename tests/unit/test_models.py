"""Tests for trip, day, activity and idea models."""

import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from voyage.models import Activity, ActivityTemplate, DaySegments, Idea, TimeOfDay, Trip, TripDay


def make_trip(**overrides: object) -> Trip:
    fields: dict[str, object] = {
        "name": "Trip",
        "start_date": date(2025, 6, 1),
        "end_date": date(2025, 6, 3),
        "cities": ["Paris"],
        "countries": ["France"],
    }
    fields.update(overrides)
    return Trip(**fields)  # type: ignore[arg-type]


class TestTrip:
    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_trip(start_date=date(2025, 6, 3), end_date=date(2025, 6, 1))

    def test_single_day_trip_allowed(self) -> None:
        trip = make_trip(end_date=date(2025, 6, 1))

        assert trip.day_count == 1

    def test_location_text_single_city(self) -> None:
        assert make_trip().location_display_text == "Paris, France"

    def test_location_text_many_cities(self) -> None:
        trip = make_trip(cities=["Santorini", "Athens", "Mykonos"], countries=["Greece"])

        assert trip.location_display_text == "3 cities in 1 country"

    def test_location_text_many_countries(self) -> None:
        trip = make_trip(
            cities=["Amsterdam", "Paris"], countries=["Netherlands", "France"]
        )

        assert trip.location_display_text == "2 cities in 2 countries"

    def test_first_city_and_country(self) -> None:
        trip = make_trip(cities=[], countries=[])

        assert trip.city == ""
        assert trip.country == ""

    def test_date_range_text(self) -> None:
        assert make_trip().date_range_text == "Jun 1, 2025 – Jun 3, 2025"

    def test_ids_are_unique(self) -> None:
        assert make_trip().id != make_trip().id


class TestActivity:
    def test_coordinates_must_be_paired(self) -> None:
        with pytest.raises(ValidationError):
            Activity(title="Half", latitude=48.0)

    def test_time_of_day_is_immutable(self) -> None:
        activity = Activity(title="Fixed", time_of_day=TimeOfDay.evening)

        with pytest.raises(ValidationError):
            activity.time_of_day = TimeOfDay.morning  # type: ignore[misc]

    def test_time_of_day_values(self) -> None:
        assert [t.value for t in TimeOfDay] == ["Morning", "Afternoon", "Evening"]


class TestActivityTemplate:
    def test_needs_enrichment_only_with_place_and_no_coordinates(self) -> None:
        assert ActivityTemplate(title="A", place_id="p").needs_enrichment is True
        assert ActivityTemplate(title="A").needs_enrichment is False
        assert (
            ActivityTemplate(title="A", place_id="p", latitude=1, longitude=2).needs_enrichment
            is False
        )

    def test_title_required(self) -> None:
        with pytest.raises(ValidationError):
            ActivityTemplate(title="")


class TestTripDay:
    def test_empty_day(self) -> None:
        day = TripDay.empty(uuid.uuid4(), date(2025, 6, 1), "Paris")

        assert day.is_empty
        assert day.segments.activity_count == 0
        assert day.formatted_date == "Sun, Jun 1"

    def test_segment_accessor_returns_live_list(self) -> None:
        segments = DaySegments()
        activity = Activity(title="Dinner", time_of_day=TimeOfDay.evening)

        segments.segment(TimeOfDay.evening).append(activity)

        assert segments.evening == [activity]
        assert not segments.is_empty


class TestIdea:
    def test_location_defaults_to_city_and_country(self) -> None:
        assert Idea(title="Cafe", city="Paris", country="France").location == "Paris, France"

    def test_explicit_location_kept(self) -> None:
        assert Idea(title="Cafe", city="Paris", location="Le Marais").location == "Le Marais"

    def test_trip_count(self) -> None:
        assert Idea(title="Cafe", trip_ids=[uuid.uuid4(), uuid.uuid4()]).trip_count == 2
