"""Models package - re-exports for convenience."""

from voyage.models.common import Geo, TimeOfDay
from voyage.models.ideas import Board, Idea
from voyage.models.itinerary import Activity, DaySegments, TripDay
from voyage.models.places import ActivityTemplate, LookupResult, PlaceDetails, PlaceSuggestion
from voyage.models.trip import Trip

__all__ = [
    # Common
    "Geo",
    "TimeOfDay",
    # Trip
    "Trip",
    # Itinerary
    "TripDay",
    "DaySegments",
    "Activity",
    # Ideas
    "Idea",
    "Board",
    # Places
    "PlaceSuggestion",
    "PlaceDetails",
    "LookupResult",
    "ActivityTemplate",
]
