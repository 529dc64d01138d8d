"""Activity construction from search results, place details and saved ideas."""

from voyage.models.common import TimeOfDay
from voyage.models.ideas import Idea
from voyage.models.itinerary import Activity
from voyage.models.places import ActivityTemplate, PlaceDetails, PlaceSuggestion

PLACES_SOURCE = "Google Places"

# Ordered: the first rule with a matching tag wins
CATEGORY_RULES: list[tuple[frozenset[str], str]] = [
    (frozenset({"restaurant", "food"}), "Restaurant"),
    (frozenset({"cafe"}), "Cafe"),
    (frozenset({"museum"}), "Museum"),
    (frozenset({"park", "natural_feature"}), "Outdoor"),
    (frozenset({"tourist_attraction", "point_of_interest"}), "Attraction"),
    (frozenset({"lodging", "hotel"}), "Accommodation"),
    (frozenset({"shopping_mall", "store"}), "Shopping"),
    (frozenset({"bar", "night_club"}), "Nightlife"),
]


def determine_category(types: list[str] | None) -> str | None:
    """Map place type tags to one user-facing category.

    Falls back to the first tag capitalized; no tags gives None.
    """
    if not types:
        return None

    tags = set(types)
    for rule_tags, category in CATEGORY_RULES:
        if tags & rule_tags:
            return category

    return types[0].capitalize()


def template_from_suggestion(suggestion: PlaceSuggestion) -> ActivityTemplate:
    """Template from an autocomplete result; details must be fetched later."""
    return ActivityTemplate(
        title=suggestion.name,
        location=suggestion.address,
        source_type=PLACES_SOURCE,
        place_id=suggestion.id,
    )


def template_from_place_details(details: PlaceDetails) -> ActivityTemplate:
    """Template from a full place record."""
    return ActivityTemplate(
        title=details.name,
        location=details.formatted_address,
        source_type=PLACES_SOURCE,
        place_id=details.place_id,
        photo_reference=details.photo_reference,
        latitude=details.geo.lat,
        longitude=details.geo.lon,
        category=determine_category(details.types),
        rating=details.rating,
    )


def template_from_idea(idea: Idea) -> ActivityTemplate:
    """Template from a saved idea. Ideas carry no coordinates or rating."""
    return ActivityTemplate(
        title=idea.title,
        location=idea.location,
        source_type=idea.source,
        place_id=idea.place_id,
        idea_id=idea.id,
        photo_reference=idea.photo_reference,
        category=idea.activity_type or None,
    )


def merge_details(template: ActivityTemplate, details: PlaceDetails) -> ActivityTemplate:
    """Overlay enriched place details onto a template.

    Provenance (source type, idea reference) stays with the template; fields
    the details lack keep the template's values.
    """
    enriched = template_from_place_details(details)
    return template.model_copy(
        update={
            "title": template.title or enriched.title,
            "location": template.location or enriched.location,
            "photo_reference": enriched.photo_reference or template.photo_reference,
            "latitude": enriched.latitude,
            "longitude": enriched.longitude,
            "category": template.category or enriched.category,
            "rating": enriched.rating if enriched.rating is not None else template.rating,
        }
    )


def build_activity(template: ActivityTemplate, time_of_day: TimeOfDay) -> Activity:
    """Create a new activity with a fresh id from a template."""
    return Activity(
        title=template.title,
        location=template.location,
        source_type=template.source_type,
        place_id=template.place_id,
        idea_id=template.idea_id,
        photo_reference=template.photo_reference,
        latitude=template.latitude,
        longitude=template.longitude,
        category=template.category,
        rating=template.rating,
        time_of_day=time_of_day,
    )
