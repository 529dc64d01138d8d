"""Dev seed data: sample trips, ideas and boards."""

from datetime import date, timedelta

from voyage.models.ideas import Board, Idea
from voyage.models.trip import Trip
from voyage.services.ideas import IdeaRepository


def _photo(n: int) -> str:
    return f"https://picsum.photos/300/200?random={n}"


def sample_trips(today: date | None = None) -> list[Trip]:
    """Upcoming and completed sample trips, dated relative to ``today``."""
    today = today or date.today()

    def offset(days: int) -> date:
        return today + timedelta(days=days)

    return [
        Trip(
            name="Summer Vacation",
            destination="Greece Islands",
            start_date=offset(60),
            end_date=offset(70),
            notes="Remember to pack sunscreen!",
            cities=["Santorini", "Athens", "Mykonos"],
            countries=["Greece"],
            ideas_count=5,
        ),
        Trip(
            name="Business Trip",
            destination="Washington DC",
            start_date=offset(10),
            end_date=offset(12),
            notes="Conference at Grand Hyatt",
            cities=["Washington"],
            countries=["United States"],
            ideas_count=2,
        ),
        Trip(
            name="Winter Getaway",
            destination="Swiss Alps",
            start_date=offset(-40),
            end_date=offset(-35),
            notes="Amazing ski trip!",
            is_completed=True,
            cities=["Zermatt"],
            countries=["Switzerland"],
            ideas_count=1,
        ),
        Trip(
            name="Weekend Escape",
            destination="Napa Valley",
            start_date=offset(-15),
            end_date=offset(-13),
            notes="Wine tasting tour",
            is_completed=True,
            cities=["Napa"],
            countries=["United States"],
        ),
        Trip(
            name="European Tour",
            destination="Europe",
            start_date=offset(-90),
            end_date=offset(-75),
            notes="Amazing journey through multiple countries",
            is_completed=True,
            cities=["Amsterdam", "Paris", "Barcelona", "Rome"],
            countries=["Netherlands", "France", "Spain", "Italy"],
            ideas_count=12,
        ),
    ]


def sample_ideas() -> list[Idea]:
    return [
        Idea(title="Paris Cafe", tag="Food", image_url=_photo(1), city="Paris",
             country="France", activity_type="Food", source="Instagram",
             place_id="fx_cafe_marais"),
        Idea(title="Tokyo Street", tag="Urban", image_url=_photo(2), city="Tokyo",
             country="Japan", activity_type="Urban", source="TikTok"),
        Idea(title="Mountain Hike", tag="Adventure", image_url=_photo(3), city="Interlaken",
             country="Switzerland", activity_type="Adventure", source="YouTube"),
        Idea(title="Beach Sunset", tag="Relax", image_url=_photo(4), city="Bali",
             country="Indonesia", activity_type="Relax", source="Friend"),
        Idea(title="Italian Villa", tag="Accommodation", image_url=_photo(5), city="Tuscany",
             country="Italy", activity_type="Accommodation", source="Blog"),
        Idea(title="Traditional Cuisine", tag="Food", image_url=_photo(6), city="Bangkok",
             country="Thailand", activity_type="Food", source="Reddit"),
        Idea(title="Hidden Waterfall", tag="Nature", image_url=_photo(7), city="Ubud",
             country="Indonesia", activity_type="Nature", source="Pinterest"),
        Idea(title="Local Market", tag="Culture", image_url=_photo(8), city="Marrakech",
             country="Morocco", activity_type="Culture", source="Instagram"),
    ]


def unorganized_ideas() -> list[Idea]:
    return [
        Idea(title="Scenic Route", tag="Road Trip", image_url=_photo(9), city="Amalfi Coast",
             country="Italy", activity_type="Road Trip", source="Magazine"),
        Idea(title="Historic Museum", tag="Culture", image_url=_photo(10), city="London",
             country="UK", activity_type="Culture", source="Website"),
        Idea(title="Street Food", tag="Food", image_url=_photo(11), city="Hanoi",
             country="Vietnam", activity_type="Food", source="TikTok"),
    ]


def sample_boards() -> list[Board]:
    def avatars(*ids: int) -> list[str]:
        return [f"https://i.pravatar.cc/150?img={i}" for i in ids]

    return [
        Board(title="Japan 2025", ideas_count=10,
              preview_image_urls=[_photo(n) for n in range(21, 25)],
              collaborator_image_urls=avatars(1, 2)),
        Board(title="European Adventure", ideas_count=6,
              preview_image_urls=[_photo(n) for n in range(31, 34)],
              collaborator_image_urls=avatars(3, 4, 5)),
        Board(title="Weekend Getaways", ideas_count=4,
              preview_image_urls=[_photo(n) for n in range(41, 43)],
              collaborator_image_urls=avatars(6)),
        Board(title="Mornington 2024", ideas_count=3,
              preview_image_urls=[_photo(n) for n in range(51, 55)],
              collaborator_image_urls=avatars(7, 8)),
    ]


def seed_idea_repository(trips: list[Trip]) -> IdeaRepository:
    """Idea repository with sample data; the first sample ideas link to the first trip."""
    ideas = sample_ideas()
    if trips:
        for idea in ideas[:3]:
            idea.trip_ids.append(trips[0].id)
    return IdeaRepository(boards=sample_boards(), ideas=ideas, unorganized=unorganized_ideas())
