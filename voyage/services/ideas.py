"""Idea and board repository.

Constructed explicitly and passed to whatever needs it; there is no
process-wide board store.
"""

import uuid

from voyage.models.ideas import Board, Idea

SOURCES = ["Instagram", "TikTok", "YouTube", "Friend", "Blog", "Pinterest"]

THEME_DETAILS: list[tuple[str, str, str]] = [
    ("japan", "Culture", "Japan"),
    ("europe", "Adventure", "France"),
    ("weekend", "Relax", "Italy"),
    ("mornington", "Nature", "Australia"),
]
DEFAULT_THEME_DETAILS = ("Food", "Thailand")

CITIES_BY_COUNTRY: dict[str, list[str]] = {
    "Japan": ["Tokyo", "Kyoto", "Osaka", "Hiroshima", "Nara"],
    "France": ["Paris", "Nice", "Lyon", "Marseille", "Bordeaux"],
    "Italy": ["Rome", "Venice", "Florence", "Milan", "Naples"],
    "Australia": ["Melbourne", "Sydney", "Perth", "Brisbane", "Adelaide"],
    "Thailand": ["Bangkok", "Chiang Mai", "Phuket", "Krabi", "Pattaya"],
}
DEFAULT_CITIES = ["City 1", "City 2", "City 3", "City 4", "City 5"]

POPULAR_FILTERS = ["Food", "Nature", "Adventure", "Japan", "Italy", "Instagram", "Urban", "Culture"]


def theme_details(theme: str) -> tuple[str, str]:
    """Activity type and country matching a board title."""
    lowered = theme.lower()
    for keyword, activity_type, country in THEME_DETAILS:
        if keyword in lowered:
            return activity_type, country
    return DEFAULT_THEME_DETAILS


def ideas_for_theme(board_id: uuid.UUID, count: int, theme: str) -> list[Idea]:
    """Generate ``count`` themed ideas belonging to a board."""
    activity_type, country = theme_details(theme)
    cities = CITIES_BY_COUNTRY.get(country, DEFAULT_CITIES)

    return [
        Idea(
            title=f"{theme} Idea {i + 1}",
            tag=activity_type,
            image_url=f"https://picsum.photos/300/200?random={100 + i}",
            city=cities[i % len(cities)],
            country=country,
            activity_type=activity_type,
            source=SOURCES[i % len(SOURCES)],
            board_ids=[board_id],
        )
        for i in range(count)
    ]


class IdeaRepository:
    """In-memory store of boards, board ideas and unorganized ideas."""

    def __init__(
        self,
        boards: list[Board] | None = None,
        ideas: list[Idea] | None = None,
        unorganized: list[Idea] | None = None,
    ) -> None:
        self._boards: list[Board] = list(boards or [])
        self._ideas: list[Idea] = list(ideas or [])
        self._unorganized: list[Idea] = list(unorganized or [])
        self._ideas_by_board: dict[uuid.UUID, list[Idea]] = {}

    @property
    def boards(self) -> list[Board]:
        return list(self._boards)

    @property
    def ideas(self) -> list[Idea]:
        return list(self._ideas)

    @property
    def unorganized(self) -> list[Idea]:
        return list(self._unorganized)

    def add_board(self, board: Board) -> None:
        self._boards.append(board)

    def get_board(self, board_id: uuid.UUID) -> Board | None:
        return next((b for b in self._boards if b.id == board_id), None)

    def get_idea(self, idea_id: uuid.UUID) -> Idea | None:
        for idea in self._all_ideas():
            if idea.id == idea_id:
                return idea
        return None

    def ideas_for_board(self, board_id: uuid.UUID) -> list[Idea]:
        """Ideas of a board, generated from its title on first access and cached."""
        cached = self._ideas_by_board.get(board_id)
        if cached is not None:
            return list(cached)

        board = self.get_board(board_id)
        theme = board.title if board else "Travel"
        count = board.ideas_count if board else 5

        ideas = ideas_for_theme(board_id, count, theme)
        self._ideas_by_board[board_id] = ideas
        return list(ideas)

    def ideas_for_trip(self, trip_id: uuid.UUID) -> list[Idea]:
        """Ideas that reference the trip."""
        return [idea for idea in self._all_ideas() if trip_id in idea.trip_ids]

    def link_to_trip(self, idea_id: uuid.UUID, trip_id: uuid.UUID) -> bool:
        """Record that an idea belongs to a trip; False for unknown or already linked ideas."""
        idea = self.get_idea(idea_id)
        if idea is None or trip_id in idea.trip_ids:
            return False
        idea.trip_ids.append(trip_id)
        return True

    def unlink_from_trip(self, idea_id: uuid.UUID, trip_id: uuid.UUID) -> bool:
        idea = self.get_idea(idea_id)
        if idea is None or trip_id not in idea.trip_ids:
            return False
        idea.trip_ids.remove(trip_id)
        return True

    def all_tags(self) -> list[str]:
        """Sorted unique filter values across saved and unorganized ideas."""
        tags: set[str] = set()
        for idea in self._ideas + self._unorganized:
            tags.update(
                value
                for value in (idea.tag, idea.city, idea.country, idea.activity_type, idea.source)
                if value
            )
        return sorted(tags)

    def popular_filters(self) -> list[str]:
        return list(POPULAR_FILTERS)

    def _all_ideas(self) -> list[Idea]:
        board_ideas = [idea for ideas in self._ideas_by_board.values() for idea in ideas]
        return self._ideas + self._unorganized + board_ideas
