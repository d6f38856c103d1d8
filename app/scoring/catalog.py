from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Category = Literal["movie", "music"]


@dataclass(frozen=True)
class CandidateItem:
    id: int
    category: Category
    title: str
    genre: str
    year: int
    rating: float | None = None
    artist: str | None = None

    def describe(self) -> str:
        parts = [self.title, self.genre]
        if self.artist:
            parts.append(self.artist)
        return " ".join(parts)


MOVIES: tuple[CandidateItem, ...] = (
    CandidateItem(id=1, category="movie", title="Inception", genre="Sci-Fi", rating=8.8, year=2010),
    CandidateItem(id=2, category="movie", title="The Matrix", genre="Sci-Fi", rating=8.7, year=1999),
    CandidateItem(id=3, category="movie", title="Interstellar", genre="Sci-Fi", rating=8.6, year=2014),
    CandidateItem(id=4, category="movie", title="The Dark Knight", genre="Action", rating=9.0, year=2008),
    CandidateItem(id=5, category="movie", title="Pulp Fiction", genre="Crime", rating=8.9, year=1994),
)

MUSIC: tuple[CandidateItem, ...] = (
    CandidateItem(id=101, category="music", title="Bohemian Rhapsody", artist="Queen", genre="Rock", year=1975),
    CandidateItem(id=102, category="music", title="Imagine", artist="John Lennon", genre="Pop", year=1971),
    CandidateItem(id=103, category="music", title="Hotel California", artist="Eagles", genre="Rock", year=1976),
    CandidateItem(id=104, category="music", title="Stairway to Heaven", artist="Led Zeppelin", genre="Rock", year=1971),
    CandidateItem(id=105, category="music", title="Billie Jean", artist="Michael Jackson", genre="Pop", year=1983),
)


@dataclass(frozen=True)
class Catalog:
    """Read-only candidate pools keyed by category."""

    items: dict[str, tuple[CandidateItem, ...]] = field(
        default_factory=lambda: {"movie": MOVIES, "music": MUSIC}
    )

    def for_category(self, category: str) -> tuple[CandidateItem, ...]:
        return self.items.get(category, ())

    def find(self, item_id: int) -> CandidateItem | None:
        for pool in self.items.values():
            for item in pool:
                if item.id == item_id:
                    return item
        return None

    def __len__(self) -> int:
        return sum(len(pool) for pool in self.items.values())
