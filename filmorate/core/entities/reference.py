"""
Reference entities attached to films.

The MPA rating and the genres of a film are opaque pass-through data:
no business rule depends on them. Both catalogs are read-only and seeded
with the default values below.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Mpa:
    """
    Rating classification (Motion Picture Association).

    Attributes:
        id: Catalog ID
        name: Classification label (G, PG, PG-13, R, NC-17)
    """

    id: int
    name: Optional[str] = None


@dataclass(frozen=True)
class Genre:
    """
    Film genre tag.

    Attributes:
        id: Catalog ID
        name: Genre label
    """

    id: int
    name: Optional[str] = None


MPA_RATINGS: tuple[Mpa, ...] = (
    Mpa(1, "G"),
    Mpa(2, "PG"),
    Mpa(3, "PG-13"),
    Mpa(4, "R"),
    Mpa(5, "NC-17"),
)

GENRES: tuple[Genre, ...] = (
    Genre(1, "Comédie"),
    Genre(2, "Drame"),
    Genre(3, "Animation"),
    Genre(4, "Thriller"),
    Genre(5, "Documentaire"),
    Genre(6, "Action"),
)


def unique_genres(genres: tuple[Genre, ...]) -> tuple[Genre, ...]:
    """Supprime les genres en double (meme ID) en gardant le premier."""
    seen: set[int] = set()
    result = []
    for genre in genres:
        if genre.id not in seen:
            seen.add(genre.id)
            result.append(genre)
    return tuple(result)
