"""
Film entity.

A film of the catalog with its descriptive fields and the set of users
who liked it.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from filmorate.core.entities.reference import Genre, Mpa


@dataclass
class Film:
    """
    Film of the catalog.

    Attributes:
        id: Storage ID, assigned on creation
        name: Title (non blank)
        description: Short description (200 characters max)
        release_date: Release date (not before 1895-12-28)
        duration: Runtime in minutes
        mpa: Rating classification (pass-through)
        genres: Tuple of genres (pass-through)
        liked_by: IDs of the users who liked the film
    """

    id: Optional[int] = None
    name: str = ""
    description: str = ""
    release_date: Optional[date] = None
    duration: int = 0
    mpa: Optional[Mpa] = None
    genres: tuple[Genre, ...] = ()
    liked_by: frozenset[int] = field(default_factory=frozenset)

    @property
    def likes_count(self) -> int:
        """Nombre d'utilisateurs ayant aime le film."""
        return len(self.liked_by)
