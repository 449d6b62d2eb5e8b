"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
Relationship sets (likes, friends) are immutable frozensets: they are only
replaced by the storage layer, never mutated in place by callers.

Exports:
- Film: A catalog film with its likes
- User: A catalog user with its friends
- Mpa: Rating classification attached to a film
- Genre: Genre tag attached to a film
"""

from filmorate.core.entities.film import Film
from filmorate.core.entities.reference import (
    GENRES,
    MPA_RATINGS,
    Genre,
    Mpa,
    unique_genres,
)
from filmorate.core.entities.user import User

__all__ = [
    "Film",
    "User",
    "Mpa",
    "Genre",
    "MPA_RATINGS",
    "GENRES",
    "unique_genres",
]
