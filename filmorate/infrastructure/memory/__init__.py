"""
Implementations en memoire des repositories.

Chaque store est un dictionnaire indexe par ID, protege par un verrou
re-entrant : toutes les mutations (reservation d'ID comprise) sont
serialisees. Les entites retournees sont des copies, jamais les objets
stockes.
"""

from filmorate.infrastructure.memory.film_repository import InMemoryFilmRepository
from filmorate.infrastructure.memory.reference_repository import (
    InMemoryGenreRepository,
    InMemoryMpaRepository,
)
from filmorate.infrastructure.memory.user_repository import InMemoryUserRepository

__all__ = [
    "InMemoryFilmRepository",
    "InMemoryUserRepository",
    "InMemoryMpaRepository",
    "InMemoryGenreRepository",
]
