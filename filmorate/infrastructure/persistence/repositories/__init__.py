"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans filmorate/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from filmorate.infrastructure.persistence.repositories.film_repository import (
    SQLModelFilmRepository,
)
from filmorate.infrastructure.persistence.repositories.reference_repository import (
    SQLModelGenreRepository,
    SQLModelMpaRepository,
)
from filmorate.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = [
    "SQLModelFilmRepository",
    "SQLModelUserRepository",
    "SQLModelMpaRepository",
    "SQLModelGenreRepository",
]
