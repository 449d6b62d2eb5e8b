"""
Module de persistance SQLite pour Filmorate.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations SQLModel des ports de stockage

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from filmorate.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables et les catalogues si necessaire
    session = next(get_session())
"""

from filmorate.infrastructure.persistence.database import (
    get_engine,
    get_session,
    init_db,
    seed_reference_data,
)
from filmorate.infrastructure.persistence.models import (
    FilmGenreModel,
    FilmLikeModel,
    FilmModel,
    FriendshipModel,
    GenreModel,
    MpaModel,
    UserModel,
)

__all__ = [
    "get_engine",
    "get_session",
    "init_db",
    "seed_reference_data",
    "FilmModel",
    "UserModel",
    "FilmLikeModel",
    "FriendshipModel",
    "FilmGenreModel",
    "MpaModel",
    "GenreModel",
]
