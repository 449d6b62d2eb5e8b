"""
Modeles SQLModel pour la base de donnees Filmorate.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- films: Films du catalogue
- users: Utilisateurs
- film_likes: Association like (film_id, user_id)
- friendships: Association amitie, une ligne par paire (user_id < friend_id)
- mpa: Catalogue des classifications MPA
- genres: Catalogue des genres
- film_genres: Association film <-> genre

Les tables films et users utilisent AUTOINCREMENT : un ID n'est jamais
reattribue, meme apres suppression d'une ligne.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


class MpaModel(SQLModel, table=True):
    """Classification MPA (G, PG, PG-13, R, NC-17)."""

    __tablename__ = "mpa"

    id: int = Field(primary_key=True)
    name: str = Field(unique=True)


class GenreModel(SQLModel, table=True):
    """Genre de film."""

    __tablename__ = "genres"

    id: int = Field(primary_key=True)
    name: str = Field(unique=True)


class FilmModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    Les likes et les genres sont stockes dans des tables d'association.
    """

    __tablename__ = "films"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: str = ""
    release_date: date
    duration: int = 0
    mpa_id: Optional[int] = Field(default=None, foreign_key="mpa.id")


class UserModel(SQLModel, table=True):
    """Modele representant un utilisateur dans la base de donnees."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(index=True)
    login: str = Field(index=True)
    name: str
    birthday: date


class FilmGenreModel(SQLModel, table=True):
    """Association film <-> genre, position conserve l'ordre de saisie."""

    __tablename__ = "film_genres"

    film_id: int = Field(foreign_key="films.id", primary_key=True)
    genre_id: int = Field(primary_key=True)
    position: int = 0


class FilmLikeModel(SQLModel, table=True):
    """Like d'un utilisateur sur un film. La cle composite interdit les doublons."""

    __tablename__ = "film_likes"

    film_id: int = Field(foreign_key="films.id", primary_key=True)
    user_id: int = Field(primary_key=True, index=True)


class FriendshipModel(SQLModel, table=True):
    """
    Amitie entre deux utilisateurs.

    Une seule ligne par paire, avec user_id < friend_id : la relation est
    symetrique par construction.
    """

    __tablename__ = "friendships"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    friend_id: int = Field(foreign_key="users.id", primary_key=True, index=True)
