"""Catalogues MPA et genres en memoire, initialises avec les valeurs par defaut."""

from typing import Optional

from filmorate.core.entities import GENRES, MPA_RATINGS, Genre, Mpa
from filmorate.core.ports.repositories import IGenreRepository, IMpaRepository


class InMemoryMpaRepository(IMpaRepository):
    """Catalogue MPA en lecture seule."""

    def __init__(self, ratings: tuple[Mpa, ...] = MPA_RATINGS) -> None:
        self._ratings = {mpa.id: mpa for mpa in ratings}

    def get_all(self) -> list[Mpa]:
        return [self._ratings[key] for key in sorted(self._ratings)]

    def get_by_id(self, mpa_id: int) -> Optional[Mpa]:
        return self._ratings.get(mpa_id)


class InMemoryGenreRepository(IGenreRepository):
    """Catalogue des genres en lecture seule."""

    def __init__(self, genres: tuple[Genre, ...] = GENRES) -> None:
        self._genres = {genre.id: genre for genre in genres}

    def get_all(self) -> list[Genre]:
        return [self._genres[key] for key in sorted(self._genres)]

    def get_by_id(self, genre_id: int) -> Optional[Genre]:
        return self._genres.get(genre_id)
