"""
Implementation en memoire du repository Film.

Les likes sont stockes a part, par film, comme ensemble d'IDs utilisateur :
l'entite retournee porte une copie figee (frozenset) de cet ensemble.
"""

import threading
from dataclasses import replace
from typing import Optional

from loguru import logger

from filmorate.core.entities import Film, unique_genres
from filmorate.core.exceptions import NotFoundError
from filmorate.core.ports.repositories import IFilmRepository


class InMemoryFilmRepository(IFilmRepository):
    """Repository Film dans la memoire du processus."""

    def __init__(self) -> None:
        self._films: dict[int, Film] = {}
        self._likes: dict[int, set[int]] = {}
        self._lock = threading.RLock()

    def _next_id(self) -> int:
        return max(self._films, default=0) + 1

    def _snapshot(self, film: Film) -> Film:
        return replace(film, liked_by=frozenset(self._likes.get(film.id, ())))

    def get_by_id(self, film_id: int) -> Optional[Film]:
        """Recupere un film par son ID."""
        with self._lock:
            film = self._films.get(film_id)
            return self._snapshot(film) if film else None

    def get_all(self) -> list[Film]:
        """Liste tous les films, par ID croissant."""
        with self._lock:
            return [self._snapshot(self._films[key]) for key in sorted(self._films)]

    def add(self, film: Film) -> Film:
        """Insere un film avec l'ID suivant."""
        with self._lock:
            stored = replace(
                film,
                id=self._next_id(),
                description=film.description or "",
                genres=unique_genres(film.genres),
                liked_by=frozenset(),
            )
            self._films[stored.id] = stored
            self._likes[stored.id] = set()
            logger.debug(f"Film stocke en memoire: id={stored.id}")
            return self._snapshot(stored)

    def update(self, film: Film) -> Film:
        """Remplace les champs d'un film existant, likes exceptes."""
        with self._lock:
            if film.id not in self._films:
                raise NotFoundError("film", film.id)
            stored = replace(
                film,
                description=film.description or "",
                genres=unique_genres(film.genres),
                liked_by=frozenset(),
            )
            self._films[film.id] = stored
            return self._snapshot(stored)

    def add_like(self, film_id: int, user_id: int) -> bool:
        """Enregistre un like (no-op si deja present)."""
        with self._lock:
            if film_id not in self._films:
                raise NotFoundError("film", film_id)
            likes = self._likes[film_id]
            if user_id in likes:
                return False
            likes.add(user_id)
            return True

    def remove_like(self, film_id: int, user_id: int) -> bool:
        """Supprime un like (no-op si absent)."""
        with self._lock:
            if film_id not in self._films:
                raise NotFoundError("film", film_id)
            likes = self._likes[film_id]
            if user_id not in likes:
                return False
            likes.remove(user_id)
            return True
