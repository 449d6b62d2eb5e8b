"""
Implementation SQLModel du repository Film.

Implemente l'interface IFilmRepository pour la persistance des films
dans la base de donnees SQLite via SQLModel.

Les likes sont des lignes (film_id, user_id) de film_likes ; la cle primaire
composite rend l'insertion d'un like existant impossible. Une insertion
concurrente qui viole cette cle est annulee et traitee comme un no-op.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from filmorate.core.entities import Film, Genre, Mpa, unique_genres
from filmorate.core.exceptions import NotFoundError
from filmorate.core.ports.repositories import IFilmRepository
from filmorate.infrastructure.persistence.models import (
    FilmGenreModel,
    FilmLikeModel,
    FilmModel,
    GenreModel,
    MpaModel,
)


class SQLModelFilmRepository(IFilmRepository):
    """
    Repository SQLModel pour les films.

    Implemente IFilmRepository avec conversion bidirectionnelle
    entre l'entite Film (domaine) et FilmModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _likes_of(self, film_id: int) -> frozenset[int]:
        statement = select(FilmLikeModel.user_id).where(FilmLikeModel.film_id == film_id)
        return frozenset(self._session.exec(statement).all())

    def _genres_of(self, film_id: int) -> tuple[Genre, ...]:
        statement = (
            select(FilmGenreModel.genre_id, GenreModel.name)
            .join(GenreModel, GenreModel.id == FilmGenreModel.genre_id, isouter=True)
            .where(FilmGenreModel.film_id == film_id)
            .order_by(FilmGenreModel.position)
        )
        return tuple(
            Genre(id=genre_id, name=name)
            for genre_id, name in self._session.exec(statement).all()
        )

    def _mpa_of(self, model: FilmModel) -> Optional[Mpa]:
        if model.mpa_id is None:
            return None
        mpa = self._session.get(MpaModel, model.mpa_id)
        return Mpa(id=model.mpa_id, name=mpa.name if mpa else None)

    def _to_entity(self, model: FilmModel) -> Film:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele FilmModel depuis la DB

        Retourne :
            L'entite Film correspondante, likes et genres inclus
        """
        return Film(
            id=model.id,
            name=model.name,
            description=model.description,
            release_date=model.release_date,
            duration=model.duration,
            mpa=self._mpa_of(model),
            genres=self._genres_of(model.id),
            liked_by=self._likes_of(model.id),
        )

    def _apply_fields(self, model: FilmModel, film: Film) -> None:
        model.name = film.name
        model.description = film.description or ""
        model.release_date = film.release_date
        model.duration = film.duration
        model.mpa_id = film.mpa.id if film.mpa else None

    def _replace_genres(self, film_id: int, genres: tuple[Genre, ...]) -> None:
        statement = select(FilmGenreModel).where(FilmGenreModel.film_id == film_id)
        for link in self._session.exec(statement).all():
            self._session.delete(link)
        self._session.flush()
        for position, genre in enumerate(unique_genres(genres)):
            self._session.add(
                FilmGenreModel(film_id=film_id, genre_id=genre.id, position=position)
            )

    def get_by_id(self, film_id: int) -> Optional[Film]:
        """Recupere un film par son ID."""
        if film_id is None:
            return None
        model = self._session.get(FilmModel, film_id)
        if model:
            return self._to_entity(model)
        return None

    def get_all(self) -> list[Film]:
        """Liste tous les films, par ID croissant."""
        models = self._session.exec(select(FilmModel).order_by(FilmModel.id)).all()
        return [self._to_entity(model) for model in models]

    def add(self, film: Film) -> Film:
        """Insere un film ; l'ID vient de la sequence AUTOINCREMENT."""
        model = FilmModel(name=film.name, release_date=film.release_date)
        self._apply_fields(model, film)
        self._session.add(model)
        self._session.flush()
        self._replace_genres(model.id, film.genres)
        self._session.commit()
        self._session.refresh(model)
        logger.debug(f"Film insere en base: id={model.id}")
        return self._to_entity(model)

    def update(self, film: Film) -> Film:
        """Remplace les champs d'un film existant, likes exceptes."""
        existing = self._session.get(FilmModel, film.id) if film.id is not None else None
        if existing is None:
            raise NotFoundError("film", film.id)

        self._apply_fields(existing, film)
        self._session.add(existing)
        self._replace_genres(existing.id, film.genres)
        self._session.commit()
        self._session.refresh(existing)
        return self._to_entity(existing)

    def add_like(self, film_id: int, user_id: int) -> bool:
        """Enregistre un like (no-op si deja present)."""
        if self._session.get(FilmModel, film_id) is None:
            raise NotFoundError("film", film_id)
        if self._session.get(FilmLikeModel, (film_id, user_id)) is not None:
            return False

        self._session.add(FilmLikeModel(film_id=film_id, user_id=user_id))
        try:
            self._session.commit()
        except IntegrityError:
            # Insertion concurrente de la meme paire
            self._session.rollback()
            logger.debug(f"Like deja present: film={film_id} user={user_id}")
            return False
        return True

    def remove_like(self, film_id: int, user_id: int) -> bool:
        """Supprime un like (no-op si absent)."""
        if self._session.get(FilmModel, film_id) is None:
            raise NotFoundError("film", film_id)
        like = self._session.get(FilmLikeModel, (film_id, user_id))
        if like is None:
            return False

        self._session.delete(like)
        self._session.commit()
        return True
