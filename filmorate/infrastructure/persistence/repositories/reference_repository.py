"""
Implementations SQLModel des catalogues MPA et genres.

Les tables sont remplies par seed_reference_data() lors de init_db().
"""

from typing import Optional

from sqlmodel import Session, select

from filmorate.core.entities import Genre, Mpa
from filmorate.core.ports.repositories import IGenreRepository, IMpaRepository
from filmorate.infrastructure.persistence.models import GenreModel, MpaModel


class SQLModelMpaRepository(IMpaRepository):
    """Repository SQLModel pour les classifications MPA."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_all(self) -> list[Mpa]:
        models = self._session.exec(select(MpaModel).order_by(MpaModel.id)).all()
        return [Mpa(id=model.id, name=model.name) for model in models]

    def get_by_id(self, mpa_id: int) -> Optional[Mpa]:
        model = self._session.get(MpaModel, mpa_id)
        if model:
            return Mpa(id=model.id, name=model.name)
        return None


class SQLModelGenreRepository(IGenreRepository):
    """Repository SQLModel pour les genres."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_all(self) -> list[Genre]:
        models = self._session.exec(select(GenreModel).order_by(GenreModel.id)).all()
        return [Genre(id=model.id, name=model.name) for model in models]

    def get_by_id(self, genre_id: int) -> Optional[Genre]:
        model = self._session.get(GenreModel, genre_id)
        if model:
            return Genre(id=model.id, name=model.name)
        return None
