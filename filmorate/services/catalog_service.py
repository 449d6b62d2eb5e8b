"""Service de consultation des catalogues MPA et genres."""

from filmorate.core.entities import Genre, Mpa
from filmorate.core.exceptions import NotFoundError
from filmorate.core.ports.repositories import IGenreRepository, IMpaRepository


class CatalogService:
    """Lecture des classifications MPA et des genres."""

    def __init__(self, mpa_repo: IMpaRepository, genre_repo: IGenreRepository) -> None:
        self._mpa_repo = mpa_repo
        self._genre_repo = genre_repo

    def all_mpa(self) -> list[Mpa]:
        return self._mpa_repo.get_all()

    def get_mpa(self, mpa_id: int) -> Mpa:
        """Raises NotFoundError si la classification n'existe pas."""
        mpa = self._mpa_repo.get_by_id(mpa_id)
        if mpa is None:
            raise NotFoundError("mpa", mpa_id)
        return mpa

    def all_genres(self) -> list[Genre]:
        return self._genre_repo.get_all()

    def get_genre(self, genre_id: int) -> Genre:
        """Raises NotFoundError si le genre n'existe pas."""
        genre = self._genre_repo.get_by_id(genre_id)
        if genre is None:
            raise NotFoundError("genre", genre_id)
        return genre
