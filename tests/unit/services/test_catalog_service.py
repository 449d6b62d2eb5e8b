"""Tests pour CatalogService (classifications MPA et genres)."""

import pytest

from filmorate.core.entities import Genre, Mpa
from filmorate.core.exceptions import NotFoundError
from filmorate.infrastructure.memory import InMemoryGenreRepository, InMemoryMpaRepository
from filmorate.services.catalog_service import CatalogService


@pytest.fixture
def catalog_service():
    return CatalogService(
        mpa_repo=InMemoryMpaRepository(),
        genre_repo=InMemoryGenreRepository(),
    )


class TestCatalogService:
    """Tests pour la consultation des catalogues."""

    def test_all_mpa(self, catalog_service):
        assert len(catalog_service.all_mpa()) == 5

    def test_get_mpa(self, catalog_service):
        assert catalog_service.get_mpa(1) == Mpa(1, "G")

    def test_get_unknown_mpa_raises(self, catalog_service):
        with pytest.raises(NotFoundError) as exc_info:
            catalog_service.get_mpa(999)
        assert exc_info.value.entity_kind == "mpa"

    def test_all_genres(self, catalog_service):
        assert catalog_service.all_genres()[0] == Genre(1, "Comédie")

    def test_get_unknown_genre_raises(self, catalog_service):
        with pytest.raises(NotFoundError) as exc_info:
            catalog_service.get_genre(999)
        assert exc_info.value.entity_kind == "genre"
