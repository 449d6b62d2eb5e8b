"""Tests pour les entites Film, User et les catalogues de reference."""

import pytest

from filmorate.core.entities import GENRES, MPA_RATINGS, Film, Genre, User, unique_genres
from filmorate.core.exceptions import NotFoundError, ValidationFailedError


class TestFilmEntity:
    """Tests pour l'entite Film."""

    def test_defaults(self):
        film = Film()
        assert film.id is None
        assert film.genres == ()
        assert film.liked_by == frozenset()
        assert film.likes_count == 0

    def test_likes_count(self):
        assert Film(liked_by=frozenset({1, 2, 3})).likes_count == 3

    def test_liked_by_cannot_be_mutated_in_place(self):
        film = Film(liked_by=frozenset({1}))
        with pytest.raises(AttributeError):
            film.liked_by.add(2)


class TestUserEntity:
    """Tests pour l'entite User."""

    def test_defaults(self):
        user = User()
        assert user.name is None
        assert user.friends == frozenset()


class TestReferenceData:
    """Tests pour les catalogues MPA et genres par defaut."""

    def test_mpa_catalog(self):
        assert [mpa.name for mpa in MPA_RATINGS] == ["G", "PG", "PG-13", "R", "NC-17"]
        assert [mpa.id for mpa in MPA_RATINGS] == [1, 2, 3, 4, 5]

    def test_genre_ids_are_unique(self):
        ids = [genre.id for genre in GENRES]
        assert len(ids) == len(set(ids))

    def test_unique_genres_keeps_first_occurrence(self):
        genres = (Genre(2), Genre(1, "Comédie"), Genre(2, "Drame"), Genre(1))
        assert unique_genres(genres) == (Genre(2), Genre(1, "Comédie"))


class TestExceptions:
    """Tests pour les exceptions metier."""

    def test_validation_failed_carries_field(self):
        error = ValidationFailedError("name", "vide")
        assert error.field == "name"
        assert error.reason == "vide"
        assert "name" in str(error)

    def test_not_found_carries_kind_and_id(self):
        error = NotFoundError("film", 42)
        assert error.entity_kind == "film"
        assert error.entity_id == 42
        assert "42" in str(error)
