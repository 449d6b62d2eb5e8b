"""
Fixtures pytest partagees pour les tests Filmorate.

Ce module contient les fixtures communes utilisees dans les tests:
- Repositories en memoire et services associes
- Engine SQLite en memoire initialise (tables + catalogues)
- Fabriques de films et d'utilisateurs valides
"""

from datetime import date
from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from filmorate.config import Settings
from filmorate.core.entities import Film, User
from filmorate.infrastructure.memory import (
    InMemoryFilmRepository,
    InMemoryUserRepository,
)
from filmorate.infrastructure.persistence.database import init_db
from filmorate.services import FilmService, UserService


@pytest.fixture
def make_film():
    """Fabrique de films valides, surchargeables champ par champ."""

    def _make(**overrides) -> Film:
        values = {
            "name": "Metropolis",
            "description": "Une cite futuriste divisee en deux classes.",
            "release_date": date(1927, 1, 10),
            "duration": 153,
        }
        values.update(overrides)
        return Film(**values)

    return _make


@pytest.fixture
def make_user():
    """Fabrique d'utilisateurs valides, surchargeables champ par champ."""

    def _make(**overrides) -> User:
        values = {
            "email": "al@example.com",
            "login": "al",
            "name": "Alice",
            "birthday": date(1990, 1, 1),
        }
        values.update(overrides)
        return User(**values)

    return _make


@pytest.fixture
def memory_film_repo() -> InMemoryFilmRepository:
    return InMemoryFilmRepository()


@pytest.fixture
def memory_user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def film_service(memory_film_repo) -> FilmService:
    """FilmService branche sur un repository en memoire."""
    return FilmService(film_repo=memory_film_repo)


@pytest.fixture
def user_service(memory_user_repo) -> UserService:
    """UserService branche sur un repository en memoire."""
    return UserService(user_repo=memory_user_repo)


@pytest.fixture
def sql_engine():
    """
    Engine SQLite en memoire, tables creees et catalogues inseres.

    StaticPool partage la meme connexion entre toutes les sessions du test.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_session(sql_engine) -> Iterator[Session]:
    with Session(sql_engine) as session:
        yield session


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec chemins temporaires."""
    return Settings(
        storage_backend="memory",
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
    )
