"""Tests pour le container DI : selection du backend de stockage."""

from dependency_injector import providers
from sqlalchemy import inspect
from sqlmodel import Session

from filmorate.config import Settings
from filmorate.container import Container
from filmorate.infrastructure.memory import InMemoryFilmRepository, InMemoryUserRepository
from filmorate.infrastructure.persistence.database import get_engine
from filmorate.infrastructure.persistence.repositories import (
    SQLModelFilmRepository,
    SQLModelUserRepository,
)
from filmorate.services import FilmService, UserService


class TestContainer:
    """Tests pour Container."""

    def test_memory_backend(self, test_settings):
        container = Container()
        container.config.override(providers.Object(test_settings))

        assert isinstance(container.film_repository(), InMemoryFilmRepository)
        assert isinstance(container.user_repository(), InMemoryUserRepository)

    def test_memory_repositories_live_for_the_process(self, test_settings, make_film):
        container = Container()
        container.config.override(providers.Object(test_settings))

        container.film_service().add_film(make_film())

        assert len(container.film_service().all_films()) == 1

    def test_sql_backend(self, tmp_path, sql_engine):
        container = Container()
        container.config.override(
            providers.Object(
                Settings(
                    _env_file=None,
                    storage_backend="sql",
                    database_url=f"sqlite:///{tmp_path}/test.db",
                )
            )
        )
        with Session(sql_engine) as session:
            container.session.override(providers.Object(session))

            assert isinstance(container.film_repository(), SQLModelFilmRepository)
            assert isinstance(container.user_repository(), SQLModelUserRepository)
            assert isinstance(container.film_service(), FilmService)
            assert isinstance(container.user_service(), UserService)
            assert len(container.catalog_service().all_mpa()) == 5

    def test_sql_backend_initialises_configured_database(self, tmp_path, make_user):
        database_url = f"sqlite:///{tmp_path}/configured.db"
        container = Container()
        container.config.override(
            providers.Object(
                Settings(_env_file=None, storage_backend="sql", database_url=database_url)
            )
        )

        container.database.init()
        try:
            tables = inspect(get_engine(database_url)).get_table_names()
            assert {"films", "users", "film_likes", "friendships"} <= set(tables)

            alice = container.user_service().add_user(make_user(login="alice"))
            bob = container.user_service().add_user(make_user(login="bob"))
            container.user_service().add_friend(alice.id, bob.id)

            assert (alice.id, bob.id) == (1, 2)
            assert container.user_service().get_user(bob.id).friends == frozenset({alice.id})
        finally:
            container.database.shutdown()
