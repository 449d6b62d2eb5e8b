"""
Container d'injection de dependances via dependency-injector.

Le backend de stockage est choisi a la composition selon
Settings.storage_backend : les repositories en memoire sont des Singletons
(duree de vie du processus), les repositories SQLModel des Factory
(session fraiche a chaque instance).
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .config import Settings
from .infrastructure.memory import (
    InMemoryFilmRepository,
    InMemoryGenreRepository,
    InMemoryMpaRepository,
    InMemoryUserRepository,
)
from .infrastructure.persistence.database import get_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelFilmRepository,
    SQLModelGenreRepository,
    SQLModelMpaRepository,
    SQLModelUserRepository,
)
from .services.catalog_service import CatalogService
from .services.film_service import FilmService
from .services.user_service import UserService


def _init_storage(settings: Settings):
    """Resource : initialise la base uniquement pour le backend SQL."""
    if settings.uses_database:
        init_db(get_engine(settings.database_url))
    yield


def _open_session(database_url: str) -> Session:
    return Session(get_engine(database_url))


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois (backend sql)
        films = container.film_service()
        users = container.user_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(_init_storage, settings=config)

    # Session factory - nouvelle session sur la base configuree a chaque appel
    session = providers.Factory(_open_session, database_url=config.provided.database_url)

    # Repositories - choix du backend selon config.storage_backend
    film_repository = providers.Selector(
        config.provided.storage_backend,
        memory=providers.Singleton(InMemoryFilmRepository),
        sql=providers.Factory(SQLModelFilmRepository, session=session),
    )
    user_repository = providers.Selector(
        config.provided.storage_backend,
        memory=providers.Singleton(InMemoryUserRepository),
        sql=providers.Factory(SQLModelUserRepository, session=session),
    )
    mpa_repository = providers.Selector(
        config.provided.storage_backend,
        memory=providers.Singleton(InMemoryMpaRepository),
        sql=providers.Factory(SQLModelMpaRepository, session=session),
    )
    genre_repository = providers.Selector(
        config.provided.storage_backend,
        memory=providers.Singleton(InMemoryGenreRepository),
        sql=providers.Factory(SQLModelGenreRepository, session=session),
    )

    # Services - Factory car dependent des repositories
    film_service = providers.Factory(FilmService, film_repo=film_repository)
    user_service = providers.Factory(UserService, user_repo=user_repository)
    catalog_service = providers.Factory(
        CatalogService,
        mpa_repo=mpa_repository,
        genre_repo=genre_repository,
    )
