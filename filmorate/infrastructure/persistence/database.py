"""
Configuration de la base de donnees SQLite pour Filmorate.

Ce module fournit :
- Engine SQLite avec configuration pour multi-thread
- Session factory avec context manager
- Fonction d'initialisation des tables et des catalogues de reference

La base de donnees est configuree via FILMORATE_DATABASE_URL (defaut: sqlite:///filmorate.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine, select

from filmorate.core.entities import GENRES, MPA_RATINGS

# Engines par URL - crees lors du premier appel a get_engine()
_engines: dict[str, Engine] = {}


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Retourne l'engine SQLite d'une URL, en le creant si necessaire.

    Args:
        database_url: URL de la base (defaut: Settings().database_url)
    """
    if database_url is None:
        from filmorate.config import Settings
        database_url = Settings().database_url

    engine = _engines.get(database_url)
    if engine is None:
        # Creer le repertoire parent si l'URL est un fichier SQLite
        if database_url.startswith("sqlite:///") and not database_url.startswith("sqlite:///:memory:"):
            db_path = Path(database_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

        engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
        _engines[database_url] = engine
    return engine


def get_session(database_url: Optional[str] = None) -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())

    Ou avec context manager :
        with Session(get_engine()) as session:
            # operations

    Yields:
        Session SQLModel connectee a l'engine de database_url
    """
    with Session(get_engine(database_url)) as session:
        yield session


def seed_reference_data(session: Session) -> None:
    """
    Insere les classifications MPA et les genres par defaut s'ils manquent.

    Idempotent : les lignes deja presentes ne sont pas modifiees.
    """
    from filmorate.infrastructure.persistence.models import GenreModel, MpaModel

    existing_mpa = set(session.exec(select(MpaModel.id)).all())
    for mpa in MPA_RATINGS:
        if mpa.id not in existing_mpa:
            session.add(MpaModel(id=mpa.id, name=mpa.name))

    existing_genres = set(session.exec(select(GenreModel.id)).all())
    for genre in GENRES:
        if genre.id not in existing_genres:
            session.add(GenreModel(id=genre.id, name=genre.name))

    session.commit()


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialise la base de donnees : tables et catalogues de reference.

    Cette fonction importe les modeles pour enregistrer leurs metadonnees
    dans SQLModel.metadata, puis cree les tables correspondantes si elles
    n'existent pas deja.

    Doit etre appelee une fois au demarrage de l'application.

    Args:
        engine: Engine a initialiser (defaut: engine de l'application)
    """
    # L'import est fait ici pour eviter les imports circulaires
    from filmorate.infrastructure.persistence import models  # noqa: F401

    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        seed_reference_data(session)

    logger.debug(f"Base de donnees initialisee: {engine.url}")
