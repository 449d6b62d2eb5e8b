"""
Point d'entrée CLI de Filmorate.

Initialise le container DI, configure le logging et fournit des commandes
de consultation du catalogue (films, classement, utilisateurs, amis).
"""

from importlib.metadata import PackageNotFoundError, version as package_version
from typing import Annotated, NoReturn, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import Settings
from .container import Container
from .core.entities import Film, User
from .core.exceptions import FilmorateError
from .logging_config import configure_logging

app = typer.Typer(
    name="filmorate",
    help="Catalogue de films, likes et amitiés",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _app_version() -> str:
    try:
        return package_version("filmorate")
    except PackageNotFoundError:
        return "0.1.0"


def _films_table(title: str, films: list[Film]) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    table.add_column("Sortie")
    table.add_column("Durée", justify="right")
    table.add_column("MPA")
    table.add_column("Likes", justify="right")
    for film in films:
        table.add_row(
            str(film.id),
            film.name,
            film.release_date.isoformat() if film.release_date else "-",
            f"{film.duration} min",
            (film.mpa.name or str(film.mpa.id)) if film.mpa else "-",
            str(film.likes_count),
        )
    return table


def _users_table(title: str, users: list[User]) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Login")
    table.add_column("Nom")
    table.add_column("Email")
    table.add_column("Amis", justify="right")
    for user in users:
        table.add_row(
            str(user.id),
            user.login,
            user.name or "",
            user.email,
            str(len(user.friends)),
        )
    return table


def _fail(error: FilmorateError) -> NoReturn:
    console.print(f"[red]Erreur : {error}[/red]")
    raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Filmorate")
    typer.echo(f"Stockage : {config.storage_backend}")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Filmorate v{_app_version()}")


@app.command(name="init-db")
def init_db_command() -> None:
    """Crée les tables et les catalogues de référence."""
    container.database.init()
    typer.echo("Base de données initialisée")


@app.command()
def films() -> None:
    """Liste tous les films."""
    service = container.film_service()
    console.print(_films_table("Films", service.all_films()))


@app.command()
def popular(
    count: Annotated[
        Optional[int],
        typer.Option("--count", "-c", help="Nombre de films (défaut: 10)"),
    ] = None,
) -> None:
    """Affiche les films les plus aimés."""
    service = container.film_service()
    try:
        top = service.most_popular(count)
    except FilmorateError as e:
        _fail(e)
    console.print(_films_table("Films populaires", top))


@app.command()
def users() -> None:
    """Liste tous les utilisateurs."""
    service = container.user_service()
    console.print(_users_table("Utilisateurs", service.all_users()))


@app.command()
def friends(
    user_id: Annotated[int, typer.Argument(help="ID de l'utilisateur")],
) -> None:
    """Liste les amis d'un utilisateur."""
    service = container.user_service()
    try:
        result = service.friends_of(user_id)
    except FilmorateError as e:
        _fail(e)
    console.print(_users_table(f"Amis de {user_id}", result))


@app.command(name="common-friends")
def common_friends(
    user_id: Annotated[int, typer.Argument(help="ID du premier utilisateur")],
    other_id: Annotated[int, typer.Argument(help="ID du second utilisateur")],
) -> None:
    """Liste les amis communs à deux utilisateurs."""
    service = container.user_service()
    try:
        result = service.common_friends(user_id, other_id)
    except FilmorateError as e:
        _fail(e)
    console.print(_users_table(f"Amis communs de {user_id} et {other_id}", result))


@app.command()
def mpa() -> None:
    """Liste les classifications MPA."""
    table = Table(title="Classifications MPA")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    for rating in container.catalog_service().all_mpa():
        table.add_row(str(rating.id), rating.name or "")
    console.print(table)


@app.command()
def genres() -> None:
    """Liste les genres."""
    table = Table(title="Genres")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    for genre in container.catalog_service().all_genres():
        table.add_row(str(genre.id), genre.name or "")
    console.print(table)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(settings)

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info(f"Démarrage de Filmorate (stockage: {settings.storage_backend})")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
