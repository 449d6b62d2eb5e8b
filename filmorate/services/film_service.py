"""
Service des films : creation, mise a jour, likes et classement.

Responsabilites:
- Valider un film avant toute creation ou mise a jour
- Refuser la mise a jour d'un film inconnu (NotFoundError)
- Enregistrer et retirer des likes de maniere idempotente
- Classer les films par nombre de likes decroissant
"""

from typing import Optional

from loguru import logger

from filmorate.core.entities import Film
from filmorate.core.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    ValidationFailedError,
)
from filmorate.core.ports.repositories import IFilmRepository
from filmorate.core.validation import validate_film

log = logger.bind(entity="film")

# Taille du classement quand l'appelant ne la precise pas
DEFAULT_POPULAR_COUNT = 10


def _popularity_key(film: Film) -> tuple[int, int]:
    # Likes decroissants, puis ID croissant pour un ordre total
    return (-film.likes_count, film.id)


class FilmService:
    """
    Service de gestion des films.

    Example:
        service = FilmService(film_repo=InMemoryFilmRepository())
        film = service.add_film(Film(name="Metropolis", release_date=date(1927, 1, 10)))
        service.add_like(film.id, user_id=1)
        top = service.most_popular(5)
    """

    def __init__(self, film_repo: IFilmRepository) -> None:
        """
        Initialise le service.

        Args:
            film_repo: Repository des films (memoire ou SQLModel)
        """
        self._film_repo = film_repo

    def _validate(self, film: Film) -> None:
        try:
            validate_film(film)
        except ValidationFailedError as e:
            log.warning(f"Film refuse ({e.field}): {e.reason}")
            raise

    def _require(self, film_id: int) -> Film:
        film = self._film_repo.get_by_id(film_id)
        if film is None:
            log.warning(f"Film introuvable: id={film_id}")
            raise NotFoundError("film", film_id)
        return film

    def all_films(self) -> list[Film]:
        """Retourne tous les films, par ID croissant."""
        return self._film_repo.get_all()

    def get_film(self, film_id: int) -> Film:
        """
        Retourne un film par son ID.

        Raises:
            NotFoundError: Si le film n'existe pas
        """
        return self._require(film_id)

    def add_film(self, film: Film) -> Film:
        """
        Valide puis enregistre un nouveau film.

        Returns:
            Le film stocke, avec son ID attribue
        """
        self._validate(film)
        created = self._film_repo.add(film)
        log.info(f"Film ajoute: id={created.id} name={created.name!r}")
        return created

    def update_film(self, film: Film) -> Film:
        """
        Met a jour un film existant. Les likes ne sont jamais modifies ici.

        Raises:
            NotFoundError: Si aucun film n'a cet ID (le stockage reste inchange)
            ValidationFailedError: Si les nouvelles valeurs sont invalides
        """
        self._require(film.id)
        self._validate(film)
        updated = self._film_repo.update(film)
        log.info(f"Film mis a jour: id={updated.id}")
        return updated

    def add_like(self, film_id: int, user_id: int) -> Film:
        """
        Enregistre le like d'un utilisateur. Un second like est un no-op.

        Returns:
            Le film avec ses likes a jour
        """
        self._require(film_id)
        if self._film_repo.add_like(film_id, user_id):
            log.info(f"Like ajoute: film={film_id} user={user_id}")
        else:
            log.debug(f"Like deja present: film={film_id} user={user_id}")
        return self._require(film_id)

    def remove_like(self, film_id: int, user_id: int) -> Film:
        """
        Retire le like d'un utilisateur. Retirer un like absent est un no-op.

        Returns:
            Le film avec ses likes a jour
        """
        self._require(film_id)
        if self._film_repo.remove_like(film_id, user_id):
            log.info(f"Like retire: film={film_id} user={user_id}")
        else:
            log.debug(f"Aucun like a retirer: film={film_id} user={user_id}")
        return self._require(film_id)

    def most_popular(self, count: Optional[int] = None) -> list[Film]:
        """
        Retourne les films les plus aimes.

        Le tri se fait par nombre de likes decroissant ; a egalite,
        le plus petit ID passe en premier.

        Args:
            count: Nombre maximum de films (defaut: 10, borne au total)

        Raises:
            InvalidArgumentError: Si count est negatif
        """
        if count is None:
            count = DEFAULT_POPULAR_COUNT
        if count < 0:
            raise InvalidArgumentError(f"count doit etre positif ou nul, recu {count}")

        films = self._film_repo.get_all()
        count = min(count, len(films))
        return sorted(films, key=_popularity_key)[:count]
