"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Deux implémentations interchangeables doivent respecter le même contrat :
en mémoire (infrastructure/memory) et SQLModel (infrastructure/persistence).

Règles communes :
- add() attribue l'ID suivant (max des IDs existants + 1, ou 1) et ne réutilise jamais un ID
- update() lève NotFoundError si l'ID n'existe pas
- get_by_id() retourne None si l'entité est absente (ce n'est pas une erreur)
- l'insertion d'une association déjà existante (like, amitié) est un no-op
"""

from abc import ABC, abstractmethod
from typing import Optional

from filmorate.core.entities import Film, Genre, Mpa, User


class IFilmRepository(ABC):
    """
    Interface de stockage des films.

    Définit les opérations pour persister et récupérer les entités Film,
    ainsi que les associations like (film_id, user_id).
    """

    @abstractmethod
    def get_by_id(self, film_id: int) -> Optional[Film]:
        """Récupère un film par son ID."""
        ...

    @abstractmethod
    def get_all(self) -> list[Film]:
        """Liste tous les films, par ID croissant."""
        ...

    @abstractmethod
    def add(self, film: Film) -> Film:
        """
        Insère un nouveau film.

        L'ID et les likes fournis sont ignorés : le film reçoit l'ID suivant
        et démarre sans like.

        Retourne :
            Le film stocké avec son ID
        """
        ...

    @abstractmethod
    def update(self, film: Film) -> Film:
        """
        Remplace les champs d'un film existant (sauf l'ID et les likes).

        Raises :
            NotFoundError : Si aucun film n'a cet ID
        """
        ...

    @abstractmethod
    def add_like(self, film_id: int, user_id: int) -> bool:
        """
        Enregistre un like. Retourne False si le like existait déjà.

        Raises :
            NotFoundError : Si aucun film n'a cet ID
        """
        ...

    @abstractmethod
    def remove_like(self, film_id: int, user_id: int) -> bool:
        """Supprime un like. Retourne False si le like n'existait pas."""
        ...


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs.

    Une amitié est stockée comme une seule association non orientée :
    les deux sens apparaissent et disparaissent ensemble.
    """

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Récupère un utilisateur par son ID."""
        ...

    @abstractmethod
    def get_all(self) -> list[User]:
        """Liste tous les utilisateurs, par ID croissant."""
        ...

    @abstractmethod
    def add(self, user: User) -> User:
        """Insère un nouvel utilisateur (ID suivant, sans amis)."""
        ...

    @abstractmethod
    def update(self, user: User) -> User:
        """
        Remplace les champs d'un utilisateur existant (sauf l'ID et les amis).

        Raises :
            NotFoundError : Si aucun utilisateur n'a cet ID
        """
        ...

    @abstractmethod
    def add_friendship(self, user_id: int, friend_id: int) -> bool:
        """
        Lie deux utilisateurs. Retourne False s'ils étaient déjà amis.

        Raises :
            NotFoundError : Si l'un des deux utilisateurs n'existe pas
        """
        ...

    @abstractmethod
    def remove_friendship(self, user_id: int, friend_id: int) -> bool:
        """Délie deux utilisateurs. Retourne False s'ils n'étaient pas amis."""
        ...


class IMpaRepository(ABC):
    """Interface de lecture du catalogue des classifications MPA."""

    @abstractmethod
    def get_all(self) -> list[Mpa]:
        """Liste toutes les classifications, par ID croissant."""
        ...

    @abstractmethod
    def get_by_id(self, mpa_id: int) -> Optional[Mpa]:
        """Récupère une classification par son ID."""
        ...


class IGenreRepository(ABC):
    """Interface de lecture du catalogue des genres."""

    @abstractmethod
    def get_all(self) -> list[Genre]:
        """Liste tous les genres, par ID croissant."""
        ...

    @abstractmethod
    def get_by_id(self, genre_id: int) -> Optional[Genre]:
        """Récupère un genre par son ID."""
        ...
