"""
Service des utilisateurs : creation, mise a jour et amities.

L'amitie est symetrique : le repository la stocke comme une seule
association, les deux sens sont donc toujours coherents.
"""

from dataclasses import replace
from typing import Iterable

from loguru import logger

from filmorate.core.entities import User
from filmorate.core.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    ValidationFailedError,
)
from filmorate.core.ports.repositories import IUserRepository
from filmorate.core.validation import display_name, validate_user

log = logger.bind(entity="user")


class UserService:
    """
    Service de gestion des utilisateurs et de leurs amities.

    Example:
        service = UserService(user_repo=InMemoryUserRepository())
        alice = service.add_user(User(email="a@b.com", login="al", birthday=date(1990, 1, 1)))
        bob = service.add_user(User(email="c@d.com", login="cl", birthday=date(1992, 1, 1)))
        service.add_friend(alice.id, bob.id)
        service.friends_of(alice.id)  # [bob]
    """

    def __init__(self, user_repo: IUserRepository) -> None:
        """
        Initialise le service.

        Args:
            user_repo: Repository des utilisateurs (memoire ou SQLModel)
        """
        self._user_repo = user_repo

    def _prepare(self, user: User) -> User:
        """Substitue le login au nom vide puis valide. L'entite recue n'est pas modifiee."""
        prepared = replace(user, name=display_name(user))
        if prepared.name != user.name:
            log.info(f"Nom vide, utilisation du login: {user.login!r}")
        try:
            validate_user(prepared)
        except ValidationFailedError as e:
            log.warning(f"Utilisateur refuse ({e.field}): {e.reason}")
            raise
        return prepared

    def _require(self, user_id: int) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            log.warning(f"Utilisateur introuvable: id={user_id}")
            raise NotFoundError("user", user_id)
        return user

    def _check_pair(self, user_id: int, friend_id: int) -> None:
        if user_id == friend_id:
            raise InvalidArgumentError(
                f"un utilisateur ne peut pas etre son propre ami (id={user_id})"
            )
        self._require(user_id)
        self._require(friend_id)

    def _resolve(self, user_ids: Iterable[int]) -> list[User]:
        """Resout des IDs en utilisateurs, en ignorant les references perimees."""
        users = []
        for user_id in sorted(user_ids):
            user = self._user_repo.get_by_id(user_id)
            if user is None:
                log.debug(f"Reference d'ami perimee ignoree: id={user_id}")
                continue
            users.append(user)
        return users

    def all_users(self) -> list[User]:
        """Retourne tous les utilisateurs, par ID croissant."""
        return self._user_repo.get_all()

    def get_user(self, user_id: int) -> User:
        """
        Retourne un utilisateur par son ID.

        Raises:
            NotFoundError: Si l'utilisateur n'existe pas
        """
        return self._require(user_id)

    def add_user(self, user: User) -> User:
        """Valide puis enregistre un nouvel utilisateur."""
        created = self._user_repo.add(self._prepare(user))
        log.info(f"Utilisateur ajoute: id={created.id} login={created.login!r}")
        return created

    def update_user(self, user: User) -> User:
        """
        Met a jour un utilisateur existant. Les amis ne sont jamais modifies ici.

        Raises:
            NotFoundError: Si aucun utilisateur n'a cet ID
            ValidationFailedError: Si les nouvelles valeurs sont invalides
        """
        self._require(user.id)
        updated = self._user_repo.update(self._prepare(user))
        log.info(f"Utilisateur mis a jour: id={updated.id}")
        return updated

    def add_friend(self, user_id: int, friend_id: int) -> User:
        """
        Lie deux utilisateurs. Une amitie existante est un no-op.

        Raises:
            InvalidArgumentError: Si les deux IDs sont identiques
            NotFoundError: Si l'un des utilisateurs n'existe pas

        Returns:
            L'utilisateur user_id avec ses amis a jour
        """
        self._check_pair(user_id, friend_id)
        if self._user_repo.add_friendship(user_id, friend_id):
            log.info(f"Amitie ajoutee: {user_id} <-> {friend_id}")
        else:
            log.debug(f"Deja amis: {user_id} <-> {friend_id}")
        return self._require(user_id)

    def remove_friend(self, user_id: int, friend_id: int) -> User:
        """
        Delie deux utilisateurs. Delier deux non-amis est un no-op.

        Raises:
            InvalidArgumentError: Si les deux IDs sont identiques
            NotFoundError: Si l'un des utilisateurs n'existe pas
        """
        self._check_pair(user_id, friend_id)
        if self._user_repo.remove_friendship(user_id, friend_id):
            log.info(f"Amitie supprimee: {user_id} <-> {friend_id}")
        else:
            log.debug(f"Pas amis, rien a supprimer: {user_id} <-> {friend_id}")
        return self._require(user_id)

    def friends_of(self, user_id: int) -> list[User]:
        """
        Retourne les amis d'un utilisateur, par ID croissant.

        Raises:
            NotFoundError: Si l'utilisateur n'existe pas
        """
        user = self._require(user_id)
        return self._resolve(user.friends)

    def common_friends(self, user_id: int, other_id: int) -> list[User]:
        """
        Retourne les amis communs a deux utilisateurs, par ID croissant.

        Raises:
            NotFoundError: Si l'un des utilisateurs n'existe pas
        """
        user = self._require(user_id)
        other = self._require(other_id)
        return self._resolve(user.friends & other.friends)
