"""
Implementation SQLModel du repository User.

Une amitie est une seule ligne de friendships avec user_id < friend_id.
La lecture des amis d'un utilisateur parcourt les deux colonnes.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from filmorate.core.entities import User
from filmorate.core.exceptions import NotFoundError
from filmorate.core.ports.repositories import IUserRepository
from filmorate.infrastructure.persistence.models import FriendshipModel, UserModel


def _pair(user_id: int, friend_id: int) -> tuple[int, int]:
    return (user_id, friend_id) if user_id < friend_id else (friend_id, user_id)


class SQLModelUserRepository(IUserRepository):
    """
    Repository SQLModel pour les utilisateurs.

    Implemente IUserRepository avec conversion bidirectionnelle
    entre l'entite User (domaine) et UserModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _friends_of(self, user_id: int) -> frozenset[int]:
        statement = select(FriendshipModel).where(
            or_(FriendshipModel.user_id == user_id, FriendshipModel.friend_id == user_id)
        )
        return frozenset(
            row.friend_id if row.user_id == user_id else row.user_id
            for row in self._session.exec(statement).all()
        )

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            login=model.login,
            name=model.name,
            birthday=model.birthday,
            friends=self._friends_of(model.id),
        )

    def _require(self, user_id: int) -> None:
        if user_id is None or self._session.get(UserModel, user_id) is None:
            raise NotFoundError("user", user_id)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Recupere un utilisateur par son ID."""
        if user_id is None:
            return None
        model = self._session.get(UserModel, user_id)
        if model:
            return self._to_entity(model)
        return None

    def get_all(self) -> list[User]:
        """Liste tous les utilisateurs, par ID croissant."""
        models = self._session.exec(select(UserModel).order_by(UserModel.id)).all()
        return [self._to_entity(model) for model in models]

    def add(self, user: User) -> User:
        """Insere un utilisateur ; l'ID vient de la sequence AUTOINCREMENT."""
        model = UserModel(
            email=user.email,
            login=user.login,
            name=user.name or user.login,
            birthday=user.birthday,
        )
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        logger.debug(f"Utilisateur insere en base: id={model.id}")
        return self._to_entity(model)

    def update(self, user: User) -> User:
        """Remplace les champs d'un utilisateur existant, amis exceptes."""
        existing = self._session.get(UserModel, user.id) if user.id is not None else None
        if existing is None:
            raise NotFoundError("user", user.id)

        existing.email = user.email
        existing.login = user.login
        existing.name = user.name or user.login
        existing.birthday = user.birthday
        self._session.add(existing)
        self._session.commit()
        self._session.refresh(existing)
        return self._to_entity(existing)

    def add_friendship(self, user_id: int, friend_id: int) -> bool:
        """Lie deux utilisateurs (no-op si deja amis)."""
        self._require(user_id)
        self._require(friend_id)
        low, high = _pair(user_id, friend_id)
        if self._session.get(FriendshipModel, (low, high)) is not None:
            return False

        self._session.add(FriendshipModel(user_id=low, friend_id=high))
        try:
            self._session.commit()
        except IntegrityError:
            # Insertion concurrente de la meme paire
            self._session.rollback()
            logger.debug(f"Amitie deja presente: {low} <-> {high}")
            return False
        return True

    def remove_friendship(self, user_id: int, friend_id: int) -> bool:
        """Delie deux utilisateurs (no-op s'ils n'etaient pas amis)."""
        self._require(user_id)
        self._require(friend_id)
        friendship = self._session.get(FriendshipModel, _pair(user_id, friend_id))
        if friendship is None:
            return False

        self._session.delete(friendship)
        self._session.commit()
        return True
