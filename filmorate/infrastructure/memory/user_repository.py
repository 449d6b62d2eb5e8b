"""
Implementation en memoire du repository User.

Chaque amitie est une paire (plus petit ID, plus grand ID) : un seul
enregistrement porte les deux sens, la symetrie ne peut donc pas deriver.
"""

import threading
from dataclasses import replace
from typing import Optional

from loguru import logger

from filmorate.core.entities import User
from filmorate.core.exceptions import NotFoundError
from filmorate.core.ports.repositories import IUserRepository


def _pair(user_id: int, friend_id: int) -> tuple[int, int]:
    return (user_id, friend_id) if user_id < friend_id else (friend_id, user_id)


class InMemoryUserRepository(IUserRepository):
    """Repository User dans la memoire du processus."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._friendships: set[tuple[int, int]] = set()
        self._lock = threading.RLock()

    def _next_id(self) -> int:
        return max(self._users, default=0) + 1

    def _friends_of(self, user_id: int) -> frozenset[int]:
        friends = set()
        for low, high in self._friendships:
            if low == user_id:
                friends.add(high)
            elif high == user_id:
                friends.add(low)
        return frozenset(friends)

    def _snapshot(self, user: User) -> User:
        return replace(user, friends=self._friends_of(user.id))

    def _require(self, user_id: int) -> None:
        if user_id not in self._users:
            raise NotFoundError("user", user_id)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Recupere un utilisateur par son ID."""
        with self._lock:
            user = self._users.get(user_id)
            return self._snapshot(user) if user else None

    def get_all(self) -> list[User]:
        """Liste tous les utilisateurs, par ID croissant."""
        with self._lock:
            return [self._snapshot(self._users[key]) for key in sorted(self._users)]

    def add(self, user: User) -> User:
        """Insere un utilisateur avec l'ID suivant."""
        with self._lock:
            stored = replace(user, id=self._next_id(), friends=frozenset())
            self._users[stored.id] = stored
            logger.debug(f"Utilisateur stocke en memoire: id={stored.id}")
            return self._snapshot(stored)

    def update(self, user: User) -> User:
        """Remplace les champs d'un utilisateur existant, amis exceptes."""
        with self._lock:
            self._require(user.id)
            stored = replace(user, friends=frozenset())
            self._users[user.id] = stored
            return self._snapshot(stored)

    def add_friendship(self, user_id: int, friend_id: int) -> bool:
        """Lie deux utilisateurs (no-op si deja amis)."""
        with self._lock:
            self._require(user_id)
            self._require(friend_id)
            pair = _pair(user_id, friend_id)
            if pair in self._friendships:
                return False
            self._friendships.add(pair)
            return True

    def remove_friendship(self, user_id: int, friend_id: int) -> bool:
        """Delie deux utilisateurs (no-op s'ils n'etaient pas amis)."""
        with self._lock:
            self._require(user_id)
            self._require(friend_id)
            pair = _pair(user_id, friend_id)
            if pair not in self._friendships:
                return False
            self._friendships.remove(pair)
            return True
