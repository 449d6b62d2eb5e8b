"""
User entity.

A user of the catalog with its identity fields and the set of its friends.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class User:
    """
    User of the catalog.

    Friendship is symmetric: if A is in B.friends then B is in A.friends.

    Attributes:
        id: Storage ID, assigned on creation
        email: Contact email (must contain '@')
        login: Login (no whitespace)
        name: Display name, defaults to login when blank
        birthday: Birth date (not in the future)
        friends: IDs of the user's friends
    """

    id: Optional[int] = None
    email: str = ""
    login: str = ""
    name: Optional[str] = None
    birthday: Optional[date] = None
    friends: frozenset[int] = field(default_factory=frozenset)
