"""
Couche application (services).

Les services orchestrent la validation et les ports de stockage.
Ils constituent la seule surface publique : aucun appelant ne modifie
directement les likes ou les amis d'une entite.

- FilmService : films, likes, classement par popularite
- UserService : utilisateurs, amities, amis communs
- CatalogService : classifications MPA et genres
"""

from filmorate.services.catalog_service import CatalogService
from filmorate.services.film_service import DEFAULT_POPULAR_COUNT, FilmService
from filmorate.services.user_service import UserService

__all__ = [
    "FilmService",
    "UserService",
    "CatalogService",
    "DEFAULT_POPULAR_COUNT",
]
