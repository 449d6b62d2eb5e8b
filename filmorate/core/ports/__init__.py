"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du stockage sans spécifier comment ces besoins
sont satisfaits (mémoire du processus ou base relationnelle).

Ports repository : Contrats de persistance des données
- IFilmRepository : Stockage des films et des likes
- IUserRepository : Stockage des utilisateurs et des amitiés
- IMpaRepository : Catalogue des classifications MPA
- IGenreRepository : Catalogue des genres
"""

from filmorate.core.ports.repositories import (
    IFilmRepository,
    IGenreRepository,
    IMpaRepository,
    IUserRepository,
)

__all__ = [
    "IFilmRepository",
    "IUserRepository",
    "IMpaRepository",
    "IGenreRepository",
]
