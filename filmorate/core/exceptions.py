"""
Exceptions metier de Filmorate.

Toutes les erreurs sont terminales pour l'appel qui les declenche :
elles proviennent des donnees fournies par l'appelant, aucune relance
n'est tentee. La traduction en erreur visible (code HTTP, message CLI)
revient a la couche de transport.
"""

from typing import Any


class FilmorateError(Exception):
    """Classe de base des erreurs metier."""


class ValidationFailedError(FilmorateError):
    """
    Exception levee quand une entite ne respecte pas ses invariants.

    Attributes:
        field: Nom du champ invalide
        reason: Description lisible du probleme
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Champ '{field}' invalide : {reason}")


class NotFoundError(FilmorateError):
    """
    Exception levee quand une operation reference une entite inexistante.

    Attributes:
        entity_kind: Type d'entite ("film", "user", "mpa", "genre")
        entity_id: Identifiant recherche
    """

    def __init__(self, entity_kind: str, entity_id: Any) -> None:
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        super().__init__(f"{entity_kind} introuvable : id={entity_id}")


class InvalidArgumentError(FilmorateError):
    """Requete structurellement absurde (ex: un utilisateur ami avec lui-meme)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
