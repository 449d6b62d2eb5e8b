"""
Regles de validation des films et des utilisateurs.

Fonctions pures : elles levent ValidationFailedError au premier champ
invalide et ne modifient jamais l'entite recue. La substitution du nom
d'affichage par le login est appliquee par le UserService, pas ici.
"""

from datetime import date
from typing import Optional

from filmorate.core.entities import Film, User
from filmorate.core.exceptions import ValidationFailedError

# Premiere projection publique (freres Lumiere)
FIRST_SCREENING_DATE = date(1895, 12, 28)

MAX_DESCRIPTION_LENGTH = 200


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_film(film: Film) -> None:
    """
    Verifie les invariants d'un film avant creation ou mise a jour.

    Args:
        film: Le film a verifier

    Raises:
        ValidationFailedError: Si le nom est vide, la description trop longue,
            la date de sortie absente ou anterieure au 28/12/1895,
            ou la duree negative.
    """
    if _is_blank(film.name):
        raise ValidationFailedError("name", "le nom ne peut pas etre vide")

    description = film.description or ""
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationFailedError(
            "description",
            f"{len(description)} caracteres (maximum {MAX_DESCRIPTION_LENGTH})",
        )

    if film.release_date is None:
        raise ValidationFailedError("release_date", "la date de sortie est obligatoire")
    if film.release_date < FIRST_SCREENING_DATE:
        raise ValidationFailedError(
            "release_date",
            f"{film.release_date.isoformat()} est anterieure au "
            f"{FIRST_SCREENING_DATE.isoformat()}",
        )

    if film.duration is None or film.duration < 0:
        raise ValidationFailedError("duration", f"duree negative : {film.duration}")


def validate_user(user: User, today: Optional[date] = None) -> None:
    """
    Verifie les invariants d'un utilisateur avant creation ou mise a jour.

    Un nom vide n'est pas une erreur (voir display_name).

    Args:
        user: L'utilisateur a verifier
        today: Date de reference pour l'anniversaire (defaut: aujourd'hui)

    Raises:
        ValidationFailedError: Si l'email est vide ou sans '@', le login vide
            ou contenant un espace, ou l'anniversaire absent ou dans le futur.
    """
    if _is_blank(user.email) or "@" not in user.email:
        raise ValidationFailedError("email", "l'email doit contenir '@' et ne pas etre vide")

    if not user.login or any(char.isspace() for char in user.login):
        raise ValidationFailedError(
            "login", "le login ne peut pas etre vide ni contenir d'espaces"
        )

    reference = today or date.today()
    if user.birthday is None:
        raise ValidationFailedError("birthday", "la date de naissance est obligatoire")
    if user.birthday > reference:
        raise ValidationFailedError(
            "birthday", f"{user.birthday.isoformat()} est dans le futur"
        )


def display_name(user: User) -> str:
    """Retourne le nom d'affichage : le nom s'il est renseigne, sinon le login."""
    if _is_blank(user.name):
        return user.login
    return user.name
