"""
Tests pour les regles de validation des films et des utilisateurs.

Couvre:
- Bornes de la description (200 caracteres) et de la date de sortie (28/12/1895)
- Duree negative, nom vide
- Email, login, anniversaire
- Absence d'effet de bord sur l'entite validee
"""

from datetime import date, timedelta

import pytest

from filmorate.core.exceptions import ValidationFailedError
from filmorate.core.validation import (
    FIRST_SCREENING_DATE,
    MAX_DESCRIPTION_LENGTH,
    display_name,
    validate_film,
    validate_user,
)


class TestValidateFilm:
    """Tests pour validate_film."""

    def test_valid_film_passes(self, make_film):
        validate_film(make_film())

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_fails(self, make_film, name):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_film(make_film(name=name))
        assert exc_info.value.field == "name"

    def test_description_at_limit_passes(self, make_film):
        validate_film(make_film(description="x" * MAX_DESCRIPTION_LENGTH))

    def test_description_over_limit_fails(self, make_film):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_film(make_film(description="x" * (MAX_DESCRIPTION_LENGTH + 1)))
        assert exc_info.value.field == "description"

    def test_none_description_is_treated_as_empty(self, make_film):
        validate_film(make_film(description=None))

    def test_first_screening_date_passes(self, make_film):
        validate_film(make_film(release_date=FIRST_SCREENING_DATE))

    def test_release_before_first_screening_fails(self, make_film):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_film(make_film(release_date=date(1895, 12, 27)))
        assert exc_info.value.field == "release_date"

    def test_missing_release_date_fails(self, make_film):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_film(make_film(release_date=None))
        assert exc_info.value.field == "release_date"

    def test_zero_duration_passes(self, make_film):
        validate_film(make_film(duration=0))

    def test_negative_duration_fails(self, make_film):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_film(make_film(duration=-1))
        assert exc_info.value.field == "duration"


class TestValidateUser:
    """Tests pour validate_user."""

    def test_valid_user_passes(self, make_user):
        validate_user(make_user())

    @pytest.mark.parametrize("email", ["", "   ", "al.example.com", None])
    def test_invalid_email_fails(self, make_user, email):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_user(make_user(email=email))
        assert exc_info.value.field == "email"

    @pytest.mark.parametrize("login", ["", None, "al ice", "al\tice", " al"])
    def test_invalid_login_fails(self, make_user, login):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_user(make_user(login=login))
        assert exc_info.value.field == "login"

    def test_birthday_today_passes(self, make_user):
        today = date(2024, 6, 1)
        validate_user(make_user(birthday=today), today=today)

    def test_birthday_in_future_fails(self, make_user):
        tomorrow = date.today() + timedelta(days=1)
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_user(make_user(birthday=tomorrow))
        assert exc_info.value.field == "birthday"

    def test_missing_birthday_fails(self, make_user):
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_user(make_user(birthday=None))
        assert exc_info.value.field == "birthday"

    def test_blank_name_does_not_fail_nor_mutate(self, make_user):
        """Un nom vide est accepte et l'entite n'est pas modifiee."""
        user = make_user(name="  ")
        validate_user(user)
        assert user.name == "  "


class TestDisplayName:
    """Tests pour display_name."""

    def test_keeps_name_when_present(self, make_user):
        assert display_name(make_user(name="Alice")) == "Alice"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_falls_back_to_login(self, make_user, name):
        assert display_name(make_user(name=name, login="bob")) == "bob"
