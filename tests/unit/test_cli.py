"""
Tests unitaires pour les commandes CLI.

Le container est remplace par un mock : seules la mise en forme
et la gestion des erreurs sont verifiees ici.
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from filmorate.core.entities import Film, Mpa, User
from filmorate.core.exceptions import InvalidArgumentError, NotFoundError
from filmorate.main import app

runner = CliRunner()


@pytest.fixture
def mock_container():
    """Mock le Container du module main."""
    with patch("filmorate.main.container") as container:
        yield container


class TestCli:
    """Tests des commandes de consultation."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Filmorate v" in result.output

    def test_popular(self, mock_container):
        service = MagicMock()
        service.most_popular.return_value = [
            Film(id=1, name="Metropolis", release_date=date(1927, 1, 10), duration=153,
                 mpa=Mpa(1, "G"), liked_by=frozenset({1, 2})),
        ]
        mock_container.film_service.return_value = service

        result = runner.invoke(app, ["popular", "--count", "1"])

        assert result.exit_code == 0
        assert "Metropolis" in result.output
        service.most_popular.assert_called_once_with(1)

    def test_popular_default_count(self, mock_container):
        service = MagicMock()
        service.most_popular.return_value = []
        mock_container.film_service.return_value = service

        runner.invoke(app, ["popular"])

        service.most_popular.assert_called_once_with(None)

    def test_popular_invalid_count(self, mock_container):
        service = MagicMock()
        service.most_popular.side_effect = InvalidArgumentError("count negatif")
        mock_container.film_service.return_value = service

        result = runner.invoke(app, ["popular", "--count=-1"])

        assert result.exit_code == 1
        assert "count negatif" in result.output

    def test_friends_unknown_user(self, mock_container):
        service = MagicMock()
        service.friends_of.side_effect = NotFoundError("user", 9)
        mock_container.user_service.return_value = service

        result = runner.invoke(app, ["friends", "9"])

        assert result.exit_code == 1

    def test_common_friends(self, mock_container):
        service = MagicMock()
        service.common_friends.return_value = [
            User(id=3, email="e@f.com", login="el", name="El", birthday=date(1994, 1, 1)),
        ]
        mock_container.user_service.return_value = service

        result = runner.invoke(app, ["common-friends", "1", "2"])

        assert result.exit_code == 0
        assert "el" in result.output
        service.common_friends.assert_called_once_with(1, 2)
