"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe FILMORATE_,
et peut optionnellement être fournie via un fichier .env.

Le backend de stockage (mémoire ou SQL) est choisi ici et appliqué par le container DI.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de filmorate/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe FILMORATE_.
    Exemple : FILMORATE_STORAGE_BACKEND=memory

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="FILMORATE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stockage : "memory" (perdu au redémarrage) ou "sql" (base SQLModel)
    storage_backend: Literal["memory", "sql"] = Field(default="sql")

    # Base de données
    database_url: str = Field(default="sqlite:///filmorate.db")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/filmorate.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Met le niveau de log en majuscules (debug -> DEBUG)."""
        return v.upper()

    @property
    def uses_database(self) -> bool:
        """Vérifie si le stockage passe par la base de données."""
        return self.storage_backend == "sql"
