"""
Configuration du logging de Filmorate via loguru.

Deux sinks construits depuis Settings :
- stderr, coloré, au niveau Settings.log_level
- fichier JSON avec rotation, tout en DEBUG (repositories compris)

Chaque enregistrement porte extra["entity"] : les services se lient à
"film" ou "user" via logger.bind(), le reste du code reste sur "app".
"""

import sys

from loguru import logger

from filmorate.config import Settings

DEFAULT_ENTITY = "app"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[entity]: <5}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(settings: Settings) -> None:
    """Remplace les sinks loguru par ceux décrits dans settings.

    Args :
        settings : Paramètres de l'application (niveau, fichier, rotation, rétention)
    """
    logger.remove()
    logger.configure(extra={"entity": DEFAULT_ENTITY})

    logger.add(sys.stderr, level=settings.log_level, format=CONSOLE_FORMAT, colorize=True)

    log_file = settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        f"Logging configuré: {log_file} (stockage {settings.storage_backend}, "
        f"niveau console {settings.log_level})"
    )
