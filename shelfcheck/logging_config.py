"""
Configuration du logging de ShelfCheck via loguru.

Chaque étape du pipeline (scan, nettoyage, normalisation, recherche) journalise
avec un logger lié à son étape (``logger.bind(step=...)``), ce qui permet de
suivre une vérification d'un bout à l'autre :
- Console : colorée, avec l'étape en tête de ligne
- Fichier : JSON avec rotation, l'étape dans ``record.extra.step``
"""

import sys

from loguru import logger

from .config import Settings

# Etape par défaut des messages émis hors pipeline (CLI, démarrage)
DEFAULT_STEP = "app"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[step]: <9}</magenta> | "
    "<level>{message}</level>"
)


def pipeline_logger(step: str):
    """Retourne le logger lié à une étape du pipeline."""
    return logger.bind(step=step)


def configure_logging(settings: Settings) -> None:
    """Configure le logging à partir des settings.

    Args :
        settings : Settings chargés ; utilise log_level, log_file,
            log_rotation_size et log_retention_count.

    Les détails des erreurs amont (TMDB, Jellyfin, UPCitemdb) ne vont que dans ces
    journaux, jamais dans les réponses HTTP.
    """
    logger.remove()
    logger.configure(extra={"step": DEFAULT_STEP})

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    # Fichier JSON : capture aussi le DEBUG des adaptateurs
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configuré",
        log_file=str(settings.log_file),
        tmdb_enabled=settings.tmdb_enabled,
    )
