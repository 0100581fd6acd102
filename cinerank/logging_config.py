"""
Configuration du logging de cinerank via loguru.

Deux sorties :
- stderr : niveau de la configuration, ajusté par les options -v / -q
- fichier JSON avec rotation : toujours au niveau DEBUG, pour garder le détail
  du parsing et du scoring de chaque release
"""

import sys

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def console_level(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """Niveau effectif de la console.

    -q n'affiche que les erreurs, -v descend au moins à INFO, -vv à DEBUG.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1 and logger.level(base_level).no > logger.level("INFO").no:
        return "INFO"
    return base_level


def configure_logging(settings: Settings, verbose: int = 0, quiet: bool = False) -> None:
    """Configure les sorties de log à partir des paramètres de l'application."""
    level = console_level(settings.log_level, verbose, quiet)

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(settings.log_file), console=level)
