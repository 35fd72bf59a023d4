"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, niveau ajustable par -v / -q
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Identifiant du handler console courant (remplace lors d'un changement de niveau)
_console_handler_id: Optional[int] = None


def level_for_verbosity(verbose: int, quiet: bool, default: str = "INFO") -> str:
    """Traduit les options -v / -q en niveau de log console.

    -q donne ERROR, -v donne DEBUG, -vv et plus donnent TRACE.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return default


def set_console_level(log_level: str) -> None:
    """Remplace le handler console par un handler au niveau demandé."""
    global _console_handler_id

    if _console_handler_id is not None:
        try:
            logger.remove(_console_handler_id)
        except ValueError:
            pass  # Handler deja retire par un logger.remove() global
    _console_handler_id = logger.add(
        sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/medialinker.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    global _console_handler_id

    # Supprime tous les handlers, y compris celui par défaut
    logger.remove()
    _console_handler_id = None
    set_console_level(log_level)

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Les hits de cache sont en DEBUG
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
