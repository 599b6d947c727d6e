"""Configuration du système de logging avec loguru."""

import os
import sys
from loguru import logger

try:
    from .config import get_settings
except ImportError:
    from config import get_settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {message}"


def setup_logging():
    """Configure le système de logging avec loguru."""
    # Supprimer le handler par défaut
    logger.remove()

    settings = get_settings()
    log_level = settings["log_level"]

    logger.add(
        sys.stdout,
        format=LOG_FORMAT,
        level=log_level,
        colorize=True,
        enqueue=False,  # Éviter la file d'attente pour stdout
        backtrace=False,
        diagnose=False,
    )

    # Fichier de log optionnel
    log_file = settings["log_file"]
    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            logger.add(
                log_file,
                format=LOG_FORMAT,
                level=log_level,
                rotation=settings["log_rotation"],
                retention=settings["log_retention"],
                enqueue=True,
                backtrace=False,
                diagnose=False,
            )
        except OSError as e:
            # Si on ne peut pas créer le fichier, on garde stdout uniquement
            logger.warning(f"⚠️ Fichier de log indisponible ({log_file}): {e}")

    return logger
