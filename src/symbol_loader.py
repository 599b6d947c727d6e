"""Chargement de la liste des symboles à suivre depuis un fichier CSV."""

import csv
from typing import List

from loguru import logger as default_logger

try:
    from .exceptions import ConfigError
except ImportError:
    from exceptions import ConfigError

HEADER_NAME = "symbol"


def load_symbols(path: str, logger=None) -> List[str]:
    """
    Charge les symboles (ex: BTC-USD) depuis un fichier CSV.

    Seule la première colonne est lue. Une première ligne non vide
    ``symbol`` est considérée comme un en-tête et ignorée, tout comme les
    lignes vides. Un BOM UTF-8 en début de fichier est toléré.

    Args:
        path (str): Chemin du fichier CSV
        logger: Instance du logger (loguru par défaut)

    Returns:
        List[str]: Symboles en majuscules, dans l'ordre du fichier

    Raises:
        ConfigError: Fichier absent, illisible ou sans symbole valide
    """
    logger = logger or default_logger
    symbols = []
    first_row = True
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            for row in csv.reader(f):
                symbol = row[0].strip() if row else ""
                if not symbol:
                    continue
                is_header = first_row and symbol.lower() == HEADER_NAME
                first_row = False
                if is_header:
                    continue
                symbols.append(symbol.upper())
    except FileNotFoundError:
        raise ConfigError(f"Fichier de symboles introuvable: {path}")
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise ConfigError(f"Fichier de symboles illisible ({path}): {e}")

    if not symbols:
        raise ConfigError(f"Aucun symbole valide dans {path}")

    logger.info(f"📂 {len(symbols)} symboles chargés depuis {path}: {symbols}")
    return symbols
