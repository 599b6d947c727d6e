"""Configuration module for crypto_price_tracker."""

import os
from dotenv import load_dotenv

# Charger les variables d'environnement depuis le fichier .env
load_dotenv()

DEFAULT_FEED_URL = "wss://ws-feed.exchange.coinbase.com"
DEFAULT_SYMBOLS_FILE = "crypto.csv"
DEFAULT_PRINT_INTERVAL_SECONDS = 30
DEFAULT_LOG_LEVEL = "INFO"


def safe_float(value):
    try:
        return float(value) if value else None
    except (ValueError, TypeError):
        return None


def get_settings():
    """
    Retourne un dictionnaire avec les paramètres de configuration.

    Les valeurs invalides ou absentes retombent sur les valeurs par défaut.

    Returns:
        dict: Dictionnaire contenant les paramètres de configuration
    """
    print_interval = safe_float(os.getenv("PRINT_INTERVAL"))
    if print_interval is None or print_interval <= 0:
        print_interval = DEFAULT_PRINT_INTERVAL_SECONDS

    return {
        "feed_url": os.getenv("FEED_URL") or DEFAULT_FEED_URL,
        "symbols_file": os.getenv("SYMBOLS_FILE") or DEFAULT_SYMBOLS_FILE,
        "print_interval": print_interval,
        "log_level": (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        "log_file": os.getenv("LOG_FILE") or None,
        "log_rotation": os.getenv("LOG_ROTATION", "10 MB"),
        "log_retention": os.getenv("LOG_RETENTION", "7 days"),
    }
