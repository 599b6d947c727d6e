"""Configuration pytest pour crypto_price_tracker."""

import os
import sys
import pytest
from unittest.mock import Mock, patch
from pathlib import Path

# Ajouter le répertoire src au path pour les imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def mock_env_vars():
    """Mock des variables d'environnement pour les tests."""
    with patch.dict(os.environ, {
        'FEED_URL': 'wss://ws-feed-public.sandbox.exchange.coinbase.com',
        'SYMBOLS_FILE': 'symbols.csv',
        'PRINT_INTERVAL': '5',
        'LOG_LEVEL': 'debug',
    }):
        yield


@pytest.fixture
def mock_logger():
    """Mock logger pour les tests."""
    return Mock()


@pytest.fixture
def settings():
    """Paramètres du tracker pour les tests."""
    return {
        "feed_url": "wss://ws-feed.exchange.coinbase.com",
        "symbols_file": "crypto.csv",
        "print_interval": 30,
        "log_level": "INFO",
        "log_file": None,
        "log_rotation": "10 MB",
        "log_retention": "7 days",
    }


@pytest.fixture
def symbols_csv(tmp_path):
    """Fichier CSV de symboles avec en-tête."""
    path = tmp_path / "crypto.csv"
    path.write_text("symbol\nBTC-USD\nETH-USD\n", encoding="utf-8")
    return path


@pytest.fixture
def ticker_message():
    """Message ticker typique du flux Coinbase."""
    return {
        "type": "ticker",
        "sequence": 37475248783,
        "product_id": "BTC-USD",
        "price": "65000.12",
        "open_24h": "64000.00",
        "volume_24h": "12345.67",
        "best_bid": "65000.11",
        "best_ask": "65000.13",
        "side": "buy",
        "time": "2024-05-01T12:00:00.000000Z",
        "trade_id": 123456,
        "last_size": "0.001",
    }


@pytest.fixture
def subscriptions_message():
    """Acquittement de souscription du flux Coinbase."""
    return {
        "type": "subscriptions",
        "channels": [{"name": "ticker", "product_ids": ["BTC-USD", "ETH-USD"]}],
    }
