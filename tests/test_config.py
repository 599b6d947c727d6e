"""Tests pour le module de configuration."""

import os
from unittest.mock import patch

from config import (
    DEFAULT_FEED_URL,
    DEFAULT_PRINT_INTERVAL_SECONDS,
    get_settings,
    safe_float,
)


class TestConfig:
    """Tests pour la configuration."""

    def test_get_settings_defaults(self):
        """Test des valeurs par défaut."""
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()

            assert settings['feed_url'] == DEFAULT_FEED_URL
            assert settings['symbols_file'] == 'crypto.csv'
            assert settings['print_interval'] == DEFAULT_PRINT_INTERVAL_SECONDS
            assert settings['log_level'] == 'INFO'
            assert settings['log_file'] is None

    def test_get_settings_with_env_overrides(self, mock_env_vars):
        """Test des overrides via variables d'environnement."""
        settings = get_settings()

        assert settings['feed_url'] == 'wss://ws-feed-public.sandbox.exchange.coinbase.com'
        assert settings['symbols_file'] == 'symbols.csv'
        assert settings['print_interval'] == 5.0
        assert settings['log_level'] == 'DEBUG'

    def test_invalid_print_interval_falls_back_to_default(self):
        """Un intervalle invalide ou négatif retombe sur la valeur par défaut."""
        for value in ('abc', '0', '-3', ''):
            with patch.dict(os.environ, {'PRINT_INTERVAL': value}, clear=True):
                assert get_settings()['print_interval'] == DEFAULT_PRINT_INTERVAL_SECONDS

    def test_empty_strings_use_defaults(self):
        """Test que les chaînes vides ne remplacent pas les valeurs par défaut."""
        with patch.dict(os.environ, {'FEED_URL': '', 'SYMBOLS_FILE': '', 'LOG_FILE': ''}, clear=True):
            settings = get_settings()

            assert settings['feed_url'] == DEFAULT_FEED_URL
            assert settings['symbols_file'] == 'crypto.csv'
            assert settings['log_file'] is None

    def test_safe_float(self):
        assert safe_float("1.5") == 1.5
        assert safe_float("abc") is None
        assert safe_float(None) is None
