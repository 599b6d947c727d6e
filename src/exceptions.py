#!/usr/bin/env python3
"""
Exceptions personnalisées pour le suivi des prix crypto.

Les erreurs fatales (configuration, connexion, protocole) arrêtent le
processus avec un code de sortie non nul. MessageParseError est la seule
erreur non fatale : le message fautif est ignoré et la boucle continue.
"""


class TrackerError(Exception):
    """Exception de base pour toutes les erreurs du tracker."""
    pass


class ConfigError(TrackerError):
    """Fichier de symboles absent, illisible ou vide."""
    pass


class FeedConnectionError(TrackerError, ConnectionError):
    """Échec de connexion au flux (réseau, TLS) ou connexion perdue."""
    pass


class ProtocolError(TrackerError):
    """Le flux a rejeté la demande de souscription."""
    pass


class MessageParseError(TrackerError):
    """Message entrant mal formé (non fatal)."""
    pass
