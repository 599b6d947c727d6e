#!/usr/bin/env python3
"""
Package WebSocket pour le flux public Coinbase Exchange.

Contient les composants du protocole du flux :
- subscriptions.py : Construction du message de souscription
- parser.py : Parsing des messages entrants
- models.py : Dataclasses pour les données structurées
"""

__all__ = [
    "subscriptions",
    "parser",
    "models",
]
