#!/usr/bin/env python3
"""
Script pour suivre en temps réel le dernier prix des symboles crypto listés
dans un fichier CSV via le flux WebSocket public Coinbase Exchange.

Usage:
    python src/price_tracker.py
"""

import json
import signal
import sys
import threading
from decimal import Decimal
from typing import List, Optional, Tuple
from urllib.parse import urlparse

import websocket
from loguru import logger as default_logger

from config import get_settings
from exceptions import FeedConnectionError, MessageParseError, ProtocolError, TrackerError
from logging_setup import setup_logging
from price_store import PriceStore
from symbol_loader import load_symbols
from ws.models import PriceUpdateMessage
from ws.parser import decode_payload, parse_payload
from ws.subscriptions import SubscriptionBuilder

NO_DATA = "<no data>"


def format_price_table(items: List[Tuple[str, Optional[Decimal]]]) -> List[str]:
    """
    Construit les lignes affichées à chaque tick.

    Args:
        items: Paires (symbole, prix) dans l'ordre de chargement

    Returns:
        List[str]: Bannière, une ligne ``SYMBOLE: prix`` par symbole, séparateur
    """
    lines = ["==== Derniers prix ===="]
    for symbol, price in items:
        lines.append(f"{symbol}: {price if price is not None else NO_DATA}")
    lines.append("=" * 23)
    return lines


class PriceTracker:
    """Suivi des prix en temps réel via le flux WebSocket Coinbase."""

    def __init__(self, settings: Optional[dict] = None, logger=None):
        self.settings = settings or get_settings()
        self.logger = logger or default_logger
        self.running = False
        self.ws = None
        self.display_thread = None
        self._stop_event = threading.Event()
        self._logged_symbols = set()

    def install_signal_handlers(self):
        """Installe les gestionnaires Ctrl+C / SIGTERM (thread principal uniquement)."""
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

    def _signal_handler(self, signum, frame):
        """Gestionnaire de signal pour Ctrl+C."""
        self.logger.info("🧹 Arrêt demandé, fermeture de la WebSocket…")
        self._stop_event.set()
        sys.exit(0)

    def connect(self, endpoint: str):
        """
        Ouvre la connexion chiffrée vers le flux.

        Raises:
            FeedConnectionError: URL non wss://, erreur réseau, TLS ou handshake
        """
        if urlparse(endpoint).scheme != "wss":
            raise FeedConnectionError(f"Connexion chiffrée (wss://) requise: {endpoint}")

        self.logger.info(f"🌐 Connexion au flux {endpoint}…")
        try:
            self.ws = websocket.create_connection(endpoint)
        except (websocket.WebSocketException, OSError) as e:
            raise FeedConnectionError(f"Connexion impossible à {endpoint}: {e}") from e

        self.logger.info("🌐 WS ouverte")
        return self.ws

    @staticmethod
    def _read_frame(connection):
        """Lit une frame de données ; None si le flux a envoyé une frame de fermeture."""
        opcode, data = connection.recv_data()
        if opcode == websocket.ABNF.OPCODE_CLOSE:
            return None
        return data

    def subscribe(self, connection, symbols: List[str]) -> dict:
        """
        Envoie la souscription au canal ticker et attend l'acquittement.

        Returns:
            dict: Message ``subscriptions`` renvoyé par le flux

        Raises:
            ProtocolError: Le flux répond par un message ``error``
            FeedConnectionError: La connexion tombe avant l'acquittement
        """
        message = SubscriptionBuilder.ticker(symbols)
        try:
            connection.send(json.dumps(message))
            self.logger.info(f"🧭 Souscription ticker → {len(symbols)} symboles")

            while True:
                raw = self._read_frame(connection)
                if raw is None:
                    raise FeedConnectionError("Connexion fermée par le flux avant l'acquittement")
                if not raw:
                    continue
                try:
                    payload = decode_payload(raw)
                except MessageParseError as e:
                    self.logger.warning(f"⚠️ Message ignoré avant souscription: {e}")
                    continue

                msg_type = payload.get("type")
                if msg_type == "subscriptions":
                    self.logger.info(f"✅ Souscription confirmée: {payload.get('channels', [])}")
                    return payload
                if msg_type == "error":
                    reason = payload.get("reason") or "raison inconnue"
                    raise ProtocolError(
                        f"Souscription rejetée: {payload.get('message', '')} ({reason})"
                    )
        except (websocket.WebSocketException, OSError) as e:
            raise FeedConnectionError(f"Connexion perdue pendant la souscription: {e}") from e

    def handle_message(self, raw_message, store: PriceStore) -> Optional[PriceUpdateMessage]:
        """Parse un message entrant et met à jour le store si c'est un ticker."""
        try:
            payload = decode_payload(raw_message)
            if payload.get("type") == "error":
                self.logger.warning(f"⚠️ Erreur du flux: {payload.get('message', '')}")
                return None
            update = parse_payload(payload)
        except MessageParseError as e:
            self.logger.warning(f"⚠️ Message ignoré: {e}")
            return None

        if update is None:
            return None

        store.update(update.symbol, update.price)
        # Log seulement la première mise à jour pour chaque symbole
        if update.symbol not in self._logged_symbols:
            self._logged_symbols.add(update.symbol)
            self.logger.info(f"✅ Prix mis à jour: {update.symbol} = {update.price}")
        return update

    def receive_loop(self, connection, store: PriceStore) -> None:
        """Lit les messages jusqu'à la fermeture ou l'erreur de la connexion."""
        while True:
            try:
                raw = self._read_frame(connection)
            except websocket.WebSocketConnectionClosedException:
                self.logger.info("🔌 WS fermée")
                return
            except (websocket.WebSocketException, OSError) as e:
                if self.running:
                    self.logger.warning(f"⚠️ WS erreur : {e}")
                return

            if raw is None:
                self.logger.info("🔌 WS fermée par le flux (frame de fermeture)")
                return
            if raw:
                self.handle_message(raw, store)

    def print_price_table(self, store: PriceStore) -> None:
        """Affiche le dernier prix de chaque symbole."""
        lines = format_price_table(store.ordered_items())
        print("\n" + "\n".join(lines) + "\n")
        sys.stdout.flush()

    def print_loop(self, store: PriceStore) -> None:
        """Boucle d'affichage toutes les ``print_interval`` secondes."""
        interval = self.settings["print_interval"]
        while not self._stop_event.wait(interval):
            self.print_price_table(store)

    def stop(self):
        """Arrête la boucle d'affichage et ferme la WebSocket."""
        self.running = False
        self._stop_event.set()
        if self.ws:
            try:
                self.ws.close()
            except (websocket.WebSocketException, OSError) as e:
                self.logger.debug(f"Fermeture WS: {e}")
            self.ws = None
        if self.display_thread and self.display_thread is not threading.current_thread():
            self.display_thread.join(timeout=1)

    def start(self):
        """
        Charge les symboles, se connecte, souscrit puis suit les prix.

        Bloquant jusqu'à la fin de la connexion.

        Raises:
            ConfigError: Fichier de symboles invalide
            FeedConnectionError: Connexion impossible ou perdue
            ProtocolError: Souscription rejetée
        """
        symbols = load_symbols(self.settings["symbols_file"], logger=self.logger)
        store = PriceStore(symbols)

        connection = self.connect(self.settings["feed_url"])
        try:
            self.subscribe(connection, store.symbols)
            self.running = True

            # Démarrer le thread d'affichage
            self.display_thread = threading.Thread(
                target=self.print_loop, args=(store,), name="price-display"
            )
            self.display_thread.daemon = True
            self.display_thread.start()

            self.receive_loop(connection, store)
        finally:
            stopped_on_request = self._stop_event.is_set()
            self.stop()

        if not stopped_on_request:
            raise FeedConnectionError("Connexion au flux perdue")


def main():
    """Fonction principale."""
    logger = setup_logging()
    settings = get_settings()
    logger.info("🚀 Suivi des prix crypto (WS Coinbase)")

    tracker = PriceTracker(settings=settings, logger=logger)
    tracker.install_signal_handlers()
    try:
        tracker.start()
    except TrackerError as e:
        logger.error(f"❌ Erreur : {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
