"""Module pour stocker et gérer les derniers prix en temps réel."""

import threading
from decimal import Decimal
from typing import Dict, List, Optional, Tuple


class PriceStore:
    """
    Dernier prix connu par symbole, partagé entre la boucle de réception
    (seul écrivain) et la boucle d'affichage (seul lecteur).

    Tous les accès passent par un unique verrou. Un symbole absent signifie
    qu'aucune mise à jour n'a encore été reçue.
    """

    def __init__(self, symbols: List[str]):
        self._symbols = list(dict.fromkeys(symbols))
        self._prices: Dict[str, Decimal] = {}
        self._lock = threading.Lock()

    @property
    def symbols(self) -> List[str]:
        return list(self._symbols)

    def update(self, symbol: str, price: Decimal) -> None:
        """
        Met à jour le prix pour un symbole donné (le dernier écrit gagne).

        Args:
            symbol (str): Symbole (ex: BTC-USD)
            price (Decimal): Dernier prix observé
        """
        with self._lock:
            self._prices[symbol] = price

    def get_snapshot(self) -> Dict[str, Decimal]:
        """Retourne une copie du dictionnaire des prix."""
        with self._lock:
            return self._prices.copy()

    def ordered_items(self) -> List[Tuple[str, Optional[Decimal]]]:
        """
        Retourne les paires (symbole, prix) dans l'ordre de chargement.

        Le prix vaut None tant qu'aucune mise à jour n'a été reçue.
        """
        with self._lock:
            return [(symbol, self._prices.get(symbol)) for symbol in self._symbols]
