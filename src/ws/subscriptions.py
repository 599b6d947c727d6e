#!/usr/bin/env python3
from typing import Dict, List

TICKER_CHANNEL = "ticker"


class SubscriptionBuilder:
    """Construit les messages de souscription aux canaux Coinbase."""

    @staticmethod
    def ticker(symbols: List[str]) -> Dict:
        product_ids = list(dict.fromkeys(s for s in symbols if s))
        return {
            "type": "subscribe",
            "channels": [{"name": TICKER_CHANNEL, "product_ids": product_ids}],
        }
