#!/usr/bin/env python3
import json
from decimal import Decimal, InvalidOperation
from typing import Optional

from exceptions import MessageParseError
from .models import PriceUpdateMessage


def decode_payload(raw_message) -> dict:
    """Décode un message brut en dictionnaire JSON."""
    try:
        payload = json.loads(raw_message)
    except (TypeError, ValueError) as e:
        raise MessageParseError(f"JSON invalide: {e}")
    if not isinstance(payload, dict):
        raise MessageParseError(f"Objet JSON attendu, reçu {type(payload).__name__}")
    return payload


def parse_message(raw_message) -> Optional[PriceUpdateMessage]:
    """Parse un message brut du flux (voir parse_payload)."""
    return parse_payload(decode_payload(raw_message))


def parse_payload(payload: dict) -> Optional[PriceUpdateMessage]:
    """
    Convertit un message décodé du flux en PriceUpdateMessage.

    Returns:
        PriceUpdateMessage pour un ticker avec prix, None pour les autres
        types de messages (souscriptions, heartbeats...) et les tickers sans prix

    Raises:
        MessageParseError: product_id absent ou prix non décimal
    """
    if payload.get("type") != "ticker":
        return None

    raw_price = payload.get("price")
    if raw_price is None:
        return None

    symbol = payload.get("product_id")
    if not isinstance(symbol, str) or not symbol:
        raise MessageParseError(f"product_id manquant: {payload!r}")

    try:
        price = Decimal(str(raw_price))
    except (InvalidOperation, ValueError) as e:
        raise MessageParseError(f"Prix invalide pour {symbol}: {raw_price!r}") from e
    if not price.is_finite():
        raise MessageParseError(f"Prix invalide pour {symbol}: {raw_price!r}")

    return PriceUpdateMessage(symbol=symbol, price=price)
