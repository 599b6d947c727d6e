#!/usr/bin/env python3
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PriceUpdateMessage:
    symbol: str
    price: Decimal
