"""Build-time configuration for pricing, quantity bounds and debug logging."""

from __future__ import annotations

import os
from decimal import Decimal

TAX_RATE = Decimal("0.0805")
DELIVERY_RATE = Decimal("0.10")

# Stepper range for every menu line.
QUANTITY_MIN = 0
QUANTITY_MAX = 10

CURRENCY_SYMBOL = "$"

_DEBUG_LOG_ENV = "FOOD_ORDERS_DEBUG_LOG"
DEBUG_LOG_PATH = os.environ.get(_DEBUG_LOG_ENV, "").strip() or "/tmp/food-orders-debug.log"
