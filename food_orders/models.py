"""Domain models for food-orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class MenuEntry:
    """A purchasable menu item."""

    item_id: str
    name: str
    icon: str
    unit_price: Decimal


class PaymentMethod(Enum):
    """How the customer pays."""

    APPLE_PAY = "ApplePay"
    PAY_AT_STORE = "Pay at Store"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class OrderState:
    """Mutable form state for one ordering session."""

    quantities: dict[str, int] = field(default_factory=dict)
    customer_name: str = ""
    customer_phone: str = ""
    delivery: bool = False
    delivery_address: str = ""
    payment_method: PaymentMethod = PaymentMethod.APPLE_PAY
    summary_visible: bool = False

    def quantity(self, item_id: str) -> int:
        """Return the quantity for an item, 0 when never set."""
        return self.quantities.get(item_id, 0)


@dataclass(frozen=True)
class PriceSummary:
    """Derived price values for the current cart."""

    total_items: int
    subtotal: Decimal
    tax: Decimal
    delivery_fee: Decimal
    total: Decimal


@dataclass(frozen=True)
class OrderConfirmation:
    """Values shown on the confirmation sheet."""

    customer_name: str
    customer_phone: str
    delivery: bool
    delivery_address: str
    payment_method: PaymentMethod
    total: Decimal
