"""Order calculations and the submit gate.

Everything here is a plain function over an :class:`OrderState` (or a slice of
it). Money values are :class:`~decimal.Decimal` and are never rounded here;
rounding to two places happens only when a value is rendered.
"""

from __future__ import annotations

from decimal import Decimal

from food_orders.config import DELIVERY_RATE, QUANTITY_MAX, QUANTITY_MIN, TAX_RATE
from food_orders.data import MENU_CATALOG, is_menu_item
from food_orders.errors import PreconditionError, ValidationError
from food_orders.models import MenuEntry, OrderConfirmation, OrderState, PriceSummary

_ZERO = Decimal("0")


def clamp_quantity(value: int) -> int:
    """Clamp a requested quantity into the stepper range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Quantity must be an integer, got {value!r}")
    return max(QUANTITY_MIN, min(QUANTITY_MAX, value))


def set_quantity(
    state: OrderState,
    item_id: str,
    value: int,
    catalog: tuple[MenuEntry, ...] = MENU_CATALOG,
) -> int:
    """Store the clamped quantity for a menu item and return the stored value."""
    if not is_menu_item(item_id, catalog):
        raise ValidationError(f"Unknown menu item: {item_id!r}")
    clamped = clamp_quantity(value)
    state.quantities[item_id] = clamped
    return clamped


def adjust_quantity(
    state: OrderState,
    item_id: str,
    delta: int,
    catalog: tuple[MenuEntry, ...] = MENU_CATALOG,
) -> int:
    """Apply a stepper delta to a menu item's quantity."""
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise ValidationError(f"Quantity delta must be an integer, got {delta!r}")
    return set_quantity(state, item_id, state.quantity(item_id) + delta, catalog)


def total_items(state: OrderState) -> int:
    return sum(state.quantities.values())


def line_total(state: OrderState, entry: MenuEntry) -> Decimal:
    return state.quantity(entry.item_id) * entry.unit_price


def subtotal(state: OrderState, catalog: tuple[MenuEntry, ...] = MENU_CATALOG) -> Decimal:
    total_value = _ZERO
    for entry in catalog:
        total_value += line_total(state, entry)
    return total_value


def tax(subtotal_value: Decimal) -> Decimal:
    return subtotal_value * TAX_RATE


def delivery_fee(subtotal_value: Decimal, delivery_enabled: bool) -> Decimal:
    if not delivery_enabled:
        return _ZERO
    return subtotal_value * DELIVERY_RATE


def total(subtotal_value: Decimal, tax_value: Decimal, delivery_fee_value: Decimal) -> Decimal:
    return subtotal_value + tax_value + delivery_fee_value


def price_summary(state: OrderState, catalog: tuple[MenuEntry, ...] = MENU_CATALOG) -> PriceSummary:
    """Compute every derived price value for the current state."""
    subtotal_value = subtotal(state, catalog)
    tax_value = tax(subtotal_value)
    fee_value = delivery_fee(subtotal_value, state.delivery)
    return PriceSummary(
        total_items=total_items(state),
        subtotal=subtotal_value,
        tax=tax_value,
        delivery_fee=fee_value,
        total=total(subtotal_value, tax_value, fee_value),
    )


def can_submit(state: OrderState) -> bool:
    """Return whether the confirm action should be enabled."""
    if not state.customer_name or not state.customer_phone:
        return False
    if total_items(state) <= 0:
        return False
    if state.delivery and not state.delivery_address:
        return False
    return True


def confirm_order(state: OrderState, catalog: tuple[MenuEntry, ...] = MENU_CATALOG) -> OrderConfirmation:
    """Show the confirmation sheet for a submittable order."""
    if not can_submit(state):
        raise PreconditionError("Order cannot be submitted yet")

    state.summary_visible = True
    return OrderConfirmation(
        customer_name=state.customer_name,
        customer_phone=state.customer_phone,
        delivery=state.delivery,
        delivery_address=state.delivery_address,
        payment_method=state.payment_method,
        total=price_summary(state, catalog).total,
    )


def dismiss_summary(state: OrderState) -> None:
    state.summary_visible = False
