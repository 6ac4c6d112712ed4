"""Rendering helpers for menu lines, price summaries and the confirmation sheet."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from food_orders.config import CURRENCY_SYMBOL, QUANTITY_MAX, QUANTITY_MIN
from food_orders.constant import ICON_GLYPHS
from food_orders.models import MenuEntry, OrderConfirmation, PriceSummary

_CENT = Decimal("0.01")


def format_currency(amount: Decimal) -> str:
    """Format an amount as a currency-prefixed, two-decimal string."""
    rounded = Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL}{rounded:.2f}"


def format_cart_indicator(count: int) -> str:
    return f"Items in Cart: {count}"


def icon_glyph(entry: MenuEntry) -> str:
    """Return a terminal glyph for the entry's icon reference."""
    return ICON_GLYPHS.get(entry.icon, "•")


def format_stepper(quantity: int) -> Text:
    """Render a compact [-] n [+] stepper, dimming the end that is at its bound."""
    text = Text()
    text.append("[-]", style="dim" if quantity <= QUANTITY_MIN else "bold")
    text.append(f" {quantity:>2} ")
    text.append("[+]", style="dim" if quantity >= QUANTITY_MAX else "bold")
    return text


def format_menu_line(entry: MenuEntry, quantity: int, selected: bool = False) -> Text:
    """Render one menu row with pointer, price, stepper and line total."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(f"{icon_glyph(entry)} ")
    text.append(f"{entry.name:<8}", style="bold" if selected else "")
    text.append(f" {format_currency(entry.unit_price):>7}  ")
    text.append_text(format_stepper(quantity))
    if quantity > 0:
        text.append(f"  = {format_currency(quantity * entry.unit_price)}", style="#5fbf72")
    return text


def format_price_summary(summary: PriceSummary) -> Text:
    """Render subtotal, tax, delivery fee and total as an aligned block."""
    rows = [
        ("Subtotal", summary.subtotal),
        ("Tax", summary.tax),
        ("Delivery", summary.delivery_fee),
    ]
    text = Text()
    for label, amount in rows:
        text.append(f"{label:<10}{format_currency(amount):>10}\n")
    text.append(f"{'Total':<10}{format_currency(summary.total):>10}", style="bold")
    return text


def confirmation_lines(confirmation: OrderConfirmation) -> list[str]:
    """Return the confirmation sheet lines in display order."""
    lines = [
        f"Name: {confirmation.customer_name}",
        f"Phone: {confirmation.customer_phone}",
    ]
    if confirmation.delivery:
        lines.append(f"Delivery Address: {confirmation.delivery_address}")
    else:
        lines.append("Pickup at Store")
    lines.append(f"Payment Method: {confirmation.payment_method.label}")
    lines.append(f"Total: {format_currency(confirmation.total)}")
    return lines
