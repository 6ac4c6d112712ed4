"""Editable static menu data."""

from __future__ import annotations

# Canonical menu rows consumed by food_orders.data (which wraps these into MenuEntry instances).
# Order here is the display order of the menu.
MENU_ROWS: list[dict[str, str]] = [
    {"item_id": "burger", "name": "Burger", "icon": "hamburger", "unit_price": "8.99"},
    {"item_id": "fries", "name": "Fries", "icon": "fries", "unit_price": "3.49"},
    {"item_id": "taco", "name": "Taco", "icon": "taco", "unit_price": "4.99"},
    {"item_id": "salad", "name": "Salad", "icon": "leaf", "unit_price": "6.75"},
    {"item_id": "soda", "name": "Soda", "icon": "cup.and.saucer", "unit_price": "2.25"},
]

# Terminal glyphs shown in place of the icon references.
ICON_GLYPHS: dict[str, str] = {
    "hamburger": "🍔",
    "fries": "🍟",
    "taco": "🌮",
    "leaf": "🥗",
    "cup.and.saucer": "🥤",
}
