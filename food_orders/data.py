"""Static menu catalog."""

from __future__ import annotations

from decimal import Decimal

from food_orders.constant import MENU_ROWS
from food_orders.errors import ValidationError
from food_orders.models import MenuEntry


def build_catalog(rows: list[dict[str, str]]) -> tuple[MenuEntry, ...]:
    """Wrap raw menu rows into an ordered tuple of MenuEntry values."""
    entries: list[MenuEntry] = []
    seen: set[str] = set()
    for row in rows:
        item_id = str(row["item_id"])
        if item_id in seen:
            raise ValueError(f"Duplicate menu id: {item_id}")
        unit_price = Decimal(str(row["unit_price"]))
        if unit_price < 0:
            raise ValueError(f"Negative price for menu id: {item_id}")
        seen.add(item_id)
        entries.append(MenuEntry(item_id=item_id, name=str(row["name"]), icon=str(row["icon"]), unit_price=unit_price))
    return tuple(entries)


MENU_CATALOG: tuple[MenuEntry, ...] = build_catalog(MENU_ROWS)

MENU_BY_ID: dict[str, MenuEntry] = {entry.item_id: entry for entry in MENU_CATALOG}


def is_menu_item(item_id: str, catalog: tuple[MenuEntry, ...] = MENU_CATALOG) -> bool:
    """Return whether the id names an entry of the catalog."""
    if catalog is MENU_CATALOG:
        return item_id in MENU_BY_ID
    return any(entry.item_id == item_id for entry in catalog)


def menu_entry(item_id: str, catalog: tuple[MenuEntry, ...] = MENU_CATALOG) -> MenuEntry:
    """Look up a catalog entry by id."""
    for entry in catalog:
        if entry.item_id == item_id:
            return entry
    raise ValidationError(f"Unknown menu item: {item_id!r}")
