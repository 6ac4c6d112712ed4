from __future__ import annotations

from decimal import Decimal

import pytest

from food_orders.data import MENU_CATALOG, build_catalog, is_menu_item, menu_entry
from food_orders.errors import ValidationError


def test_catalog_has_five_fixed_entries_in_order() -> None:
    assert [(e.name, e.unit_price) for e in MENU_CATALOG] == [
        ("Burger", Decimal("8.99")),
        ("Fries", Decimal("3.49")),
        ("Taco", Decimal("4.99")),
        ("Salad", Decimal("6.75")),
        ("Soda", Decimal("2.25")),
    ]


def test_catalog_ids_are_unique() -> None:
    ids = [e.item_id for e in MENU_CATALOG]
    assert len(ids) == len(set(ids))


def test_menu_entry_lookup() -> None:
    assert menu_entry("taco").icon == "taco"
    assert is_menu_item("salad")
    assert not is_menu_item("pizza")


def test_menu_entry_unknown_id_raises() -> None:
    with pytest.raises(ValidationError):
        menu_entry("pizza")


def test_entries_are_immutable() -> None:
    with pytest.raises(AttributeError):
        MENU_CATALOG[0].unit_price = Decimal("1.00")  # type: ignore[misc]


def test_build_catalog_rejects_duplicate_ids() -> None:
    rows = [
        {"item_id": "a", "name": "A", "icon": "x", "unit_price": "1.00"},
        {"item_id": "a", "name": "A2", "icon": "x", "unit_price": "2.00"},
    ]
    with pytest.raises(ValueError):
        build_catalog(rows)


def test_build_catalog_rejects_negative_price() -> None:
    with pytest.raises(ValueError):
        build_catalog([{"item_id": "a", "name": "A", "icon": "x", "unit_price": "-1"}])


def test_is_menu_item_with_custom_catalog() -> None:
    catalog = build_catalog([{"item_id": "tea", "name": "Tea", "icon": "cup", "unit_price": "1.50"}])
    assert is_menu_item("tea", catalog)
    assert not is_menu_item("burger", catalog)
