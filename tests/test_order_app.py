from __future__ import annotations

from pathlib import Path

import pytest
from textual.widgets import Button, Input, Switch

from food_orders.form import OrderForm
from food_orders.order_app import FoodOrderApp
from food_orders.summary_modal import SummaryModal


async def _fill_contact(app: FoodOrderApp, pilot) -> None:
    app.query_one("#name-input", Input).value = "Al"
    app.query_one("#phone-input", Input).value = "555"
    await pilot.pause()


@pytest.mark.asyncio
async def test_stepper_keys_update_quantities_and_cart() -> None:
    app = FoodOrderApp()
    async with app.run_test() as pilot:
        await pilot.press("right", "right", "down", "right", "left", "left")
        await pilot.pause()

        assert app.form.quantity("burger") == 2
        assert app.form.quantity("fries") == 0
        assert app.form.summary.total_items == 2


@pytest.mark.asyncio
async def test_confirm_button_follows_can_submit() -> None:
    app = FoodOrderApp()
    async with app.run_test() as pilot:
        button = app.query_one("#confirm-button", Button)
        assert button.disabled

        await pilot.press("right")
        await _fill_contact(app, pilot)
        assert not button.disabled

        app.query_one("#delivery-switch", Switch).value = True
        await pilot.pause()
        assert app.form.state.delivery
        assert app.query_one("#address-input", Input).display
        assert button.disabled

        app.query_one("#address-input", Input).value = "1 Main St"
        await pilot.pause()
        assert not button.disabled


@pytest.mark.asyncio
async def test_confirm_opens_summary_and_dismiss_hides_it(debug_log: Path) -> None:
    app = FoodOrderApp()
    async with app.run_test() as pilot:
        await pilot.press("right")
        await _fill_contact(app, pilot)

        await pilot.press("ctrl+s")
        await pilot.pause()
        assert isinstance(app.screen, SummaryModal)
        assert app.form.state.summary_visible

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, SummaryModal)
        assert not app.form.state.summary_visible

    assert "confirm_shown" in debug_log.read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_blocked_confirm_reports_status() -> None:
    form = OrderForm()
    app = FoodOrderApp(form)
    async with app.run_test() as pilot:
        await pilot.press("ctrl+s")
        await pilot.pause()
        assert not isinstance(app.screen, SummaryModal)
        assert not form.state.summary_visible
        assert app.system_status.startswith("Cannot confirm")
