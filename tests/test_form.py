from __future__ import annotations

from decimal import Decimal

import pytest

from food_orders.errors import PreconditionError, ValidationError
from food_orders.form import OrderForm
from food_orders.models import PaymentMethod


def test_listeners_run_after_each_edit(form: OrderForm) -> None:
    calls: list[int] = []
    form.subscribe(lambda: calls.append(form.summary.total_items))

    form.adjust_quantity("burger", 1)
    form.set_quantity("fries", 2)
    form.set_customer_name("Al")

    assert calls == [1, 3, 3]


def test_unsubscribe_stops_notifications(form: OrderForm) -> None:
    calls: list[str] = []
    unsubscribe = form.subscribe(lambda: calls.append("x"))
    form.set_customer_phone("555")
    unsubscribe()
    unsubscribe()
    form.set_customer_phone("556")
    assert calls == ["x"]


def test_failed_edit_notifies_nobody(form: OrderForm) -> None:
    calls: list[str] = []
    form.subscribe(lambda: calls.append("x"))

    with pytest.raises(ValidationError):
        form.set_quantity("pizza", 1)
    with pytest.raises(PreconditionError):
        form.confirm()

    assert calls == []
    assert not form.state.summary_visible


def test_delivery_flow_gates_submit(form: OrderForm) -> None:
    form.set_customer_name("Al")
    form.set_customer_phone("555")
    form.set_quantity("burger", 1)
    form.set_delivery(True)
    assert not form.can_submit

    form.set_delivery_address("1 Main St")
    assert form.can_submit


def test_confirm_and_dismiss_cycle(form: OrderForm) -> None:
    form.set_customer_name("Al")
    form.set_customer_phone("555")
    form.set_quantity("burger", 2)
    form.set_quantity("fries", 1)
    form.set_delivery(True)
    form.set_delivery_address("1 Main St")
    form.set_payment_method(PaymentMethod.PAY_AT_STORE)

    confirmation = form.confirm()
    assert form.state.summary_visible
    assert confirmation.delivery_address == "1 Main St"
    assert confirmation.total == Decimal("25.345335")

    form.dismiss_summary()
    assert not form.state.summary_visible


def test_payment_method_accepts_value_string(form: OrderForm) -> None:
    form.set_payment_method("Pay at Store")  # type: ignore[arg-type]
    assert form.state.payment_method is PaymentMethod.PAY_AT_STORE
