"""Session object that owns the order state and announces every change."""

from __future__ import annotations

from typing import Callable

from food_orders import pricing
from food_orders.data import MENU_CATALOG
from food_orders.models import MenuEntry, OrderConfirmation, OrderState, PaymentMethod, PriceSummary

Listener = Callable[[], None]


class OrderForm:
    """Apply user edits to one OrderState and notify listeners after each one.

    Listeners are called with no arguments once a mutation has succeeded;
    they are expected to re-read whatever derived values they render.
    An edit that raises leaves the state untouched and notifies nobody.
    """

    def __init__(self, catalog: tuple[MenuEntry, ...] = MENU_CATALOG, state: OrderState | None = None) -> None:
        self.catalog = catalog
        self.state = state if state is not None else OrderState()
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    @property
    def summary(self) -> PriceSummary:
        return pricing.price_summary(self.state, self.catalog)

    @property
    def can_submit(self) -> bool:
        return pricing.can_submit(self.state)

    def quantity(self, item_id: str) -> int:
        return self.state.quantity(item_id)

    def set_quantity(self, item_id: str, value: int) -> int:
        stored = pricing.set_quantity(self.state, item_id, value, self.catalog)
        self._changed()
        return stored

    def adjust_quantity(self, item_id: str, delta: int) -> int:
        stored = pricing.adjust_quantity(self.state, item_id, delta, self.catalog)
        self._changed()
        return stored

    def set_customer_name(self, value: str) -> None:
        self.state.customer_name = value
        self._changed()

    def set_customer_phone(self, value: str) -> None:
        self.state.customer_phone = value
        self._changed()

    def set_delivery(self, enabled: bool) -> None:
        self.state.delivery = bool(enabled)
        self._changed()

    def set_delivery_address(self, value: str) -> None:
        self.state.delivery_address = value
        self._changed()

    def set_payment_method(self, method: PaymentMethod) -> None:
        self.state.payment_method = PaymentMethod(method)
        self._changed()

    def confirm(self) -> OrderConfirmation:
        confirmation = pricing.confirm_order(self.state, self.catalog)
        self._changed()
        return confirmation

    def dismiss_summary(self) -> None:
        pricing.dismiss_summary(self.state)
        self._changed()
