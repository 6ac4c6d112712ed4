"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Button, Header, Input, Label, RadioButton, RadioSet, Static, Switch

from food_orders.debuglog import log_debug
from food_orders.errors import OrderError
from food_orders.form import OrderForm
from food_orders.models import PaymentMethod
from food_orders.rendering import format_cart_indicator, format_menu_line, format_price_summary
from food_orders.summary_modal import SummaryModal

_PAYMENT_BY_BUTTON_ID = {f"pay-{method.name.lower().replace('_', '-')}": method for method in PaymentMethod}


class MenuList(Static):
    """Focusable menu with a cursor and per-line quantity stepper."""

    can_focus = True

    BINDINGS = [
        Binding("up,k", "move_cursor(-1)", "Previous"),
        Binding("down,j", "move_cursor(1)", "Next"),
        Binding("right,plus,equals_sign,l", "adjust(1)", "Add one"),
        Binding("left,minus,h", "adjust(-1)", "Remove one"),
    ]

    cursor_index = reactive(0)

    def __init__(self, form: OrderForm, **kwargs) -> None:
        super().__init__(**kwargs)
        self.form = form

    def on_mount(self) -> None:
        self.refresh_lines()

    def action_move_cursor(self, delta: int) -> None:
        if not self.form.catalog:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.form.catalog)
        self.refresh_lines()

    def action_adjust(self, delta: int) -> None:
        if not self.form.catalog:
            return
        entry = self.form.catalog[self.cursor_index]
        stored = self.form.adjust_quantity(entry.item_id, delta)
        log_debug(f"quantity item={entry.item_id} delta={delta} stored={stored}")

    def refresh_lines(self) -> None:
        lines = Text()
        for idx, entry in enumerate(self.form.catalog):
            if idx > 0:
                lines.append("\n")
            lines.append_text(format_menu_line(entry, self.form.quantity(entry.item_id), selected=idx == self.cursor_index))
        self.update(lines)


class FoodOrderApp(App):
    """A Textual app for picking menu quantities and confirming one order."""

    TITLE = "Food Orders"
    SUB_TITLE = "Order ahead"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #form-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #cart-indicator {
        text-style: bold;
        margin-bottom: 1;
    }

    #menu-list {
        height: auto;
        border: tall $surface;
        padding: 0 1;
        margin-bottom: 1;
    }

    #menu-list:focus {
        border: tall $accent;
    }

    #price-summary {
        height: auto;
        padding: 0 1;
    }

    #delivery-row {
        height: auto;
        margin-top: 1;
    }

    #delivery-label {
        padding: 1 1 0 0;
    }

    #payment-set {
        margin: 1 0;
    }

    #status-line {
        margin-top: 1;
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "confirm_order", "Confirm Order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, form: OrderForm | None = None) -> None:
        super().__init__()
        self.form = form if form is not None else OrderForm()
        self.system_status = ""
        self._unsubscribe = self.form.subscribe(self._refresh_all)
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Menu", classes="pane-title")
                yield Static(id="cart-indicator")
                yield MenuList(self.form, id="menu-list")
                yield Static(id="price-summary")
            with Vertical(id="form-pane"):
                yield Static("Your Details", classes="pane-title")
                yield Input(placeholder="Your Name", id="name-input")
                yield Input(placeholder="Phone Number", id="phone-input")
                with Horizontal(id="delivery-row"):
                    yield Label("Deliver to Address?", id="delivery-label")
                    yield Switch(value=self.form.state.delivery, id="delivery-switch")
                yield Input(placeholder="Delivery Address", id="address-input")
                with RadioSet(id="payment-set"):
                    for button_id, method in _PAYMENT_BY_BUTTON_ID.items():
                        yield RadioButton(method.label, value=method is self.form.state.payment_method, id=button_id)
                yield Button("Confirm Order", id="confirm-button", variant="primary", disabled=True)
                yield Static(id="status-line")

    def on_mount(self) -> None:
        self.query_one("#menu-list", MenuList).focus()
        self._refresh_all()

    def on_unmount(self) -> None:
        self._unsubscribe()

    def on_input_changed(self, event: Input.Changed) -> None:
        input_id = event.input.id
        if input_id == "name-input":
            self.form.set_customer_name(event.value)
        elif input_id == "phone-input":
            self.form.set_customer_phone(event.value)
        elif input_id == "address-input":
            self.form.set_delivery_address(event.value)
        else:
            return
        log_debug(f"field_changed field={input_id} length={len(event.value)}")

    def on_switch_changed(self, event: Switch.Changed) -> None:
        if event.switch.id != "delivery-switch":
            return
        self.form.set_delivery(event.value)
        log_debug(f"delivery_changed value={event.value}")

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        method = _PAYMENT_BY_BUTTON_ID.get(event.pressed.id or "")
        if method is None:
            return
        self.form.set_payment_method(method)
        log_debug(f"payment_changed method={method.name}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "confirm-button":
            self.action_confirm_order()

    def action_confirm_order(self) -> None:
        if isinstance(self.screen, SummaryModal):
            return
        try:
            confirmation = self.form.confirm()
        except OrderError as exc:
            self.system_status = f"Cannot confirm: {exc}"
            self._refresh_status()
            log_debug(f"confirm_blocked error={exc!r}")
            return

        self.system_status = ""
        log_debug(f"confirm_shown items={self.form.summary.total_items} total={confirmation.total}")
        self.push_screen(SummaryModal(confirmation, on_close=self._on_summary_closed))

    def _on_summary_closed(self) -> None:
        self.form.dismiss_summary()
        log_debug("confirm_dismissed")

    def _refresh_all(self) -> None:
        try:
            menu_list = self.query_one("#menu-list", MenuList)
        except NoMatches:
            return
        self.system_status = ""
        state = self.form.state
        summary = self.form.summary

        self.query_one("#cart-indicator", Static).update(format_cart_indicator(summary.total_items))
        menu_list.refresh_lines()
        self.query_one("#price-summary", Static).update(format_price_summary(summary))
        self.query_one("#address-input", Input).display = state.delivery
        self.query_one("#confirm-button", Button).disabled = not self.form.can_submit
        self._refresh_status()

    def _refresh_status(self) -> None:
        try:
            status = self.query_one("#status-line", Static)
        except NoMatches:
            return
        if self.system_status:
            status.update(self.system_status)
        elif self.form.can_submit:
            status.update("Ready. Ctrl+S or Confirm Order to place it.")
        else:
            status.update("Add items, your name and phone to order.")
