"""Order confirmation modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from food_orders.models import OrderConfirmation
from food_orders.rendering import confirmation_lines


class SummaryModal(ModalScreen[None]):
    """Centered sheet that shows a confirmed order until dismissed."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("enter", "close", "Close"),
    ]

    CSS = """
    SummaryModal {
        align: center middle;
        background: $background 60%;
    }

    #summary-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #summary-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #summary-body {
        color: white;
        margin-bottom: 1;
    }

    #summary-help {
        color: #dddddd;
    }
    """

    def __init__(self, confirmation: OrderConfirmation, on_close: Callable[[], None]) -> None:
        super().__init__()
        self.confirmation = confirmation
        self.on_close = on_close

    def compose(self) -> ComposeResult:
        with Container(id="summary-dialog"):
            yield Static("✅ Order Confirmation", id="summary-title")
            yield Static(id="summary-body")
            yield Static("Enter / Esc / q to close", id="summary-help")

    def on_mount(self) -> None:
        lines = confirmation_lines(self.confirmation)
        body = Text(style="white")
        for idx, line in enumerate(lines):
            if idx > 0:
                body.append("\n")
            if idx == len(lines) - 1:
                body.append("\n")
                body.append(line, style="bold white")
            else:
                body.append(line)
        self.query_one("#summary-body", Static).update(body)

    def action_close(self) -> None:
        self.dismiss()
        self.on_close()
