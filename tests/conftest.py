from __future__ import annotations

from pathlib import Path

import pytest

from food_orders.form import OrderForm
from food_orders.models import OrderState


@pytest.fixture(autouse=True)
def debug_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    log_path = tmp_path / "food-orders-debug.log"
    monkeypatch.setattr("food_orders.debuglog.DEBUG_LOG_PATH", str(log_path))
    return log_path


@pytest.fixture()
def state() -> OrderState:
    return OrderState()


@pytest.fixture()
def form() -> OrderForm:
    return OrderForm()
