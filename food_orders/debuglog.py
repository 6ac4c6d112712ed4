"""Append-only debug log."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from food_orders.config import DEBUG_LOG_PATH


def log_debug(message: str, path: str | Path | None = None) -> None:
    """Append one timestamped line to the debug log."""
    log_path = Path(path if path is not None else DEBUG_LOG_PATH)
    try:
        ts = datetime.now(timezone.utc).isoformat()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with app flow.
        return
