"""Entry point for the food-orders Textual app."""

from __future__ import annotations

from food_orders.order_app import FoodOrderApp


def main() -> None:
    """Run the Textual application."""
    FoodOrderApp().run()


if __name__ == "__main__":
    main()
