"""Error types raised by the order model."""

from __future__ import annotations


class OrderError(Exception):
    """Base class for order form failures."""


class ValidationError(OrderError, ValueError):
    """Raised for input outside the documented domain, e.g. an unknown menu id."""


class PreconditionError(OrderError):
    """Raised when confirming an order that cannot be submitted yet."""
