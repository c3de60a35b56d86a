"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a product id and how many units the customer wants."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductRowDTO:
    """Output: one row of the product table."""

    product_id: str
    description: str
    color: str
    category: str
    price: str  # formatted, e.g. "R$ 10,00"
    quantity: int
    subtotal: str  # "-" when not in the cart


@dataclass(frozen=True)
class CartSummaryDTO:
    total_items: int
    total_value: str
