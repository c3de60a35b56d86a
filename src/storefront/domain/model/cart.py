"""Cart aggregate: the customer's pending selection, per browsing session.

The cart owns a mapping of product id -> CartLine.

Invariants:
- every line holds a quantity >= 1; a line reaching zero is removed
- keys are unique product ids
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: Quantity

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:

    def __init__(self) -> None:
        self._lines: dict[str, CartLine] = {}

    # --- Mutations ------------------------------------------------------------

    def change_quantity(self, product: Product, delta: int) -> None:
        """Add *delta* (usually +1 or -1) to the product's quantity.

        A result of zero or less removes the line; it is never rejected.
        """
        new_quantity = self.quantity_of(product.id) + delta
        if new_quantity <= 0:
            self._lines.pop(product.id, None)
        else:
            self._lines[product.id] = CartLine(product, Quantity(new_quantity))

    def clear(self) -> None:
        self._lines = {}

    # --- Queries --------------------------------------------------------------

    def snapshot(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def quantity_of(self, product_id: str) -> int:
        line = self._lines.get(product_id)
        return line.quantity.value if line else 0

    def subtotal_of(self, product_id: str) -> Money | None:
        line = self._lines.get(product_id)
        return line.subtotal if line else None

    @property
    def total_items(self) -> int:
        return sum(line.quantity.value for line in self._lines.values())

    @property
    def total_value(self) -> Money:
        result = Money.zero()
        for line in self._lines.values():
            result = result + line.subtotal
        return result

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)
