"""Domain service: Order Message Builder.

Turns a cart snapshot into the text the customer sends over WhatsApp.
The output depends only on its inputs, so identical carts always give
identical messages.
"""

from __future__ import annotations

from typing import Iterable

from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money

SEPARATOR = "─" * 30
FOOTER = "_Message generated by the online catalog_"


class OrderMessageBuilder:

    def __init__(self, brand_name: str) -> None:
        self._brand_name = brand_name

    def build(
        self,
        lines: Iterable[CartLine],
        store_name: str,
        order_id: str | None = None,
    ) -> str:
        if order_id is not None:
            header = f"🛒 *Order #{order_id} - {self._brand_name}*"
        else:
            header = f"🛒 *New order - {self._brand_name}*"

        out: list[str] = [
            header,
            f"📍 Store: {store_name}",
            "",
            "*Order items:*",
        ]

        # Exact subtotals are summed; only the rendered values are rounded.
        total = Money.zero()
        for index, line in enumerate(lines, start=1):
            subtotal = line.subtotal
            total = total + subtotal
            out.extend([
                f"{index}. {line.product.description}",
                f"   Qty: {line.quantity.value} x {line.product.price} = {subtotal}",
                "",
            ])

        out.append(SEPARATOR)
        out.append(f"*TOTAL: {total}*")
        out.append("")
        out.append(FOOTER)

        return "\n".join(out)
