"""Option parsing shared by the CLI commands."""

from __future__ import annotations

import click

from storefront.application.dto import CartItemSpec


def parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'A1:2,B7:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(CartItemSpec(product_id=product_id.strip(), quantity=qty))
    if not specs:
        raise click.BadParameter("At least one item is required.")
    return specs
