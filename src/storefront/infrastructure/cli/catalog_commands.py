"""CLI commands for browsing the catalog."""

from __future__ import annotations

import asyncio

import click

from storefront.application.browse_catalog import (
    BrowseProductsHandler,
    ListStoresHandler,
    ShowFiltersHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import FILTER_KINDS, ProductQuery
from storefront.infrastructure.bootstrap import api_client
from storefront.infrastructure.cli.parsing import parse_items


@click.command("stores")
def stores() -> None:
    """List the stores that publish a catalog."""
    handler = ListStoresHandler(api_client())

    try:
        result = asyncio.run(handler.handle())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result:
        click.echo("No stores found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'City':<20}")
    click.echo("-" * 58)
    for store in result:
        click.echo(f"{store.id:<6} {store.name:<30} {store.city or '-':<20}")


@click.command("products")
@click.option("--store", "store_id", required=True, type=int, help="Store ID.")
@click.option("--group", type=int, default=None, help="Group filter ID.")
@click.option("--brand", type=int, default=None, help="Brand filter ID.")
@click.option("--category", type=int, default=None, help="Category filter ID.")
@click.option("--color", type=int, default=None, help="Color filter ID.")
@click.option("--search", default=None, help="Search by model description.")
@click.option("--cart", "cart_items", default=None, help="Cart as 'ProductId:Qty,...'.")
def products(
    store_id: int,
    group: int | None,
    brand: int | None,
    category: int | None,
    color: int | None,
    search: str | None,
    cart_items: str | None,
) -> None:
    """Show the product table of a store."""
    specs = parse_items(cart_items) if cart_items else []
    query = ProductQuery(
        group=group, brand=brand, category=category, color=color, search=search
    )
    handler = BrowseProductsHandler(api_client())

    try:
        page = asyncio.run(handler.handle(store_id, query))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not page.products:
        click.echo("No products found.")
        return

    cart = Cart()
    by_id = {product.id: product for product in page.products}
    for spec in specs:
        # Products hidden by the filters simply do not show up.
        if spec.product_id in by_id and spec.quantity > 0:
            cart.change_quantity(by_id[spec.product_id], spec.quantity)

    click.echo(f"{page.store.name} — {page.total} product(s)")
    click.echo()
    click.echo(
        f"{'ID':<8} {'Model':<30} {'Color':<12} {'Quality':<12} "
        f"{'Price':>12} {'Qty':>5} {'Subtotal':>12}"
    )
    click.echo("-" * 97)
    for row in BrowseProductsHandler.to_rows(page, cart):
        click.echo(
            f"{row.product_id:<8} {row.description:<30} {row.color:<12} {row.category:<12} "
            f"{row.price:>12} {row.quantity:>5} {row.subtotal:>12}"
        )

    if not cart.is_empty:
        click.echo("-" * 97)
        click.echo(f"Cart: {cart.total_items} item(s), total {cart.total_value}")


@click.command("filters")
@click.option("--store", "store_id", required=True, type=int, help="Store ID.")
def filters(store_id: int) -> None:
    """Show the filter options of a store."""
    handler = ShowFiltersHandler(api_client())

    try:
        result = asyncio.run(handler.handle(store_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for kind in FILTER_KINDS:
        options = getattr(result, kind)
        if not options:
            continue
        click.echo(f"{kind.capitalize()}:")
        for option in options:
            click.echo(f"  {option.id:>5}  {option.name}")
