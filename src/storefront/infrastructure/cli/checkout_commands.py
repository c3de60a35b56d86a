"""CLI command for submitting a cart."""

from __future__ import annotations

import asyncio

import click

from storefront.application.browse_catalog import BuildCartHandler
from storefront.application.dto import CartItemSpec, CartSummaryDTO
from storefront.application.submit_cart import SubmitCartHandler, summarize
from storefront.domain.exceptions import DomainException
from storefront.domain.model.catalog import Store
from storefront.domain.model.order import SubmissionResult
from storefront.infrastructure.bootstrap import api_client, checkout_orchestrator
from storefront.infrastructure.cli.parsing import parse_items
from storefront.infrastructure.navigation.navigators import (
    ConsoleNavigator,
    WebBrowserNavigator,
)
from storefront.infrastructure.navigation.platform import UserAgentPlatformClassifier


@click.command("checkout")
@click.option("--store", "store_id", required=True, type=int, help="Store ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option(
    "--user-agent",
    envvar="STOREFRONT_USER_AGENT",
    default=None,
    help="User agent used to choose between redirect and new tab.",
)
@click.option(
    "--print-link",
    is_flag=True,
    default=False,
    help="Print the WhatsApp link instead of opening it.",
)
@click.pass_context
def checkout(
    ctx: click.Context,
    store_id: int,
    items: str,
    user_agent: str | None,
    print_link: bool,
) -> None:
    """Submit an order and send it over WhatsApp."""
    specs = parse_items(items)

    navigator = ConsoleNavigator() if print_link else WebBrowserNavigator()
    orchestrator = checkout_orchestrator(UserAgentPlatformClassifier(user_agent), navigator)

    try:
        store, summary, result = asyncio.run(
            _run(store_id, specs, SubmitCartHandler(orchestrator))
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store: {store.name}")
    click.echo(f"Cart:  {summary.total_items} item(s), total {summary.total_value}")

    if not result.dispatched and result.url:
        click.echo(f"Could not open WhatsApp, send the order with: {result.url}", err=True)

    if result.success:
        click.echo(f"Order #{result.order_id} recorded — cart cleared.")
        return

    click.echo(f"Order was not recorded: {result.error}", err=True)
    if result.dispatched:
        click.echo(
            "WhatsApp message sent without an order number; cart kept for retry.",
            err=True,
        )
    ctx.exit(1)


async def _run(
    store_id: int,
    specs: list[CartItemSpec],
    handler: SubmitCartHandler,
) -> tuple[Store, CartSummaryDTO, SubmissionResult]:
    store, cart = await BuildCartHandler(api_client()).handle(store_id, specs)
    summary = summarize(cart)
    result = await handler.handle(cart, store)
    return store, summary, result
