"""Application service: Submit Cart use case.

Runs checkout for the current cart and clears the cart only when the
backend confirmed the order. On failure the cart is kept so the
customer can try again.
"""

from __future__ import annotations

from storefront.application.checkout import CheckoutOrchestrator
from storefront.application.dto import CartSummaryDTO
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Store
from storefront.domain.model.order import SubmissionResult


class SubmitCartHandler:

    def __init__(self, orchestrator: CheckoutOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def handle(self, cart: Cart, store: Store) -> SubmissionResult:
        result = await self._orchestrator.checkout(
            cart.snapshot(), store_name=store.name, store_id=store.id
        )
        if result.success:
            cart.clear()
        return result


def summarize(cart: Cart) -> CartSummaryDTO:
    return CartSummaryDTO(
        total_items=cart.total_items,
        total_value=str(cart.total_value),
    )
