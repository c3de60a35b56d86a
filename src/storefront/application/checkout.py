"""Application service: Checkout.

Orchestrates order submission, message building and deep-link dispatch
for one cart:

    IDLE -> SUBMITTING -> SUBMITTED | SUBMIT_FAILED -> DISPATCHED -> IDLE

A failed submission does not stop the workflow: the customer still
reaches WhatsApp, only without an order number. Empty carts and calls
made while another checkout is running are rejected before any side
effect.
"""

from __future__ import annotations

import logging
from typing import Sequence

from storefront.domain.exceptions import (
    CheckoutInProgressError,
    EmptyCartError,
    SubmissionError,
)
from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import CheckoutState, OrderPayload, SubmissionResult
from storefront.domain.repository.order_submission_client import OrderSubmissionClient
from storefront.domain.service.deep_link import DeepLinkDispatcher, WhatsAppLinkBuilder
from storefront.domain.service.order_message_builder import OrderMessageBuilder

logger = logging.getLogger(__name__)


class CheckoutOrchestrator:

    def __init__(
        self,
        order_client: OrderSubmissionClient,
        message_builder: OrderMessageBuilder,
        link_builder: WhatsAppLinkBuilder,
        dispatcher: DeepLinkDispatcher,
    ) -> None:
        self._order_client = order_client
        self._message_builder = message_builder
        self._link_builder = link_builder
        self._dispatcher = dispatcher
        self._state = CheckoutState.IDLE

    @property
    def state(self) -> CheckoutState:
        return self._state

    async def checkout(
        self,
        lines: Sequence[CartLine],
        store_name: str,
        store_id: int,
    ) -> SubmissionResult:
        """Submit the order and open the WhatsApp deep link.

        Never raises for submission or navigation failures; they are
        reported on the returned SubmissionResult. ``dispatched`` is
        False when the link could not be opened.
        """
        if not lines:
            return SubmissionResult.failed(str(EmptyCartError()))
        if self._state != CheckoutState.IDLE:
            logger.info("Checkout ignored, state is %s", self._state.value)
            return SubmissionResult.failed(str(CheckoutInProgressError()))

        # Snapshot before the first await.
        lines = tuple(lines)
        payload = OrderPayload.from_lines(store_id, lines)

        self._transition(CheckoutState.SUBMITTING)
        try:
            order_id, error = await self._submit(payload)

            message = self._message_builder.build(lines, store_name, order_id)
            url = self._link_builder.build(message)
            dispatched = self._dispatch(url)
        finally:
            self._transition(CheckoutState.IDLE)

        if order_id is not None:
            return SubmissionResult.succeeded(order_id, url, dispatched)
        return SubmissionResult.failed(
            error or "Order was not recorded", url, dispatched
        )

    async def _submit(self, payload: OrderPayload) -> tuple[str | None, str | None]:
        try:
            order_id = await self._order_client.create_order(payload)
        except SubmissionError as exc:
            logger.warning("Order submission failed, continuing without id: %s", exc)
            self._transition(CheckoutState.SUBMIT_FAILED)
            return None, str(exc) or type(exc).__name__
        except Exception as exc:
            logger.exception("Unexpected error while submitting order")
            self._transition(CheckoutState.SUBMIT_FAILED)
            return None, str(exc) or type(exc).__name__

        self._transition(CheckoutState.SUBMITTED)
        return str(order_id), None

    def _dispatch(self, url: str) -> bool:
        # The order may already be recorded here; a navigation failure must
        # not hide its id from the caller.
        try:
            self._dispatcher.dispatch(url)
        except Exception:
            logger.exception("Could not open the WhatsApp link")
            return False

        self._transition(CheckoutState.DISPATCHED)
        return True

    def _transition(self, state: CheckoutState) -> None:
        logger.debug("Checkout %s -> %s", self._state.value, state.value)
        self._state = state
