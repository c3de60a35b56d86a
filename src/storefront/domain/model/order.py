"""Order snapshot sent to the backend and the tagged outcome of a checkout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money


class CheckoutState(Enum):
    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    SUBMITTED = "SUBMITTED"
    SUBMIT_FAILED = "SUBMIT_FAILED"
    DISPATCHED = "DISPATCHED"


@dataclass(frozen=True)
class OrderPayloadItem:
    """Captures a cart line at submission time (price snapshot)."""

    product_id: str
    description: str
    quantity: int
    price: Money

    def to_json(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "description": self.description,
            "quantity": self.quantity,
            "price": float(self.price.amount),
        }


@dataclass(frozen=True)
class OrderPayload:
    """Immutable copy of the cart taken right before the order is submitted.

    Later cart mutations cannot reach an in-flight submission because
    nothing here references the cart.
    """

    store_id: int
    items: tuple[OrderPayloadItem, ...]

    @staticmethod
    def from_lines(store_id: int, lines: Iterable[CartLine]) -> OrderPayload:
        items = tuple(
            OrderPayloadItem(
                product_id=line.product.id,
                description=line.product.description,
                quantity=line.quantity.value,
                price=line.product.price,
            )
            for line in lines
        )
        if not items:
            raise ValidationError("Order must contain at least one item")
        return OrderPayload(store_id=store_id, items=items)

    def to_json(self) -> dict[str, Any]:
        return {
            "store": self.store_id,
            "items": [item.to_json() for item in self.items],
        }


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of one checkout attempt.

    ``success`` is true only when the backend returned an order id.
    ``dispatched`` tells whether the deep link was opened, which also
    happens after a failed submission.
    """

    order_id: str | None = None
    error: str | None = None
    dispatched: bool = False
    url: str | None = None

    @property
    def success(self) -> bool:
        return self.order_id is not None

    @staticmethod
    def succeeded(order_id: str, url: str, dispatched: bool = True) -> SubmissionResult:
        return SubmissionResult(order_id=order_id, dispatched=dispatched, url=url)

    @staticmethod
    def failed(
        error: str,
        url: str | None = None,
        dispatched: bool = True,
    ) -> SubmissionResult:
        return SubmissionResult(
            error=error, dispatched=url is not None and dispatched, url=url
        )
