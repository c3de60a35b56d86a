"""Abstract port for the backend order-creation endpoint.

Defined in the domain layer so the checkout workflow never depends on
the HTTP transport. The aiohttp implementation lives in the
infrastructure layer; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import OrderPayload


class OrderSubmissionClient(ABC):

    @abstractmethod
    async def create_order(self, payload: OrderPayload) -> str:
        """Record the order and return its identifier.

        Raises SubmissionError when the order was not recorded.
        """
