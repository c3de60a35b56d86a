"""aiohttp client for the public catalog and order-creation endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from storefront.domain.exceptions import CatalogUnavailableError, SubmissionError
from storefront.domain.model.catalog import (
    CatalogFilters,
    CatalogPage,
    ProductQuery,
    Store,
)
from storefront.domain.model.order import OrderPayload
from storefront.domain.repository.catalog_service import CatalogService
from storefront.domain.repository.order_submission_client import OrderSubmissionClient

logger = logging.getLogger(__name__)

STORES_PATH = "/api/public/catalog/stores/"
CATALOG_PATH = "/api/public/catalog/"
FILTERS_PATH = "/api/public/catalog/filters/"
ORDERS_PATH = "/api/public/orders/"

_TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)


class StorefrontApiClient(CatalogService, OrderSubmissionClient):

    def __init__(self, base_url: str, timeout: float = 15.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    # --- CatalogService interface ---------------------------------------------

    async def list_stores(self) -> list[Store]:
        data = await self._get_json(STORES_PATH)
        if not isinstance(data, list):
            raise CatalogUnavailableError("Store list response is not a list")
        return [Store.from_api(raw) for raw in data]

    async def list_products(self, store_id: int, query: ProductQuery) -> CatalogPage:
        data = await self._get_json(CATALOG_PATH, query.to_params(store_id))
        if not isinstance(data, dict):
            raise CatalogUnavailableError("Catalog response is not an object")
        return CatalogPage.from_api(data)

    async def get_filters(self, store_id: int) -> CatalogFilters:
        data = await self._get_json(FILTERS_PATH, {"store": str(store_id)})
        if not isinstance(data, dict):
            raise CatalogUnavailableError("Filters response is not an object")
        return CatalogFilters.from_api(data)

    # --- OrderSubmissionClient interface --------------------------------------

    async def create_order(self, payload: OrderPayload) -> str:
        url = self._url(ORDERS_PATH)
        logger.debug("POST %s (%d items)", url, len(payload.items))
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(url, json=payload.to_json()) as resp:
                    if not 200 <= resp.status < 300:
                        body = await resp.text()
                        raise SubmissionError(
                            f"Order endpoint answered HTTP {resp.status}: {body[:200]}"
                        )
                    data = await resp.json(content_type=None)
        except _TRANSPORT_ERRORS as exc:
            logger.warning("Order submission to %s failed: %r", url, exc)
            raise SubmissionError(
                f"Could not submit order: {str(exc) or type(exc).__name__}"
            ) from exc

        order_id = _extract_order_id(data)
        if order_id is None:
            raise SubmissionError(f"Order endpoint returned no order id: {data!r}")
        return order_id

    # --- Internal helpers -----------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        url = self._url(path)
        logger.debug("GET %s params=%s", url, params)
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url, params=params) as resp:
                    if resp.status != 200:
                        raise CatalogUnavailableError(
                            f"Catalog endpoint {path} answered HTTP {resp.status}"
                        )
                    return await resp.json(content_type=None)
        except _TRANSPORT_ERRORS as exc:
            logger.warning("Catalog request to %s failed: %r", url, exc)
            raise CatalogUnavailableError(
                f"Could not load {path}: {str(exc) or type(exc).__name__}"
            ) from exc


def _extract_order_id(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    for key in ("id", "order_id"):
        value = data.get(key)
        if value is not None and value != "":
            return str(value)
    return None
