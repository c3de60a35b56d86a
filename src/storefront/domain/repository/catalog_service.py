"""Abstract port for the read-only catalog query service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.catalog import (
    CatalogFilters,
    CatalogPage,
    ProductQuery,
    Store,
)


class CatalogService(ABC):

    @abstractmethod
    async def list_stores(self) -> list[Store]:
        """Return every store that publishes a catalog."""

    @abstractmethod
    async def list_products(self, store_id: int, query: ProductQuery) -> CatalogPage:
        """Return the store's products matching the active filters."""

    @abstractmethod
    async def get_filters(self, store_id: int) -> CatalogFilters:
        """Return the filter options available for a store."""
