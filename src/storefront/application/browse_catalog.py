"""Application services: catalog browsing (queries).

Store selection, product listing with filters and the filter options
themselves. The catalog service is a black box; these handlers only
shape its answers for display and resolve cart items against it.
"""

from __future__ import annotations

from storefront.application.dto import CartItemSpec, ProductRowDTO
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import CatalogFilters, CatalogPage, ProductQuery, Store
from storefront.domain.repository.catalog_service import CatalogService


class ListStoresHandler:

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog

    async def handle(self) -> list[Store]:
        return await self._catalog.list_stores()


class ShowFiltersHandler:

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog

    async def handle(self, store_id: int) -> CatalogFilters:
        return await self._catalog.get_filters(store_id)


class BrowseProductsHandler:

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog

    async def handle(
        self,
        store_id: int,
        query: ProductQuery | None = None,
    ) -> CatalogPage:
        return await self._catalog.list_products(store_id, query or ProductQuery())

    @staticmethod
    def to_rows(page: CatalogPage, cart: Cart | None = None) -> list[ProductRowDTO]:
        """Product table rows, with the cart's quantity and subtotal per product."""
        cart = cart or Cart()
        rows: list[ProductRowDTO] = []
        for product in page.products:
            subtotal = cart.subtotal_of(product.id)
            rows.append(
                ProductRowDTO(
                    product_id=product.id,
                    description=product.description,
                    color=product.color.display() if product.color else "-",
                    category=product.category.display() if product.category else "-",
                    price=str(product.price),
                    quantity=cart.quantity_of(product.id),
                    subtotal=str(subtotal) if subtotal is not None else "-",
                )
            )
        return rows


class BuildCartHandler:
    """Resolve ``product_id:quantity`` specs against a store's catalog."""

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog

    async def handle(self, store_id: int, specs: list[CartItemSpec]) -> tuple[Store, Cart]:
        page = await self._catalog.list_products(store_id, ProductQuery())
        by_id = {product.id: product for product in page.products}

        cart = Cart()
        for spec in specs:
            if spec.quantity <= 0:
                raise ValidationError(
                    f"Quantity for product '{spec.product_id}' must be positive"
                )
            product = by_id.get(spec.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product '{spec.product_id}' not found in store #{store_id}"
                )
            cart.change_quantity(product, spec.quantity)
        return page.store, cart
