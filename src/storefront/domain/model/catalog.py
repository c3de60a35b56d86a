"""Catalog read models: stores, filter options and product pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class Store:
    id: int
    name: str
    city: str | None = None

    @staticmethod
    def from_api(raw: dict[str, Any]) -> Store:
        try:
            return Store(id=int(raw["id"]), name=str(raw["name"]), city=raw.get("city"))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"Malformed store record: {raw!r}") from exc


@dataclass(frozen=True)
class FilterOption:
    id: int
    name: str


FILTER_KINDS = ("groups", "brands", "categories", "colors")


@dataclass(frozen=True)
class CatalogFilters:
    groups: list[FilterOption] = field(default_factory=list)
    brands: list[FilterOption] = field(default_factory=list)
    categories: list[FilterOption] = field(default_factory=list)
    colors: list[FilterOption] = field(default_factory=list)

    @staticmethod
    def from_api(raw: dict[str, Any]) -> CatalogFilters:
        try:
            options = {
                kind: [
                    FilterOption(id=int(item["id"]), name=str(item["name"]))
                    for item in raw.get(kind) or []
                ]
                for kind in FILTER_KINDS
            }
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ValidationError(f"Malformed filters payload: {raw!r}") from exc
        return CatalogFilters(**options)


@dataclass(frozen=True)
class CatalogPage:
    """One answer of the catalog query endpoint."""

    store: Store
    products: list[Product]
    total: int

    @staticmethod
    def from_api(raw: dict[str, Any]) -> CatalogPage:
        try:
            products = [Product.from_api(item) for item in raw["products"]]
            store = Store.from_api(raw["store"])
            total = int(raw.get("total", len(products)))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"Malformed catalog payload: {raw!r}") from exc
        return CatalogPage(store=store, products=products, total=total)


@dataclass(frozen=True)
class ProductQuery:
    """Active filters and search text for a product listing.

    Zero or missing ids mean "all"; blank search is ignored.
    """

    group: int | None = None
    brand: int | None = None
    category: int | None = None
    color: int | None = None
    search: str | None = None

    def to_params(self, store_id: int) -> dict[str, str]:
        params = {"store": str(store_id)}
        for name in ("group", "brand", "category", "color"):
            value = getattr(self, name)
            if value:
                params[name] = str(value)
        if self.search and self.search.strip():
            params["search"] = self.search.strip()
        return params
