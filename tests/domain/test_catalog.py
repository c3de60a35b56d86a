"""Unit tests for catalog read models built from API payloads."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.catalog import CatalogFilters, CatalogPage, ProductQuery, Store
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

PRODUCT_JSON = {
    "id": "A1",
    "description": "Display iPhone 11",
    "group": "Displays",
    "group_id": 3,
    "category": "Original",
    "category_id": 4,
    "brand": None,
    "brand_id": 5,
    "color": "Preto",
    "color_id": 6,
    "price": 10.5,
    "available": True,
}


class TestProductFromApi:

    def test_maps_fields(self):
        product = Product.from_api(PRODUCT_JSON)
        assert product.id == "A1"
        assert product.price == Money.of("10.5")
        assert product.color.label == "Preto"
        assert product.color.id == 6
        assert product.brand.display() == "-"
        assert product.available

    def test_numeric_id_becomes_string(self):
        product = Product.from_api({**PRODUCT_JSON, "id": 99})
        assert product.id == "99"

    def test_missing_price_rejected(self):
        raw = {k: v for k, v in PRODUCT_JSON.items() if k != "price"}
        with pytest.raises(ValidationError, match="Malformed product"):
            Product.from_api(raw)

    def test_missing_classification_is_none(self):
        raw = {k: v for k, v in PRODUCT_JSON.items() if not k.startswith("group")}
        assert Product.from_api(raw).group is None


class TestCatalogPayloads:

    def test_store(self):
        store = Store.from_api({"id": 2, "name": "Centro", "city": None})
        assert store == Store(id=2, name="Centro")

    def test_page(self):
        page = CatalogPage.from_api({
            "store": {"id": 2, "name": "Centro"},
            "products": [PRODUCT_JSON],
            "total": 1,
        })
        assert page.store.name == "Centro"
        assert [p.id for p in page.products] == ["A1"]
        assert page.total == 1

    def test_page_without_products_rejected(self):
        with pytest.raises(ValidationError, match="Malformed catalog"):
            CatalogPage.from_api({"store": {"id": 2, "name": "Centro"}})

    @pytest.mark.parametrize("total", [None, "n/a"])
    def test_page_with_bad_total_rejected(self, total):
        with pytest.raises(ValidationError, match="Malformed catalog"):
            CatalogPage.from_api({
                "store": {"id": 1, "name": "X"},
                "products": [],
                "total": total,
            })

    def test_page_total_defaults_to_product_count(self):
        page = CatalogPage.from_api({
            "store": {"id": 1, "name": "X"},
            "products": [PRODUCT_JSON],
        })
        assert page.total == 1

    def test_filters(self):
        filters = CatalogFilters.from_api({
            "groups": [{"id": 1, "name": "Displays"}],
            "colors": [{"id": 9, "name": "Preto"}],
        })
        assert filters.groups[0].name == "Displays"
        assert filters.colors[0].id == 9
        assert filters.brands == []


class TestProductQuery:

    def test_only_store_when_no_filters(self):
        assert ProductQuery().to_params(4) == {"store": "4"}

    def test_sets_active_filters_and_trimmed_search(self):
        query = ProductQuery(group=1, color=7, search="  iphone ")
        assert query.to_params(4) == {
            "store": "4",
            "group": "1",
            "color": "7",
            "search": "iphone",
        }

    def test_zero_ids_and_blank_search_ignored(self):
        assert ProductQuery(brand=0, search="   ").to_params(4) == {"store": "4"}
