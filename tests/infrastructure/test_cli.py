"""CLI tests with the catalog and order client replaced by in-memory fakes."""

import logging

import pytest
from click.testing import CliRunner

from storefront.application.checkout import CheckoutOrchestrator
from storefront.domain.exceptions import NavigationError, SubmissionError
from storefront.domain.model.catalog import CatalogFilters, FilterOption, Store
from storefront.domain.service.deep_link import DeepLinkDispatcher, WhatsAppLinkBuilder
from storefront.domain.service.order_message_builder import OrderMessageBuilder
from storefront.infrastructure.cli import catalog_commands, checkout_commands
from storefront.infrastructure.cli.main import cli
from tests.fakes import FakeCatalogService, FakeOrderClient, RecordingNavigator, make_product


@pytest.fixture(autouse=True)
def quiet_settings(monkeypatch):
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def restore_logging():
    # The CLI reconfigures the root logger against CliRunner's streams.
    handlers, level = logging.root.handlers[:], logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _catalog() -> FakeCatalogService:
    return FakeCatalogService(
        stores=[Store(id=1, name="Centro", city="São Paulo"), Store(id=2, name="Brás")],
        products=[
            make_product("A", "Display iPhone 11", "10.00", color="Preto"),
            make_product("B", "Bateria Moto G", "5.50"),
        ],
        filters=CatalogFilters(
            groups=[FilterOption(id=1, name="Displays")],
            colors=[FilterOption(id=4, name="Preto")],
        ),
    )


def _patch_checkout(
    monkeypatch,
    client: FakeOrderClient,
    navigator: RecordingNavigator | None = None,
) -> RecordingNavigator:
    navigator = navigator or RecordingNavigator()

    def fake_orchestrator(classifier, _navigator):
        return CheckoutOrchestrator(
            order_client=client,
            message_builder=OrderMessageBuilder("Cristianojapa"),
            link_builder=WhatsAppLinkBuilder("5511952960701"),
            dispatcher=DeepLinkDispatcher(classifier, navigator),
        )

    monkeypatch.setattr(checkout_commands, "api_client", _catalog)
    monkeypatch.setattr(checkout_commands, "checkout_orchestrator", fake_orchestrator)
    return navigator


class TestCatalogCommands:

    def test_stores(self, monkeypatch):
        monkeypatch.setattr(catalog_commands, "api_client", _catalog)
        result = CliRunner().invoke(cli, ["stores"])
        assert result.exit_code == 0, result.output
        assert "Centro" in result.output
        assert "São Paulo" in result.output

    def test_products_with_cart(self, monkeypatch):
        monkeypatch.setattr(catalog_commands, "api_client", _catalog)
        result = CliRunner().invoke(cli, ["products", "--store", "1", "--cart", "A:2"])
        assert result.exit_code == 0, result.output
        assert "Display iPhone 11" in result.output
        assert "R$\xa020,00" in result.output
        assert "Cart: 2 item(s), total R$\xa020,00" in result.output

    def test_filters(self, monkeypatch):
        monkeypatch.setattr(catalog_commands, "api_client", _catalog)
        result = CliRunner().invoke(cli, ["filters", "--store", "1"])
        assert result.exit_code == 0, result.output
        assert "Groups:" in result.output
        assert "Colors:" in result.output
        assert "Brands:" not in result.output


class TestCheckoutCommand:

    def test_success(self, monkeypatch):
        navigator = _patch_checkout(monkeypatch, FakeOrderClient(order_id=7))
        result = CliRunner().invoke(cli, ["checkout", "--store", "1", "--items", "A:2,B:1"])
        assert result.exit_code == 0, result.output
        assert "Cart:  3 item(s), total R$\xa025,50" in result.output
        assert "Order #7 recorded" in result.output
        assert len(navigator.opened) == 1

    def test_mobile_user_agent_redirects(self, monkeypatch):
        navigator = _patch_checkout(monkeypatch, FakeOrderClient())
        result = CliRunner().invoke(
            cli,
            ["checkout", "--store", "1", "--items", "A:1", "--user-agent", "Android Mobile"],
        )
        assert result.exit_code == 0, result.output
        assert navigator.opened == []
        assert len(navigator.redirected) == 1

    def test_submission_failure_exits_non_zero(self, monkeypatch):
        navigator = _patch_checkout(
            monkeypatch, FakeOrderClient(error=SubmissionError("HTTP 503"))
        )
        result = CliRunner().invoke(cli, ["checkout", "--store", "1", "--items", "A:1"])
        assert result.exit_code == 1
        assert "Order was not recorded: HTTP 503" in result.output
        assert "cart kept for retry" in result.output
        assert len(navigator.opened) == 1

    def test_browser_failure_still_reports_order(self, monkeypatch):
        broken = RecordingNavigator(
            allow_new_context=False,
            redirect_error=NavigationError("No browser available to open the link"),
        )
        _patch_checkout(monkeypatch, FakeOrderClient(order_id=7), broken)
        result = CliRunner().invoke(cli, ["checkout", "--store", "1", "--items", "A:1"])
        assert result.exit_code == 0, result.output
        assert "Order #7 recorded" in result.output
        assert "send the order with: https://wa.me/5511952960701?text=" in result.output

    def test_unknown_product(self, monkeypatch):
        _patch_checkout(monkeypatch, FakeOrderClient())
        result = CliRunner().invoke(cli, ["checkout", "--store", "1", "--items", "Z:1"])
        assert result.exit_code == 1
        assert "Product 'Z' not found" in result.output

    def test_bad_items_format(self, monkeypatch):
        _patch_checkout(monkeypatch, FakeOrderClient())
        result = CliRunner().invoke(cli, ["checkout", "--store", "1", "--items", "A-2"])
        assert result.exit_code == 2
        assert "Expected 'ProductId:Quantity'" in result.output
