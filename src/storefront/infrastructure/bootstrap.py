"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.checkout import CheckoutOrchestrator
from storefront.domain.service.deep_link import (
    DeepLinkDispatcher,
    Navigator,
    PlatformClassifier,
    WhatsAppLinkBuilder,
)
from storefront.domain.service.order_message_builder import OrderMessageBuilder
from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.http.api_client import StorefrontApiClient


def settings() -> Settings:
    return load_settings()


def api_client(config: Settings | None = None) -> StorefrontApiClient:
    config = config or settings()
    return StorefrontApiClient(config.api_base_url, timeout=config.http_timeout)


def checkout_orchestrator(
    classifier: PlatformClassifier,
    navigator: Navigator,
    config: Settings | None = None,
) -> CheckoutOrchestrator:
    config = config or settings()
    return CheckoutOrchestrator(
        order_client=api_client(config),
        message_builder=OrderMessageBuilder(config.brand_name),
        link_builder=WhatsAppLinkBuilder(config.whatsapp_number, config.messaging_host),
        dispatcher=DeepLinkDispatcher(classifier, navigator),
    )
