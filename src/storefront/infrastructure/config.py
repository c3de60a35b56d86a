"""Environment-driven configuration for the storefront."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://api.xn--centerpeasatacado-hsb.com.br"
DEFAULT_WHATSAPP_NUMBER = "5511952960701"
DEFAULT_MESSAGING_HOST = "wa.me"
DEFAULT_BRAND_NAME = "Cristianojapa"


class ConfigurationError(ValueError):
    """An environment variable holds an unusable value."""


@dataclass(slots=True)
class Settings:
    api_base_url: str
    whatsapp_number: str
    messaging_host: str
    brand_name: str
    http_timeout: float
    log_level: str


def load_settings() -> Settings:
    """Load environment variables (and a local .env) into typed settings."""
    load_dotenv()

    raw_timeout = os.getenv("STOREFRONT_HTTP_TIMEOUT", "15")
    try:
        http_timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(
            f"STOREFRONT_HTTP_TIMEOUT must be a number, got {raw_timeout!r}"
        )
    if not math.isfinite(http_timeout):
        raise ConfigurationError(
            f"STOREFRONT_HTTP_TIMEOUT must be finite, got {raw_timeout!r}"
        )
    if http_timeout <= 0:
        raise ConfigurationError("STOREFRONT_HTTP_TIMEOUT must be positive")

    number = os.getenv("STOREFRONT_WHATSAPP_NUMBER", DEFAULT_WHATSAPP_NUMBER).strip()
    if not number.isdigit():
        raise ConfigurationError(
            f"STOREFRONT_WHATSAPP_NUMBER must contain digits only, got {number!r}"
        )

    return Settings(
        api_base_url=os.getenv("STOREFRONT_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        whatsapp_number=number,
        messaging_host=os.getenv("STOREFRONT_MESSAGING_HOST", DEFAULT_MESSAGING_HOST),
        brand_name=os.getenv("STOREFRONT_BRAND_NAME", DEFAULT_BRAND_NAME),
        http_timeout=http_timeout,
        log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
    )
