"""Domain service: Deep-Link Dispatcher.

Opens a messaging deep link with a platform-dependent strategy:

- mobile: redirect the current context (the app is left behind)
- otherwise: open a new context, falling back to a redirect when the
  new context is blocked

The platform check and the navigation itself are injected so the
strategy can be exercised without a browser.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from urllib.parse import quote

from storefront.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

# RFC 2396 unreserved marks, kept literal in the text parameter.
_URI_COMPONENT_SAFE = "!*'()"


class PlatformClassifier(ABC):

    @abstractmethod
    def is_mobile(self) -> bool:
        """True when running on a mobile device."""


class Navigator(ABC):

    @abstractmethod
    def open_new_context(self, url: str) -> bool:
        """Open *url* in a new tab/window. False means it was blocked."""

    @abstractmethod
    def redirect(self, url: str) -> None:
        """Navigate the current context to *url*."""


class DeepLinkDispatcher:

    def __init__(self, classifier: PlatformClassifier, navigator: Navigator) -> None:
        self._classifier = classifier
        self._navigator = navigator

    def dispatch(self, url: str) -> None:
        if self._classifier.is_mobile():
            logger.debug("Mobile platform, redirecting to deep link")
            self._navigator.redirect(url)
            return

        if self._navigator.open_new_context(url):
            logger.debug("Deep link opened in a new context")
            return

        logger.info("New context blocked, falling back to redirect")
        self._navigator.redirect(url)


class WhatsAppLinkBuilder:
    """Builds ``https://<host>/<recipient>?text=<message>`` links."""

    def __init__(self, recipient: str, host: str = "wa.me") -> None:
        if not recipient or not recipient.isdigit():
            raise ValidationError(
                f"WhatsApp recipient must contain digits only, got {recipient!r}"
            )
        self._recipient = recipient
        self._host = host.strip("/")

    def build(self, message: str) -> str:
        text = quote(message, safe=_URI_COMPONENT_SAFE)
        return f"https://{self._host}/{self._recipient}?text={text}"
