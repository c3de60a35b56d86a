"""Navigator implementations for opening deep links from a terminal."""

from __future__ import annotations

import webbrowser

import click

from storefront.domain.exceptions import NavigationError
from storefront.domain.service.deep_link import Navigator


class WebBrowserNavigator(Navigator):
    """Opens links with the system browser registered in ``webbrowser``."""

    def open_new_context(self, url: str) -> bool:
        return webbrowser.open_new_tab(url)

    def redirect(self, url: str) -> None:
        if not webbrowser.open(url, new=0):
            raise NavigationError(f"No browser available to open {url}")


class ConsoleNavigator(Navigator):
    """Prints the link instead of opening it (headless sessions)."""

    def open_new_context(self, url: str) -> bool:
        click.echo(url)
        return True

    def redirect(self, url: str) -> None:
        click.echo(url)
