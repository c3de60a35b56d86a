import click

from storefront.infrastructure.cli.catalog_commands import filters, products, stores
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.config import ConfigurationError, load_settings
from storefront.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Storefront: catalog browsing and WhatsApp checkout"""
    try:
        level = "DEBUG" if verbose else load_settings().log_level
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    setup_logging(level)


# Register subcommands
cli.add_command(stores)
cli.add_command(products)
cli.add_command(filters)
cli.add_command(checkout)
