import click

from pos.infrastructure.cli.catalog_commands import catalog_list, promotion_list
from pos.infrastructure.cli.receipt_commands import receipt_compute
from pos.infrastructure.log_config import configure_logging


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log pricing decisions to stderr.")
def cli(verbose: bool) -> None:
    """POS: promotion pricing at the till"""
    configure_logging(verbose)


@cli.group()
def receipt() -> None:
    """Price carts."""


@cli.group()
def catalog() -> None:
    """Browse the item catalog."""


@cli.group()
def promotion() -> None:
    """Browse promotions."""


# Register subcommands
receipt.add_command(receipt_compute)
catalog.add_command(catalog_list)
promotion.add_command(promotion_list)
