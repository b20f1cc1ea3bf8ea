"""CLI commands for the catalog and promotion lookups."""

from __future__ import annotations

from datetime import datetime

import click

from pos.application.list_catalog import ListCatalogHandler
from pos.application.list_promotions import ListPromotionsHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import item_repository, promotion_repository


@click.command("list")
def catalog_list() -> None:
    """List all items in the catalog."""
    handler = ListCatalogHandler(item_repo=item_repository())

    try:
        items = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'Code':<10} {'Name':<30} {'Category':<14} {'Price':>10}")
    click.echo("-" * 67)
    for item in items:
        category = f"{item.category_code} {item.category_name}".strip()
        click.echo(f"{item.code:<10} {item.name:<30} {category:<14} {item.unit_price:>10}")


@click.command("list")
@click.option(
    "--date",
    "day",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Only promotions active on this date (YYYY-MM-DD).",
)
def promotion_list(day: datetime | None) -> None:
    """List promotions, in the order they are applied."""
    handler = ListPromotionsHandler(promotion_repo=promotion_repository())

    try:
        rules = handler.handle(day.date() if day else None)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rules:
        click.echo("No promotions found.")
        return

    click.echo(
        f"{'Code':<10} {'Name':<26} {'From':<11} {'To':<11} "
        f"{'Categories':<12} {'Threshold':>10} {'Award':>8}"
    )
    click.echo("-" * 94)
    for rule in rules:
        click.echo(
            f"{rule.code:<10} {rule.name:<26} {rule.valid_from:<11} {rule.valid_to:<11} "
            f"{rule.category_group:<12} {rule.threshold:>10} {rule.award:>8}"
        )
