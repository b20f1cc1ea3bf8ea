"""CLI commands for pricing a cart."""

from __future__ import annotations

from datetime import date, datetime

import click

from pos.application.compute_receipt import ComputeReceiptHandler
from pos.application.dto import CartEntrySpec, ReceiptDTO
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import (
    discount_engine,
    item_repository,
    promotion_repository,
)


def _parse_items(raw: str) -> list[CartEntrySpec]:
    """Parse 'WINE001:2,COS001:1@50' into CartEntrySpec list.

    The optional ``@amount`` suffix is the manual discount for that line.
    """
    specs: list[CartEntrySpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemCode:Quantity[@Discount]'."
            )
        code, rest = pair.rsplit(":", 1)
        qty_str, _, discount = rest.partition("@")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{code}'."
            )
        specs.append(
            CartEntrySpec(
                item_code=code.strip(),
                quantity=qty,
                manual_discount=discount.strip() or None,
            )
        )
    return specs


def _display_receipt(dto: ReceiptDTO) -> None:
    """Shared formatting for displaying a receipt."""
    click.echo("=" * 80)
    click.echo(f"Date:     {dto.transaction_date}")
    click.echo(f"Customer: {'privileged member' if dto.is_privileged_member else 'regular'}")
    click.echo("-" * 80)
    click.echo(
        f"{'Code':<10} {'Item':<26} {'Category':<10} {'Qty':>4} "
        f"{'Original':>9} {'Member':>9} {'Final':>9}"
    )
    click.echo("-" * 80)
    for line in dto.lines:
        name = line.item_name if len(line.item_name) <= 25 else line.item_name[:22] + "..."
        click.echo(
            f"{line.item_code:<10} {name:<26} {line.category_name:<10} {line.quantity:>4} "
            f"{line.original_amount:>9} {line.member_amount:>9} {line.final_amount:>9}"
        )
    click.echo("-" * 80)
    click.echo(f"{'Original total':<60} {dto.total_original:>19}")
    click.echo(f"{'After membership discount':<60} {dto.total_member:>19}")
    click.echo(f"{'Promotion discount':<60} {dto.total_promotion:>19}")
    click.echo(f"{'Total discount':<60} {dto.total_discount:>19}")
    click.echo("=" * 80)
    click.echo(f"{'Amount due':<60} {dto.total_final:>19}")
    click.echo("=" * 80)

    discounted = [line for line in dto.lines if line.has_discount]
    if discounted:
        click.echo("Discounts:")
        for line in discounted:
            click.echo(
                f"  {line.item_name[:25]:<25} manual {line.manual_discount:>7} | "
                f"member {line.membership_discount:>7} | "
                f"promotion {line.promotion_discount:>7} | total {line.total_discount:>7}"
            )

    if dto.promotions:
        click.echo("Promotions:")
        for name, award in dto.promotions:
            click.echo(f"  {name:<40} -{award}")

    for warning in dto.warnings:
        click.echo(f"Warning: {warning}")


@click.command("compute")
@click.option(
    "--items",
    required=True,
    help="Items as 'Code:Qty,Code:Qty@ManualDiscount'.",
)
@click.option("--member", is_flag=True, default=False, help="Customer is a privileged member.")
@click.option(
    "--date",
    "day",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Transaction date (YYYY-MM-DD). Defaults to today.",
)
def receipt_compute(items: str, member: bool, day: datetime | None) -> None:
    """Price a cart and print the receipt."""
    specs = _parse_items(items)
    transaction_date = day.date() if day else date.today()

    try:
        handler = ComputeReceiptHandler(
            item_repo=item_repository(),
            promotion_repo=promotion_repository(),
            engine=discount_engine(),
        )
        dto = handler.handle(specs, transaction_date, is_privileged_member=member)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)
