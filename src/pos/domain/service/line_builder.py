"""Domain service: Line Builder.

Turns cart entries into priced lines using the resolved catalog
snapshots. Entries whose code did not resolve are dropped and reported
as diagnostics; the rest of the cart is still priced.
"""

from __future__ import annotations

import structlog

from pos.domain.model.cart import CartEntry
from pos.domain.model.item import Item
from pos.domain.model.line import Line
from pos.domain.model.receipt import Diagnostic, DiagnosticKind

logger = structlog.get_logger(__name__)


def build_line(entry: CartEntry, item: Item) -> Line:
    """Build a line with all discount buckets at zero."""
    return Line(
        item=item,
        quantity=entry.quantity,
        requested_manual_discount=entry.manual_discount,
    )


def build_lines(
    entries: list[CartEntry],
    items: dict[str, Item],
) -> tuple[tuple[Line, ...], tuple[Diagnostic, ...]]:
    """Build lines in cart order, skipping entries missing from *items*."""
    lines: list[Line] = []
    diagnostics: list[Diagnostic] = []

    for entry in entries:
        item = items.get(entry.item_code)
        if item is None:
            logger.warning("item_not_found", item_code=entry.item_code)
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.ITEM_NOT_FOUND,
                    subject=entry.item_code,
                    message=f"Item '{entry.item_code}' not found in catalog; line dropped",
                )
            )
            continue
        lines.append(build_line(entry, item))

    return tuple(lines), tuple(diagnostics)
