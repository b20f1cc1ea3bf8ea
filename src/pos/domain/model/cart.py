"""Cart entries: what the cashier rang up."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartEntry:
    """One scanned item code with its quantity.

    ``manual_discount`` is the amount the cashier keyed in for this line,
    or None when no manual discount was given.
    """

    item_code: str
    quantity: Quantity
    manual_discount: Money | None = None
