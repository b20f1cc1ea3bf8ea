"""Domain service: Receipt Aggregator.

A pure resummation of the lines. It is cheap for the basket sizes a till
sees, so totals are always recomputed from scratch instead of being
updated incrementally.
"""

from __future__ import annotations

from collections.abc import Iterable

from pos.domain.model.line import Line
from pos.domain.model.receipt import ReceiptTotals
from pos.domain.model.value_objects import Money


def summarize(lines: Iterable[Line]) -> ReceiptTotals:
    original = Money.zero()
    member_subtotal = Money.zero()
    promotion = Money.zero()
    total_discount = Money.zero()
    final = Money.zero()

    for line in lines:
        original = original + line.original_amount
        member_subtotal = member_subtotal + line.member_amount
        promotion = promotion + line.promotion_discount
        total_discount = total_discount + line.total_discount
        final = final + line.final_amount

    return ReceiptTotals(
        original=original,
        member_subtotal=member_subtotal,
        promotion=promotion,
        total_discount=total_discount,
        final=final,
    )
