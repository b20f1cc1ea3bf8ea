"""Receipt line: one item at a given quantity plus its discount buckets.

A Line is an immutable record. Every discount application returns a new
Line, so the discount stages can be folded over a tuple of lines without
sharing mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from pos.domain.model.item import Item
from pos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class Line:
    """Captures the catalog snapshot of an item at receipt time.

    Three discount buckets are tracked independently:

    - ``manual_discount``: keyed in by the cashier
    - ``membership_discount``: privileged-member rate on the eligible category
    - ``promotion_discount``: accumulated threshold-promotion shares

    Buckets are always rounded to whole currency units. The original
    amount is not rounded.
    """

    item: Item
    quantity: Quantity
    requested_manual_discount: Money | None = None
    manual_discount: Money = field(default_factory=Money.zero)
    membership_discount: Money = field(default_factory=Money.zero)
    promotion_discount: Money = field(default_factory=Money.zero)

    # --- Snapshot shortcuts ---------------------------------------------------

    @property
    def item_code(self) -> str:
        return self.item.code

    @property
    def item_name(self) -> str:
        return self.item.name

    @property
    def category_code(self) -> str:
        return self.item.category_code

    @property
    def category_name(self) -> str:
        return self.item.category_name

    @property
    def unit_price(self) -> Money:
        return self.item.unit_price

    # --- Computed amounts -----------------------------------------------------

    @property
    def original_amount(self) -> Money:
        return self.item.unit_price * self.quantity.value

    @property
    def member_amount(self) -> Money:
        """Original amount after the membership discount only."""
        return self.original_amount.saturating_sub(self.membership_discount)

    @property
    def total_discount(self) -> Money:
        return self.manual_discount + self.membership_discount + self.promotion_discount

    @property
    def final_amount(self) -> Money:
        """Amount payable; never negative even if discounts exceed the original."""
        return self.original_amount.saturating_sub(self.total_discount)

    @property
    def is_over_discounted(self) -> bool:
        return self.total_discount > self.original_amount

    # --- Transformations ------------------------------------------------------

    def with_manual_discount(self, amount: Money) -> Line:
        return replace(self, manual_discount=amount.rounded())

    def with_membership_discount(self, amount: Money) -> Line:
        return replace(self, membership_discount=amount.rounded())

    def add_promotion_discount(self, share: Money) -> Line:
        """Add one rule's share on top of shares from earlier rules."""
        return replace(self, promotion_discount=self.promotion_discount + share.rounded())
