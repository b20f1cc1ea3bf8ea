"""Discount policy: the store-wide constants the engine prices with."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Defaults for business rules
# ---------------------------------------------------------------------------
DEFAULT_MEMBERSHIP_RATE = Decimal("0.95")  # members pay 95%
DEFAULT_MEMBERSHIP_CATEGORY = "09"  # alcohol
MIN_RATIO_SCALE = 6


@dataclass(frozen=True)
class DiscountPolicy:
    """Configuration injected into the discount engine.

    ``membership_rate`` is the share of the price a privileged member
    pays on ``membership_category``; ``ratio_scale`` is the number of
    decimal places used for promotion allocation ratios.
    """

    membership_rate: Decimal = DEFAULT_MEMBERSHIP_RATE
    membership_category: str = DEFAULT_MEMBERSHIP_CATEGORY
    ratio_scale: int = MIN_RATIO_SCALE

    def __post_init__(self) -> None:
        if not isinstance(self.membership_rate, Decimal):
            raise ValidationError(
                f"Membership rate must be a Decimal, got {type(self.membership_rate).__name__}"
            )
        if not Decimal("0") <= self.membership_rate <= Decimal("1"):
            raise ValidationError(
                f"Membership rate must be between 0 and 1, got {self.membership_rate}"
            )
        if not self.membership_category or not self.membership_category.strip():
            raise ValidationError("Membership category is required")
        if self.ratio_scale < MIN_RATIO_SCALE:
            raise ValidationError(
                f"Ratio scale must be at least {MIN_RATIO_SCALE}, got {self.ratio_scale}"
            )

    @property
    def membership_discount_fraction(self) -> Decimal:
        return Decimal("1") - self.membership_rate
