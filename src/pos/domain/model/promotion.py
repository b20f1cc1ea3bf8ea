"""Threshold promotion rules.

A rule grants a fixed award once the combined amount of the lines in its
category group reaches a threshold on a day inside its validity window.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money

ALL_CATEGORIES = "ALL"


@dataclass(frozen=True)
class PromotionRule:
    """A "spend X in these categories, get Y off" promotion.

    ``category_group`` is either the wildcard ``ALL`` or a comma-separated
    list of category codes, e.g. ``"01, 02"``.
    """

    code: str
    name: str
    start_date: date
    end_date: date
    category_group: str
    threshold: Money
    award: Money

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise ValidationError(
                f"Promotion '{self.code}' ends ({self.end_date}) "
                f"before it starts ({self.start_date})"
            )

    @property
    def categories(self) -> frozenset[str]:
        """Normalised category codes of the group (empty for the wildcard)."""
        if self.is_wildcard:
            return frozenset()
        return frozenset(
            part.strip().upper()
            for part in self.category_group.split(",")
            if part.strip()
        )

    @property
    def is_wildcard(self) -> bool:
        return self.category_group.strip().upper() == ALL_CATEGORIES

    def is_active_on(self, day: date) -> bool:
        """Validity is date-only and inclusive at both ends."""
        return self.start_date <= day <= self.end_date

    def matches_category(self, category_code: str) -> bool:
        if self.is_wildcard:
            return True
        return category_code.strip().upper() in self.categories
