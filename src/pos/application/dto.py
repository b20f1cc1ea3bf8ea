"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartEntrySpec:
    """Input: what the cashier rang up (item code, quantity, manual discount)."""

    item_code: str
    quantity: int
    manual_discount: str | None = None


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single receipt line as displayed to the user."""

    item_code: str
    item_name: str
    category_name: str
    quantity: int
    unit_price: str
    original_amount: str
    member_amount: str
    manual_discount: str
    membership_discount: str
    promotion_discount: str
    total_discount: str
    final_amount: str
    has_discount: bool


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a complete receipt as displayed to the user."""

    transaction_date: str
    is_privileged_member: bool
    lines: list[ReceiptLineDTO]
    total_original: str
    total_member: str
    total_promotion: str
    total_discount: str
    total_final: str
    promotions: list[tuple[str, str]]
    warnings: list[str]


@dataclass(frozen=True)
class CatalogItemDTO:
    code: str
    name: str
    category_code: str
    category_name: str
    unit_price: str


@dataclass(frozen=True)
class PromotionDTO:
    code: str
    name: str
    valid_from: str
    valid_to: str
    category_group: str
    threshold: str
    award: str
