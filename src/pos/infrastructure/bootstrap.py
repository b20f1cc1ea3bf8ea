"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

- ``POS_DATA_DIR``: directory holding ``items.json`` and ``promotions.json``
- ``POS_MEMBER_RATE``: share of the price members pay, e.g. ``0.95``
- ``POS_MEMBER_CATEGORY``: category code the member rate applies to
"""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pos.domain.exceptions import ValidationError
from pos.domain.model.policy import (
    DEFAULT_MEMBERSHIP_CATEGORY,
    DEFAULT_MEMBERSHIP_RATE,
    DiscountPolicy,
)
from pos.domain.service.discount_engine import DiscountEngine
from pos.infrastructure.persistence.json_item_repository import JsonItemRepository
from pos.infrastructure.persistence.json_promotion_repository import (
    JsonPromotionRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get("POS_DATA_DIR")
    return Path(override) if override else _DEFAULT_DATA_DIR


def item_repository() -> JsonItemRepository:
    return JsonItemRepository(data_dir() / "items.json")


def promotion_repository() -> JsonPromotionRepository:
    return JsonPromotionRepository(data_dir() / "promotions.json")


def discount_policy() -> DiscountPolicy:
    raw_rate = os.environ.get("POS_MEMBER_RATE")
    try:
        rate = Decimal(raw_rate) if raw_rate else DEFAULT_MEMBERSHIP_RATE
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid POS_MEMBER_RATE: {raw_rate!r}") from exc

    category = os.environ.get("POS_MEMBER_CATEGORY") or DEFAULT_MEMBERSHIP_CATEGORY
    return DiscountPolicy(membership_rate=rate, membership_category=category)


def discount_engine() -> DiscountEngine:
    return DiscountEngine(policy=discount_policy())
