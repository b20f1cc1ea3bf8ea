"""JSON-file-backed implementation of PromotionRepository.

Rules are returned sorted by code so the firing order is reproducible
regardless of how the file is laid out.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from pos.domain.exceptions import DomainException, LookupUnavailableError
from pos.domain.model.promotion import PromotionRule
from pos.domain.model.value_objects import Money
from pos.domain.repository.promotion_repository import PromotionRepository


class JsonPromotionRepository(PromotionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- PromotionRepository interface ----------------------------------------

    def active_on(self, day: date) -> list[PromotionRule]:
        return [rule for rule in self._load() if rule.is_active_on(day)]

    def list_all(self) -> list[PromotionRule]:
        return self._load()

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[PromotionRule]:
        records = self._load_raw()
        try:
            rules = [self._to_domain(raw) for raw in records]
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            raise LookupUnavailableError(
                f"Malformed promotion record in {self._file_path}: {exc}"
            ) from exc
        return sorted(rules, key=lambda r: r.code)

    @staticmethod
    def _to_domain(raw: dict) -> PromotionRule:
        return PromotionRule(
            code=raw["code"],
            name=raw["name"],
            start_date=date.fromisoformat(raw["start_date"]),
            end_date=date.fromisoformat(raw["end_date"]),
            category_group=raw["category_group"],
            threshold=Money.of(raw["threshold"]),
            award=Money.of(raw["award"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise LookupUnavailableError(
                f"Cannot read promotions from {self._file_path}: {exc}"
            ) from exc
