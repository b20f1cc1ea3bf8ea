"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import date

from pos.domain.exceptions import LookupUnavailableError
from pos.domain.model.item import Item
from pos.domain.model.promotion import PromotionRule
from pos.domain.repository.item_repository import ItemRepository
from pos.domain.repository.promotion_repository import PromotionRepository


class FakeItemRepository(ItemRepository):

    def __init__(self, items: list[Item] | None = None) -> None:
        self._store: dict[str, Item] = {}
        for item in items or []:
            self._store[item.code] = item
        self.requested: list[list[str]] = []

    def find_by_codes(self, codes: list[str]) -> dict[str, Item]:
        self.requested.append(list(codes))
        return {code: self._store[code] for code in codes if code in self._store}

    def list_all(self) -> list[Item]:
        return list(self._store.values())


class FakePromotionRepository(PromotionRepository):
    """Returns rules in the order they were given."""

    def __init__(self, rules: list[PromotionRule] | None = None) -> None:
        self._rules = list(rules or [])

    def active_on(self, day: date) -> list[PromotionRule]:
        return [rule for rule in self._rules if rule.is_active_on(day)]

    def list_all(self) -> list[PromotionRule]:
        return list(self._rules)


class UnavailableItemRepository(ItemRepository):

    def find_by_codes(self, codes: list[str]) -> dict[str, Item]:
        raise LookupUnavailableError("catalog is down")

    def list_all(self) -> list[Item]:
        raise LookupUnavailableError("catalog is down")


class UnavailablePromotionRepository(PromotionRepository):

    def active_on(self, day: date) -> list[PromotionRule]:
        raise LookupUnavailableError("promotions are down")

    def list_all(self) -> list[PromotionRule]:
        raise LookupUnavailableError("promotions are down")
