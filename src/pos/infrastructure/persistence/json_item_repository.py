"""JSON-file-backed implementation of ItemRepository."""

from __future__ import annotations

import json
from pathlib import Path

from pos.domain.exceptions import DomainException, LookupUnavailableError
from pos.domain.model.item import Item
from pos.domain.model.value_objects import Money
from pos.domain.repository.item_repository import ItemRepository


class JsonItemRepository(ItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ItemRepository interface ---------------------------------------------

    def find_by_codes(self, codes: list[str]) -> dict[str, Item]:
        wanted = set(codes)
        return {code: item for code, item in self._load().items() if code in wanted}

    def list_all(self) -> list[Item]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Item]:
        records = self._load_raw()
        try:
            return {item.code: item for item in map(self._to_domain, records)}
        except (KeyError, TypeError, DomainException) as exc:
            raise LookupUnavailableError(
                f"Malformed catalog record in {self._file_path}: {exc}"
            ) from exc

    @staticmethod
    def _to_domain(raw: dict) -> Item:
        return Item(
            code=raw["code"],
            name=raw["name"],
            category_code=raw.get("category_code") or "",
            category_name=raw.get("category_name") or "",
            unit_price=Money.of(raw["unit_price"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise LookupUnavailableError(
                f"Cannot read catalog from {self._file_path}: {exc}"
            ) from exc
