"""Application service: List Catalog use case (query)."""

from __future__ import annotations

from pos.application.dto import CatalogItemDTO
from pos.domain.repository.item_repository import ItemRepository


class ListCatalogHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self) -> list[CatalogItemDTO]:
        items = sorted(self._item_repo.list_all(), key=lambda i: i.code)
        return [
            CatalogItemDTO(
                code=item.code,
                name=item.name,
                category_code=item.category_code,
                category_name=item.category_name,
                unit_price=str(item.unit_price),
            )
            for item in items
        ]
