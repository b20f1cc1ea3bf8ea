"""Application service: List Promotions use case (query).

Without a date every rule is listed; with a date only the rules the
discount engine would apply on that day, in the order it applies them.
"""

from __future__ import annotations

from datetime import date

from pos.application.dto import PromotionDTO
from pos.domain.repository.promotion_repository import PromotionRepository


class ListPromotionsHandler:

    def __init__(self, promotion_repo: PromotionRepository) -> None:
        self._promotion_repo = promotion_repo

    def handle(self, day: date | None = None) -> list[PromotionDTO]:
        if day is None:
            rules = self._promotion_repo.list_all()
        else:
            rules = self._promotion_repo.active_on(day)
        return [
            PromotionDTO(
                code=rule.code,
                name=rule.name,
                valid_from=rule.start_date.isoformat(),
                valid_to=rule.end_date.isoformat(),
                category_group=rule.category_group,
                threshold=str(rule.threshold),
                award=str(rule.award),
            )
            for rule in rules
        ]
