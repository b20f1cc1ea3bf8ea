"""Abstract repository for PromotionRule."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from pos.domain.model.promotion import PromotionRule


class PromotionRepository(ABC):

    @abstractmethod
    def active_on(self, day: date) -> list[PromotionRule]:
        """Return the rules valid on *day*.

        The order is significant (rules are applied one after another)
        and must be the same on every call for the same data.
        """

    @abstractmethod
    def list_all(self) -> list[PromotionRule]:
        """Return every rule regardless of validity."""
