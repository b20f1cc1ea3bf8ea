"""Abstract repository for catalog Items.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def find_by_codes(self, codes: list[str]) -> dict[str, Item]:
        """Resolve item codes to catalog snapshots.

        Codes that are not in the catalog are simply missing from the
        result. Raises LookupUnavailableError if the catalog cannot be read.
        """

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item in the catalog."""
