"""Item: a catalog snapshot.

Items are read from the catalog at receipt time and never change while a
receipt is being priced. A later price change in the catalog does not
affect receipts that were already computed.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Item:
    """A sellable item as the catalog knows it."""

    code: str
    name: str
    category_code: str
    category_name: str
    unit_price: Money
