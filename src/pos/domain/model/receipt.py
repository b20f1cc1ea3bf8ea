"""Receipt: priced lines, aggregate totals and what happened along the way."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from pos.domain.model.line import Line
from pos.domain.model.value_objects import Money


class DiagnosticKind(Enum):
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    PROMOTION_WITHOUT_AWARD = "PROMOTION_WITHOUT_AWARD"
    LINE_OVER_DISCOUNTED = "LINE_OVER_DISCOUNTED"


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable condition the host may want to act on.

    ``subject`` is the item code or promotion code concerned.
    """

    kind: DiagnosticKind
    subject: str
    message: str


@dataclass(frozen=True)
class ReceiptTotals:
    original: Money
    member_subtotal: Money
    promotion: Money
    total_discount: Money
    final: Money

    @staticmethod
    def empty() -> ReceiptTotals:
        return ReceiptTotals(
            original=Money.zero(),
            member_subtotal=Money.zero(),
            promotion=Money.zero(),
            total_discount=Money.zero(),
            final=Money.zero(),
        )


@dataclass(frozen=True)
class Receipt:
    """The outcome of pricing one cart.

    ``lines`` keep the order the items were rung up in.
    ``awards`` pairs a fired promotion's name with its award, in firing
    order; a second firing under the same name replaces the first entry.
    """

    lines: tuple[Line, ...]
    totals: ReceiptTotals
    awards: tuple[tuple[str, Money], ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def promotion_awards(self) -> MappingProxyType[str, Money]:
        return MappingProxyType(dict(self.awards))

    @property
    def is_complete(self) -> bool:
        """True when no cart entry had to be dropped."""
        return not any(
            d.kind is DiagnosticKind.ITEM_NOT_FOUND for d in self.diagnostics
        )
