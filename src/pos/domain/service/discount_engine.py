"""Domain service: Discount Engine.

Prices a receipt by folding its lines through an ordered list of stages.
The order follows the till's pricing rules and is load-bearing:

  1. Manual discount       per line, before the subtotal
  2. Membership discount   per line, before the subtotal
  3. Threshold promotions  receipt-wide, after the subtotal

Each stage takes a PricingState and returns a new one; the engine
re-aggregates the totals after every stage. No stage raises in normal
operation: a promotion that cannot fire is skipped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal

import structlog

from pos.domain.model.line import Line
from pos.domain.model.policy import DiscountPolicy
from pos.domain.model.promotion import PromotionRule
from pos.domain.model.receipt import Diagnostic, DiagnosticKind, Receipt, ReceiptTotals
from pos.domain.model.value_objects import Money
from pos.domain.service.receipt_aggregator import summarize

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PricingContext:
    """Caller inputs that stay fixed for the whole computation."""

    is_privileged_member: bool
    rules: tuple[PromotionRule, ...] = ()


@dataclass(frozen=True)
class PricingState:
    """Everything a stage may read or replace."""

    lines: tuple[Line, ...]
    totals: ReceiptTotals
    awards: tuple[tuple[str, Money], ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @staticmethod
    def start(
        lines: Sequence[Line],
        diagnostics: Sequence[Diagnostic] = (),
    ) -> PricingState:
        return PricingState(
            lines=tuple(lines),
            totals=summarize(lines),
            diagnostics=tuple(diagnostics),
        )

    def with_lines(self, lines: Sequence[Line]) -> PricingState:
        return replace(self, lines=tuple(lines))

    def with_diagnostic(self, diagnostic: Diagnostic) -> PricingState:
        return replace(self, diagnostics=self.diagnostics + (diagnostic,))

    def with_award(self, rule_name: str, award: Money) -> PricingState:
        awards = dict(self.awards)
        awards[rule_name] = award  # same name fires again -> overwrite
        return replace(self, awards=tuple(awards.items()))

    def to_receipt(self) -> Receipt:
        return Receipt(
            lines=self.lines,
            totals=self.totals,
            awards=self.awards,
            diagnostics=self.diagnostics,
        )


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


class DiscountStage(ABC):

    name: str = ""

    @abstractmethod
    def apply(self, state: PricingState, context: PricingContext) -> PricingState:
        """Return the state with this stage's discounts applied."""


class ManualDiscountStage(DiscountStage):
    """Apply the cashier's keyed-in amount to each line.

    Not capped at the line's original amount: an over-discounted line
    simply ends with a final amount of zero, and a diagnostic is kept.
    """

    name = "manual"

    def apply(self, state: PricingState, context: PricingContext) -> PricingState:
        lines: list[Line] = []
        for line in state.lines:
            requested = line.requested_manual_discount
            if requested is None or requested.is_zero:
                lines.append(line)
                continue

            line = line.with_manual_discount(requested)
            logger.info(
                "manual_discount_applied",
                item_code=line.item_code,
                amount=str(line.manual_discount.amount),
            )
            if line.is_over_discounted:
                state = state.with_diagnostic(
                    Diagnostic(
                        kind=DiagnosticKind.LINE_OVER_DISCOUNTED,
                        subject=line.item_code,
                        message=(
                            f"Manual discount {line.manual_discount} exceeds "
                            f"line amount {line.original_amount}"
                        ),
                    )
                )
            lines.append(line)
        return state.with_lines(lines)


class MembershipDiscountStage(DiscountStage):
    """Privileged members get the policy rate on the eligible category."""

    name = "membership"

    def __init__(self, policy: DiscountPolicy) -> None:
        self._policy = policy

    def apply(self, state: PricingState, context: PricingContext) -> PricingState:
        if not context.is_privileged_member:
            return state

        lines: list[Line] = []
        for line in state.lines:
            if line.category_code != self._policy.membership_category:
                lines.append(line)
                continue

            base = line.original_amount.saturating_sub(line.manual_discount)
            line = line.with_membership_discount(
                base * self._policy.membership_discount_fraction
            )
            logger.info(
                "membership_discount_applied",
                item_code=line.item_code,
                amount=str(line.membership_discount.amount),
            )
            lines.append(line)
        return state.with_lines(lines)


class PromotionDiscountStage(DiscountStage):
    """Fire threshold promotions one rule at a time, in lookup order.

    Each rule sees the line amounts left by the rules before it, so a
    later threshold is measured against already-discounted amounts.
    """

    name = "promotion"

    def __init__(self, policy: DiscountPolicy) -> None:
        self._policy = policy

    def apply(self, state: PricingState, context: PricingContext) -> PricingState:
        for rule in context.rules:
            state = self._apply_rule(state, rule)
        return state

    def _apply_rule(self, state: PricingState, rule: PromotionRule) -> PricingState:
        eligible = [
            i for i, line in enumerate(state.lines)
            if rule.matches_category(line.category_code)
        ]
        eligible_total = Money.zero()
        for i in eligible:
            eligible_total = eligible_total + state.lines[i].final_amount

        if eligible_total.is_zero or eligible_total < rule.threshold:
            logger.debug(
                "promotion_not_met",
                rule=rule.code,
                eligible_total=str(eligible_total.amount),
                threshold=str(rule.threshold.amount),
            )
            return state

        if rule.award.is_zero:
            return state.with_diagnostic(
                Diagnostic(
                    kind=DiagnosticKind.PROMOTION_WITHOUT_AWARD,
                    subject=rule.code,
                    message=f"Promotion '{rule.name}' qualified but has no award; skipped",
                )
            )

        shares = allocate(
            rule.award,
            [state.lines[i].final_amount for i in eligible],
            self._policy.ratio_scale,
        )
        lines = list(state.lines)
        for i, share in zip(eligible, shares):
            lines[i] = lines[i].add_promotion_discount(share)

        logger.info(
            "promotion_fired",
            rule=rule.code,
            name=rule.name,
            category_group=rule.category_group,
            eligible_total=str(eligible_total.amount),
            award=str(rule.award.amount),
        )
        return state.with_lines(lines).with_award(rule.name, rule.award)


def allocate(award: Money, amounts: Sequence[Money], ratio_scale: int) -> list[Money]:
    """Split *award* over *amounts* proportionally, summing to it exactly.

    Every recipient but the last gets its rounded proportional share; the
    last absorbs the remainder. A share never takes more than what is
    still left to hand out, so no share is negative.
    """
    if not amounts:
        return []

    total = Money.zero()
    for amount in amounts:
        total = total + amount
    if total.is_zero:
        return [Money.zero() for _ in amounts[:-1]] + [award]

    quantum = Decimal(1).scaleb(-ratio_scale)
    remaining = award
    shares: list[Money] = []
    for amount in amounts[:-1]:
        ratio = (amount.amount / total.amount).quantize(quantum, rounding=ROUND_HALF_UP)
        share = min((award * ratio).rounded(), remaining)
        shares.append(share)
        remaining = remaining - share
    shares.append(remaining)
    return shares


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


def default_stages(policy: DiscountPolicy) -> tuple[DiscountStage, ...]:
    return (
        ManualDiscountStage(),
        MembershipDiscountStage(policy),
        PromotionDiscountStage(policy),
    )


class DiscountEngine:

    def __init__(
        self,
        policy: DiscountPolicy | None = None,
        stages: Sequence[DiscountStage] | None = None,
    ) -> None:
        self._policy = policy or DiscountPolicy()
        self._stages = tuple(stages) if stages is not None else default_stages(self._policy)

    @property
    def stages(self) -> tuple[DiscountStage, ...]:
        return self._stages

    def price(
        self,
        lines: Sequence[Line],
        context: PricingContext,
        diagnostics: Sequence[Diagnostic] = (),
    ) -> Receipt:
        """Run every stage in order and return the priced receipt."""
        state = PricingState.start(lines, diagnostics)
        for stage in self._stages:
            state = stage.apply(state, context)
            state = replace(state, totals=summarize(state.lines))
            logger.debug(
                "stage_completed",
                stage=stage.name,
                final_total=str(state.totals.final.amount),
            )
        return state.to_receipt()
