"""Application service: Compute Receipt use case.

Orchestrates the flow between the two lookups and the domain services.
This is the only place that coordinates catalog resolution, line
building and discounting for one cart.
"""

from __future__ import annotations

from datetime import date

import structlog

from pos.application.dto import CartEntrySpec, ReceiptDTO, ReceiptLineDTO
from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import CartEntry
from pos.domain.model.receipt import Receipt
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.repository.item_repository import ItemRepository
from pos.domain.repository.promotion_repository import PromotionRepository
from pos.domain.service.discount_engine import DiscountEngine, PricingContext
from pos.domain.service.line_builder import build_lines

logger = structlog.get_logger(__name__)


class ComputeReceiptHandler:

    def __init__(
        self,
        item_repo: ItemRepository,
        promotion_repo: PromotionRepository,
        engine: DiscountEngine | None = None,
    ) -> None:
        self._item_repo = item_repo
        self._promotion_repo = promotion_repo
        self._engine = engine or DiscountEngine()

    def handle(
        self,
        specs: list[CartEntrySpec],
        transaction_date: date,
        is_privileged_member: bool,
    ) -> ReceiptDTO:
        """Validate raw cart input, price it, and return a display DTO."""
        entries = [self._to_entry(spec) for spec in specs]
        receipt = self.compute(entries, transaction_date, is_privileged_member)
        return self._to_dto(receipt, transaction_date, is_privileged_member)

    def compute(
        self,
        entries: list[CartEntry],
        transaction_date: date,
        is_privileged_member: bool,
    ) -> Receipt:
        """Price a cart.

        Steps:
        1. Resolve every item code in one catalog call.
        2. Load the promotions valid on the transaction date.
        3. Build lines (unknown codes are dropped with a diagnostic).
        4. Run the discount engine.

        A failing lookup propagates; no partial receipt is produced.
        """
        if not entries:
            raise ValidationError("Cart must contain at least one item")

        items = self._item_repo.find_by_codes([e.item_code for e in entries])
        rules = self._promotion_repo.active_on(transaction_date)

        lines, diagnostics = build_lines(entries, items)
        context = PricingContext(
            is_privileged_member=is_privileged_member,
            rules=tuple(rules),
        )
        receipt = self._engine.price(lines, context, diagnostics)

        logger.info(
            "receipt_computed",
            transaction_date=transaction_date.isoformat(),
            privileged_member=is_privileged_member,
            lines=len(receipt.lines),
            active_promotions=len(rules),
            final_total=str(receipt.totals.final.amount),
            diagnostics=len(receipt.diagnostics),
        )
        return receipt

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_entry(spec: CartEntrySpec) -> CartEntry:
        if not spec.item_code or not spec.item_code.strip():
            raise ValidationError("Item code is required")

        manual = None
        if spec.manual_discount is not None and spec.manual_discount.strip():
            manual = Money.of(spec.manual_discount.strip())

        return CartEntry(
            item_code=spec.item_code.strip(),
            quantity=Quantity(spec.quantity),
            manual_discount=manual,
        )

    @staticmethod
    def _to_dto(
        receipt: Receipt,
        transaction_date: date,
        is_privileged_member: bool,
    ) -> ReceiptDTO:
        totals = receipt.totals
        return ReceiptDTO(
            transaction_date=transaction_date.isoformat(),
            is_privileged_member=is_privileged_member,
            lines=[
                ReceiptLineDTO(
                    item_code=line.item_code,
                    item_name=line.item_name,
                    category_name=line.category_name,
                    quantity=line.quantity.value,
                    unit_price=str(line.unit_price),
                    original_amount=str(line.original_amount),
                    member_amount=str(line.member_amount),
                    manual_discount=str(line.manual_discount),
                    membership_discount=str(line.membership_discount),
                    promotion_discount=str(line.promotion_discount),
                    total_discount=str(line.total_discount),
                    final_amount=str(line.final_amount),
                    has_discount=not line.total_discount.is_zero,
                )
                for line in receipt.lines
            ],
            total_original=str(totals.original),
            total_member=str(totals.member_subtotal),
            total_promotion=str(totals.promotion),
            total_discount=str(totals.total_discount),
            total_final=str(totals.final),
            promotions=[(name, str(award)) for name, award in receipt.promotion_awards.items()],
            warnings=[d.message for d in receipt.diagnostics],
        )
