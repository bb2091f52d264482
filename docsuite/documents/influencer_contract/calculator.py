"""
Influencer contract payment schedule — advance vs. on-delivery split.
"""
from __future__ import annotations

import math

from docsuite.common.errors import ViolationCollector
from docsuite.common.money import round_half_up
from docsuite.common.number_words import amount_to_words
from docsuite.documents.influencer_contract.schemas import PaymentBreakdown, PaymentStructure

# structure → advance percentage
ADVANCE_PERCENTAGE = {
    PaymentStructure.full_advance: 100,
    PaymentStructure.half_advance: 50,
    PaymentStructure.full_after: 0,
}


def calculate_payment_breakdown(
    total_amount: float,
    structure: PaymentStructure = PaymentStructure.full_after,
) -> PaymentBreakdown:
    check = ViolationCollector("influencer_contract")
    if not math.isfinite(total_amount) or total_amount < 0:
        check.add("total_amount", "Contract amount must be a finite, non-negative number")
    check.raise_if_any()

    if structure is PaymentStructure.full_advance:
        advance = total_amount
    elif structure is PaymentStructure.half_advance:
        # Odd rupee goes to the advance; remainder absorbs it
        advance = round_half_up(total_amount / 2)
    else:
        advance = 0.0

    return PaymentBreakdown(
        structure=structure,
        total_amount=total_amount,
        advance_amount=advance,
        remaining_amount=total_amount - advance,
        advance_percentage=ADVANCE_PERCENTAGE[structure],
        total_amount_in_words=amount_to_words(total_amount),
    )


__all__ = ["calculate_payment_breakdown"]
