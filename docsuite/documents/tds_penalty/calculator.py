"""
TDS Penalty Calculator — Income Tax Act Section 234E and Section 201(1A).
Pure Python, deterministic, no I/O.

  Late filing fee (234E):        ₹200/day, never more than the TDS amount
  Interest, late deduction:      1% per month or part of a month
  Interest, late deposit:        1.5% per month or part of a month,
                                 due date → actual deposit date
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from docsuite.common.errors import ViolationCollector
from docsuite.common.money import format_inr, round_half_up
from docsuite.common.penalty import (
    capped_late_fee, check_amount, check_deposit_date, check_filing_dates,
    late_days, months_or_part, risk_level,
)
from docsuite.documents.tds_penalty.schemas import (
    DeductionType, TDSPenaltyInput, TDSPenaltyResult, TDSSection,
)

logger = logging.getLogger(__name__)

LATE_FEE_PER_DAY        = 200
LATE_DEDUCTION_RATE_PM  = 0.01
LATE_PAYMENT_RATE_PM    = 0.015
WARNING_MAX_DAYS        = 7

# ===========================================================================
# SECTION TABLE — deduction type → TDS section
# ===========================================================================

TDS_SECTIONS: Mapping[DeductionType, TDSSection] = MappingProxyType({
    DeductionType.salary: TDSSection(
        section="192", description="Salary", late_fee_per_day=LATE_FEE_PER_DAY,
    ),
    DeductionType.contractor: TDSSection(
        section="194C", description="Payment to contractors", late_fee_per_day=LATE_FEE_PER_DAY,
    ),
    DeductionType.rent: TDSSection(
        section="194I", description="Rent", late_fee_per_day=LATE_FEE_PER_DAY,
    ),
    DeductionType.professional: TDSSection(
        section="194J", description="Professional or technical fees",
        late_fee_per_day=LATE_FEE_PER_DAY,
    ),
    DeductionType.commission: TDSSection(
        section="194H", description="Commission or brokerage", late_fee_per_day=LATE_FEE_PER_DAY,
    ),
    DeductionType.ecommerce: TDSSection(
        section="194O", description="E-commerce operator payments",
        late_fee_per_day=LATE_FEE_PER_DAY,
    ),
    DeductionType.non_resident: TDSSection(
        section="195", description="Payments to non-residents",
        late_fee_per_day=LATE_FEE_PER_DAY,
    ),
    DeductionType.other: TDSSection(
        section="other", description="Other payments", late_fee_per_day=LATE_FEE_PER_DAY,
    ),
})


def _summary(
    days: int,
    late_fee: float,
    tds_amount: float,
    on_deduction: float,
    on_payment: float,
) -> str:
    if days == 0:
        return "Your TDS return is filed on time. No penalty applicable."

    text = (
        f"Your TDS return is {days} day{'s' if days > 1 else ''} late. "
        f"Late fee (Section 234E): {format_inr(late_fee)} "
        f"(₹200/day, max {format_inr(tds_amount)})."
    )
    if on_deduction > 0:
        text += f" Interest on late deduction: {format_inr(on_deduction)} (1%/month)."
    if on_payment > 0:
        text += f" Interest on late payment: {format_inr(on_payment)} (1.5%/month)."
    text += f" Total: {format_inr(late_fee + on_deduction + on_payment)}."
    if days <= WARNING_MAX_DAYS:
        text += " File immediately to minimize penalty."
    return text


def calculate_tds_penalty(data: TDSPenaltyInput) -> TDSPenaltyResult:
    """
    Late-filing fee plus Section 201(1A) interest for one TDS return.

    Raises:
        CalculationInputError: filing before due date; deposited_late without
        a deposit date, or with one before the due date.
    """
    check = ViolationCollector("tds_penalty")
    check_amount(check, "tds_amount", data.tds_amount)
    check_filing_dates(check, data.due_date, data.filing_date)
    if data.deposited_late:
        check_deposit_date(check, data.due_date, data.deposit_date, required=True)
    check.raise_if_any()

    section = TDS_SECTIONS[data.deduction_type]
    days = late_days(data.due_date, data.filing_date)

    # Fee can never exceed the TDS itself
    late_fee = capped_late_fee(section.late_fee_per_day, days, data.tds_amount)

    on_deduction = 0.0
    if data.deducted_late:
        on_deduction = round_half_up(
            data.tds_amount * LATE_DEDUCTION_RATE_PM * months_or_part(days)
        )

    on_payment = 0.0
    if data.deposited_late:
        deposit_days = late_days(data.due_date, data.deposit_date)
        on_payment = round_half_up(
            data.tds_amount * LATE_PAYMENT_RATE_PM * months_or_part(deposit_days)
        )

    interest = on_deduction + on_payment
    logger.debug("TDS section resolved: deduction_type=%s section=%s",
                 data.deduction_type.value, section.section)

    return TDSPenaltyResult(
        late_days=days,
        late_fee=late_fee,
        interest_amount=interest,
        total_penalty=late_fee + interest,
        risk_level=risk_level(days, WARNING_MAX_DAYS),
        summary=_summary(days, late_fee, data.tds_amount, on_deduction, on_payment),
        section=section.section,
        daily_rate=section.late_fee_per_day,
        interest_on_late_deduction=on_deduction,
        interest_on_late_payment=on_payment,
    )


__all__ = ["TDS_SECTIONS", "calculate_tds_penalty"]
