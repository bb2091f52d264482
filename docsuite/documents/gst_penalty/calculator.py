"""
GST Penalty Calculator — late fee (Section 47) and interest (Section 50).
Pure Python, deterministic, no I/O.

Late fee schedule (CGST + SGST combined, split 50/50 on the result):
  GSTR1 / GSTR3B regular:  ₹100/day, max ₹5,000
  GSTR1 / GSTR3B NIL:      ₹20/day,  max ₹500
  GSTR9 (annual):          ₹200/day, max ₹5,000

Interest: 18% p.a. simple, by day, on the tax amount — only when the tax
itself was paid late. Period runs from due date to deposit date, or to the
filing date when no deposit date is given.
"""
from __future__ import annotations

import logging

from docsuite.common.errors import ViolationCollector
from docsuite.common.money import format_inr, round_half_up
from docsuite.common.penalty import (
    RiskLevel, capped_late_fee, check_amount, check_deposit_date,
    check_filing_dates, late_days, risk_level,
)
from docsuite.documents.gst_penalty.schemas import (
    GSTPenaltyInput, GSTPenaltyResult, GSTReturnType,
)

logger = logging.getLogger(__name__)

# ===========================================================================
# FEE SCHEDULE — (daily_rate, max_cap), keyed by (return_type, is_nil)
# ===========================================================================

REGULAR_DAILY_RATE = 100
REGULAR_MAX_CAP    = 5_000
NIL_DAILY_RATE     = 20
NIL_MAX_CAP        = 500
ANNUAL_DAILY_RATE  = 200
ANNUAL_MAX_CAP     = 5_000

FEE_SCHEDULE: dict[tuple[GSTReturnType, bool], tuple[int, int]] = {
    (GSTReturnType.GSTR1, False):  (REGULAR_DAILY_RATE, REGULAR_MAX_CAP),
    (GSTReturnType.GSTR1, True):   (NIL_DAILY_RATE, NIL_MAX_CAP),
    (GSTReturnType.GSTR3B, False): (REGULAR_DAILY_RATE, REGULAR_MAX_CAP),
    (GSTReturnType.GSTR3B, True):  (NIL_DAILY_RATE, NIL_MAX_CAP),
    # No reduced NIL rate for the annual return
    (GSTReturnType.GSTR9, False):  (ANNUAL_DAILY_RATE, ANNUAL_MAX_CAP),
    (GSTReturnType.GSTR9, True):   (ANNUAL_DAILY_RATE, ANNUAL_MAX_CAP),
}

INTEREST_RATE_PA = 0.18
DAYS_PER_YEAR    = 365

WARNING_MAX_DAYS = 15


def _summary(data: GSTPenaltyInput, days: int, late_fee: float, interest: float) -> str:
    if days == 0:
        return "Your return is filed on time. No late fee applicable."
    text = (
        f"Your {data.return_type.value} return is {days} day{'s' if days > 1 else ''} late. "
        f"Late fee: {format_inr(late_fee)} "
        f"(CGST {format_inr(late_fee / 2)} + SGST {format_inr(late_fee / 2)})."
    )
    if interest > 0:
        text += f" Interest at 18% p.a.: {format_inr(interest)}."
    text += f" Total: {format_inr(late_fee + interest)}."
    return text


def calculate_gst_penalty(data: GSTPenaltyInput) -> GSTPenaltyResult:
    """
    Late fee + interest for one GST return.

    Raises:
        CalculationInputError: filing before due date, deposit before due
        date, or a negative / non-finite tax amount.
    """
    check = ViolationCollector("gst_penalty")
    check_amount(check, "tax_amount", data.tax_amount)
    check_filing_dates(check, data.due_date, data.filing_date)
    if data.tax_paid_late:
        check_deposit_date(check, data.due_date, data.deposit_date, required=False)
    check.raise_if_any()

    is_nil = data.is_nil_return or data.tax_amount == 0
    daily_rate, max_cap = FEE_SCHEDULE[(data.return_type, is_nil)]

    days = late_days(data.due_date, data.filing_date)
    late_fee = capped_late_fee(daily_rate, days, max_cap)

    interest = 0.0
    if data.tax_paid_late:
        interest_end = data.deposit_date or data.filing_date
        interest_days = late_days(data.due_date, interest_end)
        interest = round_half_up(
            data.tax_amount * INTEREST_RATE_PA * interest_days / DAYS_PER_YEAR
        )

    level = risk_level(days, WARNING_MAX_DAYS)
    if level is not RiskLevel.safe:
        logger.debug("GST return late: return_type=%s risk=%s", data.return_type.value, level.value)

    return GSTPenaltyResult(
        late_days=days,
        late_fee=late_fee,
        interest_amount=interest,
        total_penalty=late_fee + interest,
        risk_level=level,
        summary=_summary(data, days, late_fee, interest),
        return_type=data.return_type,
        cgst_late_fee=late_fee / 2,
        sgst_late_fee=late_fee / 2,
        daily_rate=daily_rate,
        max_cap=max_cap,
        is_nil_return=is_nil,
    )


__all__ = ["FEE_SCHEDULE", "calculate_gst_penalty"]
