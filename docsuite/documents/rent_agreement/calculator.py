"""
Rent agreement calculations — stamp duty, end date, first-month outlay.

Stamp duty is an estimate: percentage of total rent for the term, looked up
per state (2% when the state is unknown), floored at ₹100 and rounded UP to
the next multiple of ₹10. Decimal arithmetic keeps 25000 × 11 × 1% at exactly
2750 before the ceiling is applied.
"""
from __future__ import annotations

import math
from datetime import date, timedelta
from decimal import ROUND_CEILING, Decimal
from typing import Optional

from docsuite.common.dates import add_months
from docsuite.common.errors import ViolationCollector
from docsuite.common.number_words import amount_to_words
from docsuite.common.states import INDIAN_STATES, stamp_duty_percent
from docsuite.documents.rent_agreement.schemas import (
    RentAgreementCalculations, RentAgreementInput, StateOption,
)

MINIMUM_STAMP_DUTY = Decimal(100)
STAMP_DUTY_ROUNDING = Decimal(10)
REGISTRATION_FEE = 500

_DURATION_TEXT = {
    11: "Eleven Months",
    12: "One Year",
    24: "Two Years",
    36: "Three Years",
}


def estimate_stamp_duty(monthly_rent: float, duration_months: int, state_code: str) -> float:
    check = ViolationCollector("rent_agreement")
    if not math.isfinite(monthly_rent) or monthly_rent < 0:
        check.add("monthly_rent", "Monthly rent must be a finite, non-negative amount")
    elif not math.isfinite(monthly_rent * max(duration_months, 1)):
        check.add("monthly_rent", "Total rent for the term is too large to compute")
    if duration_months < 1:
        check.add("agreement_duration", "Agreement duration must be at least one month")
    check.raise_if_any()

    percent = Decimal(str(stamp_duty_percent(state_code)))
    total_rent = Decimal(str(monthly_rent)) * duration_months
    duty = max(total_rent * percent / 100, MINIMUM_STAMP_DUTY)
    steps = (duty / STAMP_DUTY_ROUNDING).to_integral_value(rounding=ROUND_CEILING)
    return float(steps * STAMP_DUTY_ROUNDING)


def compute_agreement_end_date(start_date: date, duration_months: int) -> date:
    """Last day of the term: 2024-01-01 + 11 months → 2024-11-30."""
    return add_months(start_date, duration_months) - timedelta(days=1)


def duration_text(months: int) -> str:
    return _DURATION_TEXT.get(months, f"{months} Months")


def calculate_rent_agreement(data: RentAgreementInput) -> RentAgreementCalculations:
    maintenance = 0 if data.maintenance_included else data.maintenance_charges
    end_date: Optional[date] = None
    if data.agreement_start_date is not None:
        end_date = compute_agreement_end_date(data.agreement_start_date, data.agreement_duration)

    return RentAgreementCalculations(
        total_security_deposit=data.security_deposit,
        first_month_total=data.monthly_rent + maintenance + data.security_deposit,
        total_rent=data.monthly_rent * data.agreement_duration,
        agreement_end_date=end_date,
        duration_text=duration_text(data.agreement_duration),
        stamp_duty_percent=stamp_duty_percent(data.state_code),
        stamp_duty_estimate=estimate_stamp_duty(
            data.monthly_rent, data.agreement_duration, data.state_code
        ),
        registration_fee=REGISTRATION_FEE,
        monthly_rent_in_words=amount_to_words(data.monthly_rent),
    )


def list_state_options() -> list[StateOption]:
    return [
        StateOption(
            code=state.code,
            name=state.name,
            stamp_duty_percent=stamp_duty_percent(state.code),
        )
        for state in INDIAN_STATES
    ]


__all__ = [
    "MINIMUM_STAMP_DUTY",
    "REGISTRATION_FEE",
    "estimate_stamp_duty",
    "compute_agreement_end_date",
    "duration_text",
    "calculate_rent_agreement",
    "list_state_options",
]
