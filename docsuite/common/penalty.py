"""
penalty.py — building blocks shared by the GST and TDS late-filing calculators.

Both statutes follow the same shape: late days since the due date, a per-day
fee capped at some ceiling, optional interest, and a coarse risk level for the
UI badge. Only the rates, caps and interest rules differ per calculator.
"""
from __future__ import annotations

import math
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from docsuite.common.dates import days_between
from docsuite.common.errors import ViolationCollector


class RiskLevel(str, Enum):
    safe = "safe"
    warning = "warning"
    critical = "critical"


class PenaltyResult(BaseModel):
    """
    Common penalty output.

    Invariant: total_penalty == late_fee + interest_amount
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    late_days: int = Field(..., ge=0)
    late_fee: float = Field(..., ge=0)
    interest_amount: float = Field(..., ge=0)
    total_penalty: float = Field(..., ge=0)
    risk_level: RiskLevel
    summary: str


def check_filing_dates(
    check: ViolationCollector,
    due_date: date,
    filing_date: date,
) -> None:
    """Filing before the due date is not a zero-day filing, it is an input error."""
    if filing_date < due_date:
        check.add("filing_date", "Filing date cannot be before the due date")


def check_deposit_date(
    check: ViolationCollector,
    due_date: date,
    deposit_date: Optional[date],
    required: bool,
) -> None:
    if deposit_date is None:
        if required:
            check.add("deposit_date", "Deposit date is required when tax was deposited late")
        return
    if deposit_date < due_date:
        check.add("deposit_date", "Deposit date cannot be before the due date")


def check_amount(check: ViolationCollector, field: str, amount: float) -> None:
    if not math.isfinite(amount) or amount < 0:
        check.add(field, "Amount must be a finite, non-negative number")


def late_days(due_date: date, filing_date: date) -> int:
    return max(0, days_between(due_date, filing_date))


def capped_late_fee(daily_rate: float, days: int, cap: float) -> float:
    return min(daily_rate * days, cap)


def months_or_part(days: int, days_per_month: int = 30) -> int:
    """Statutory 'month or part of a month': 1 day → 1 month, 31 days → 2."""
    return math.ceil(days / days_per_month) if days > 0 else 0


def risk_level(days: int, warning_max_days: int) -> RiskLevel:
    if days <= 0:
        return RiskLevel.safe
    if days <= warning_max_days:
        return RiskLevel.warning
    return RiskLevel.critical


__all__ = [
    "RiskLevel",
    "PenaltyResult",
    "check_filing_dates",
    "check_deposit_date",
    "check_amount",
    "late_days",
    "capped_late_fee",
    "months_or_part",
    "risk_level",
]
