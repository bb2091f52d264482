"""
schemas.py — rent agreement Pydantic v2 data contracts.

Defines:
  - RentAgreementInput         (rent terms + property state; POST body)
  - RentAgreementCalculations  (derived amounts shown on the agreement preview)
  - StateOption                (GET /api/rent-agreement/states row)
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DURATION_MONTHS = 11


class RentAgreementInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    monthly_rent: float = Field(..., ge=0)
    security_deposit: float = Field(default=0, ge=0)
    maintenance_charges: float = Field(default=0, ge=0)
    maintenance_included: bool = False
    agreement_start_date: Optional[date] = None
    agreement_duration: int = Field(default=DEFAULT_DURATION_MONTHS, ge=1, le=120)  # months
    state_code: str = Field(..., min_length=2, max_length=2, description="Two-letter state code, e.g. KA")


class RentAgreementCalculations(BaseModel):
    """
    Invariants:
      agreement_end_date == add_months(start, duration) - 1 day (None without a start date)
      stamp_duty_estimate >= 100 and is a multiple of 10
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    total_security_deposit: float
    first_month_total: float           # rent + maintenance (unless included) + deposit
    total_rent: float
    agreement_end_date: Optional[date]
    duration_text: str
    stamp_duty_percent: float
    stamp_duty_estimate: float
    registration_fee: float
    monthly_rent_in_words: str


class StateOption(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str
    name: str
    stamp_duty_percent: float


__all__ = [
    "DEFAULT_DURATION_MONTHS",
    "RentAgreementInput",
    "RentAgreementCalculations",
    "StateOption",
]
