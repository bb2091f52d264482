"""
schemas.py — TDS late-filing penalty Pydantic v2 data contracts.

Defines:
  - DeductionType     (nature of payment — selects the TDS section)
  - TDSSection        (static section record with its Section 234E daily fee)
  - TDSPenaltyInput   (POST /api/tds/calculate body)
  - TDSPenaltyResult  (PenaltyResult + the two Section 201(1A) interest heads)
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from docsuite.common.penalty import PenaltyResult


class DeductionType(str, Enum):
    salary = "salary"
    contractor = "contractor"
    rent = "rent"
    professional = "professional"
    commission = "commission"
    ecommerce = "ecommerce"
    non_resident = "non-resident"
    other = "other"


class TDSSection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    section: str              # "192", "194C", ...
    description: str
    late_fee_per_day: float   # Section 234E


class TDSPenaltyInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    deduction_type: DeductionType
    tds_amount: float = Field(..., ge=0, description="TDS deducted for the quarter in INR.")
    due_date: date
    filing_date: date
    deducted_late: bool = False
    deposited_late: bool = False
    deposit_date: Optional[date] = None    # Required when deposited_late


class TDSPenaltyResult(PenaltyResult):
    """interest_amount == interest_on_late_deduction + interest_on_late_payment."""
    section: str
    daily_rate: float
    interest_on_late_deduction: float
    interest_on_late_payment: float


__all__ = [
    "DeductionType",
    "TDSSection",
    "TDSPenaltyInput",
    "TDSPenaltyResult",
]
