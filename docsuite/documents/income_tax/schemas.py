"""
schemas.py — income-tax regime comparison Pydantic v2 data contracts (FY 2024-25).

Defines:
  - AgeGroup              (below-60 / senior / super-senior — picks old-regime table)
  - Deductions            (raw itemised deductions as entered on the form)
  - IncomeTaxRequest      (POST /api/income-tax/compare body)
  - RegimeTaxResult       (SlabTaxResult + gross income and deductions for one regime)
  - RegimeComparisonResult (old vs new — public output of compare_regimes())
"""
from __future__ import annotations

from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from docsuite.common.slab_tax import SlabTaxResult


class AgeGroup(str, Enum):
    below_60 = "below-60"
    senior = "senior"              # 60–80
    super_senior = "super-senior"  # 80+


class Deductions(BaseModel):
    """
    Itemised old-regime deductions as ENTERED — caps are applied by the engine,
    so section_80c=200000 is accepted and clamped to ₹1,50,000, never rejected.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    section_80c: float = Field(default=0, ge=0)         # Cap ₹1,50,000
    section_80d: float = Field(default=0, ge=0)         # Cap ₹75,000 (self + parents)
    hra: float = Field(default=0, ge=0)                 # HRA exemption, uncapped here
    home_loan_interest: float = Field(default=0, ge=0)  # Section 24(b), cap ₹2,00,000
    nps_80ccd1b: float = Field(default=0, ge=0)         # Cap ₹50,000
    other_deductions: float = Field(default=0, ge=0)    # LTA, 80E, 80G, ...


class IncomeTaxRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    gross_income: float = Field(..., ge=0, description="Annual gross income in INR.")
    age_group: AgeGroup = AgeGroup.below_60
    deductions: Deductions = Field(default_factory=Deductions)


class RegimeTaxResult(SlabTaxResult):
    """
    Slab computation for one regime plus the inputs that produced it.

    deductions is the TOTAL actually applied (standard deduction included,
    itemised amounts after caps).
    """
    regime: Literal["old", "new"]
    gross_income: float
    standard_deduction: float
    deductions: float


class RegimeComparisonResult(BaseModel):
    """
    Output of compare_regimes().

    recommendation is "old" iff old.total_tax < new.total_tax, "equal" iff the
    two totals match exactly, otherwise "new".
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    old_regime: RegimeTaxResult
    new_regime: RegimeTaxResult
    recommendation: Literal["old", "new", "equal"]
    savings: float                 # |old.total_tax - new.total_tax|
    savings_percentage: float      # savings / gross_income × 100, 2 dp
    rationale: str
    suggestions: List[str] = Field(default_factory=list)   # old-regime headroom, ≤ 3


__all__ = [
    "AgeGroup",
    "Deductions",
    "IncomeTaxRequest",
    "RegimeTaxResult",
    "RegimeComparisonResult",
]
