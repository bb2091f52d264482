"""
schemas.py — monthly salary slip Pydantic v2 data contracts.

Defines:
  - Earnings, SalaryDeductions  (monthly components in INR)
  - SalarySlipInput             (POST /api/salary-slip/calculate body)
  - SalarySlipResult            (totals, statutory suggestions, net pay in words)

provident_fund and esi left as None are filled in from the statutory formulas;
an explicit value (including 0) is used as entered.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Earnings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    basic_salary: float = Field(default=0, ge=0)
    dearness: float = Field(default=0, ge=0)          # DA
    house_rent: float = Field(default=0, ge=0)        # HRA
    conveyance: float = Field(default=0, ge=0)
    other_earnings: float = Field(default=0, ge=0)


class SalaryDeductions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    provident_fund: Optional[float] = Field(default=None, ge=0)
    esi: Optional[float] = Field(default=None, ge=0)
    income_tax: float = Field(default=0, ge=0)        # TDS on salary
    other_deductions: float = Field(default=0, ge=0)


class SalarySlipInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    earnings: Earnings = Field(default_factory=Earnings)
    deductions: SalaryDeductions = Field(default_factory=SalaryDeductions)


class SalarySlipResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    total_earnings: float
    provident_fund: float
    esi: float
    total_deductions: float
    net_salary: float
    net_salary_in_words: str


__all__ = [
    "Earnings",
    "SalaryDeductions",
    "SalarySlipInput",
    "SalarySlipResult",
]
