"""
Salary slip calculations — earnings, statutory deductions, net pay.

  PF  (employee share):  12% of basic + DA
  ESI (employee share):  0.75% of gross, only while gross < ₹21,000/month
"""
from __future__ import annotations

from docsuite.common.errors import ViolationCollector
from docsuite.common.money import round_half_up
from docsuite.common.number_words import amount_to_words
from docsuite.documents.salary_slip.schemas import (
    Earnings, SalarySlipInput, SalarySlipResult,
)

PF_RATE        = 0.12
ESI_RATE       = 0.0075
ESI_THRESHOLD  = 21_000


def total_earnings(earnings: Earnings) -> float:
    return (
        earnings.basic_salary
        + earnings.dearness
        + earnings.house_rent
        + earnings.conveyance
        + earnings.other_earnings
    )


def calculate_pf(earnings: Earnings) -> float:
    return round_half_up((earnings.basic_salary + earnings.dearness) * PF_RATE)


def calculate_esi(earnings: Earnings) -> float:
    gross = total_earnings(earnings)
    if gross >= ESI_THRESHOLD:
        return 0.0
    return round_half_up(gross * ESI_RATE)


def calculate_salary_slip(data: SalarySlipInput) -> SalarySlipResult:
    """
    Raises:
        CalculationInputError: deductions exceed earnings (negative net pay).
    """
    gross = total_earnings(data.earnings)
    pf = data.deductions.provident_fund
    if pf is None:
        pf = calculate_pf(data.earnings)
    esi = data.deductions.esi
    if esi is None:
        esi = calculate_esi(data.earnings)

    deductions = pf + esi + data.deductions.income_tax + data.deductions.other_deductions
    net = gross - deductions

    check = ViolationCollector("salary_slip")
    if net < 0:
        check.add("deductions", "Total deductions cannot exceed total earnings")
    check.raise_if_any()

    return SalarySlipResult(
        total_earnings=gross,
        provident_fund=pf,
        esi=esi,
        total_deductions=deductions,
        net_salary=net,
        net_salary_in_words=amount_to_words(net),
    )


__all__ = [
    "total_earnings",
    "calculate_pf",
    "calculate_esi",
    "calculate_salary_slip",
]
