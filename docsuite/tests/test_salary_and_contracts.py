"""
Salary slip and influencer contract payment tests.
"""
from __future__ import annotations

import pytest

from docsuite.common.errors import CalculationInputError
from docsuite.documents.influencer_contract.calculator import calculate_payment_breakdown
from docsuite.documents.influencer_contract.schemas import PaymentStructure
from docsuite.documents.salary_slip.calculator import (
    calculate_esi,
    calculate_pf,
    calculate_salary_slip,
    total_earnings,
)
from docsuite.documents.salary_slip.schemas import Earnings, SalaryDeductions, SalarySlipInput

# ===========================================================================
# Salary slip
# ===========================================================================

MID_LEVEL = Earnings(
    basic_salary=30_000, dearness=5_000, house_rent=12_000, conveyance=1_600, other_earnings=1_400,
)
ENTRY_LEVEL = Earnings(basic_salary=12_000, dearness=1_000, house_rent=4_000, conveyance=1_000)


def test_total_earnings() -> None:
    assert total_earnings(MID_LEVEL) == 50_000


def test_pf_is_twelve_percent_of_basic_plus_da() -> None:
    assert calculate_pf(MID_LEVEL) == 4_200


def test_esi_only_below_threshold() -> None:
    # Gross 18,000 → 0.75% = 135
    assert calculate_esi(ENTRY_LEVEL) == 135
    assert calculate_esi(MID_LEVEL) == 0


def test_esi_threshold_is_exclusive() -> None:
    assert calculate_esi(Earnings(basic_salary=21_000)) == 0
    assert calculate_esi(Earnings(basic_salary=20_999)) == pytest.approx(157)


def test_salary_slip_auto_statutory_deductions() -> None:
    result = calculate_salary_slip(SalarySlipInput(
        earnings=MID_LEVEL,
        deductions=SalaryDeductions(income_tax=2_500, other_deductions=200),
    ))
    assert result.total_earnings == 50_000
    assert result.provident_fund == 4_200
    assert result.esi == 0
    assert result.total_deductions == 6_900
    assert result.net_salary == 43_100
    assert result.net_salary_in_words == "Forty Three Thousand One Hundred Rupees Only"


def test_explicit_statutory_amounts_used_as_entered() -> None:
    result = calculate_salary_slip(SalarySlipInput(
        earnings=ENTRY_LEVEL,
        deductions=SalaryDeductions(provident_fund=1_800, esi=0),
    ))
    assert result.provident_fund == 1_800
    assert result.esi == 0
    assert result.net_salary == 16_200


def test_deductions_above_earnings_rejected() -> None:
    with pytest.raises(CalculationInputError) as exc_info:
        calculate_salary_slip(SalarySlipInput(
            earnings=Earnings(basic_salary=10_000),
            deductions=SalaryDeductions(income_tax=20_000),
        ))
    assert exc_info.value.fields == ["deductions"]


def test_empty_slip_is_zero() -> None:
    result = calculate_salary_slip(SalarySlipInput())
    assert result.net_salary == 0
    assert result.net_salary_in_words == "Zero Rupees Only"


# ===========================================================================
# Influencer contract payment breakdown
# ===========================================================================

@pytest.mark.parametrize(
    "structure, total, advance, remaining, pct",
    [
        (PaymentStructure.full_advance, 50_000, 50_000, 0, 100),
        (PaymentStructure.half_advance, 50_000, 25_000, 25_000, 50),
        (PaymentStructure.half_advance, 25_001, 12_501, 12_500, 50),
        (PaymentStructure.full_after, 50_000, 0, 50_000, 0),
    ],
)
def test_payment_breakdown(
    structure: PaymentStructure, total: float, advance: float, remaining: float, pct: int,
) -> None:
    result = calculate_payment_breakdown(total, structure)
    assert result.advance_amount == advance
    assert result.remaining_amount == remaining
    assert result.advance_amount + result.remaining_amount == total
    assert result.advance_percentage == pct


def test_payment_breakdown_words() -> None:
    result = calculate_payment_breakdown(75_000, PaymentStructure.half_advance)
    assert result.total_amount_in_words == "Seventy Five Thousand Rupees Only"


def test_negative_contract_amount_rejected() -> None:
    with pytest.raises(CalculationInputError):
        calculate_payment_breakdown(-10, PaymentStructure.full_advance)
