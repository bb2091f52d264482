"""
DocSuite Income Tax Engine — FY 2024-25 (AY 2025-26)
Pure Python, deterministic. Same input → same output.

Old vs New regime comparison for the income-tax calculator form. Both regimes
run through the shared slab engine (docsuite.common.slab_tax); this module only
owns the regime tables, the deduction caps and the comparison.

IMPORTANT: tables below are the ones the calculator shipped with:
  New regime: 3L/6L/9L/12L/15L breakpoints, ₹50K standard deduction,
              87A rebate up to ₹25K (full tax) for taxable income <= ₹7L.
  Old regime: zero-rate band of 2.5L / 3L / 5L by age, then the next
              2.5L at 5%, the next 5L at 20%, 30% above.
"""
from __future__ import annotations

import math
from typing import Optional

from docsuite.common.errors import ViolationCollector
from docsuite.common.money import format_inr, round_half_up
from docsuite.common.slab_tax import TaxBracket, build_bracket_table, compute_slab_tax
from docsuite.documents.income_tax.schemas import (
    AgeGroup, Deductions, RegimeComparisonResult, RegimeTaxResult,
)

# ===========================================================================
# FISCAL YEAR
# ===========================================================================

FINANCIAL_YEAR  = "FY2024-25"
ASSESSMENT_YEAR = "AY2025-26"

# ===========================================================================
# STANDARD DEDUCTION & DEDUCTION CAPS
# ===========================================================================

OLD_STD_DEDUCTION = 50_000
NEW_STD_DEDUCTION = 50_000

CAP_80C     = 150_000
CAP_80D     = 75_000     # ₹25K self + ₹50K senior parents
CAP_24B     = 200_000    # Home loan interest, self-occupied
CAP_80CCD1B = 50_000     # Employee NPS, over and above 80C

CESS_RATE = 0.04

# ===========================================================================
# 87A REBATE PARAMETERS
# ===========================================================================

OLD_87A_MAX_REBATE      = 12_500
OLD_87A_TAXABLE_CEILING = 500_000

NEW_87A_MAX_REBATE      = 25_000    # = full slab tax at exactly ₹7L
NEW_87A_TAXABLE_CEILING = 700_000

# ===========================================================================
# SLAB TABLES — list[tuple[ceiling, rate]], validated at import
# ===========================================================================

# Old regime slabs sit on top of the age band's basic exemption:
# next ₹2.5L at 5%, next ₹5L at 20%, remainder at 30%.
OLD_BASIC_EXEMPTION: dict[AgeGroup, int] = {
    AgeGroup.below_60:     250_000,
    AgeGroup.senior:       300_000,
    AgeGroup.super_senior: 500_000,
}
OLD_FIVE_PERCENT_WIDTH   = 250_000
OLD_TWENTY_PERCENT_WIDTH = 500_000


def _old_regime_slabs(basic_exemption: int) -> list[tuple[float, float]]:
    five_top = basic_exemption + OLD_FIVE_PERCENT_WIDTH
    return [
        (basic_exemption,                     0.00),
        (five_top,                            0.05),
        (five_top + OLD_TWENTY_PERCENT_WIDTH, 0.20),
        (float("inf"),                        0.30),
    ]


# below-60: 2.5L / 5L / 10L; senior: 3L / 5.5L / 10.5L; super-senior: 5L / 7.5L / 12.5L
OLD_REGIME_SLABS: dict[AgeGroup, list[tuple[float, float]]] = {
    age: _old_regime_slabs(exemption) for age, exemption in OLD_BASIC_EXEMPTION.items()
}

NEW_REGIME_SLABS: list[tuple[float, float]] = [
    (300_000,      0.00),   # 0–3L: 0%
    (600_000,      0.05),   # 3–6L: 5%
    (900_000,      0.10),   # 6–9L: 10%
    (1_200_000,    0.15),   # 9–12L: 15%
    (1_500_000,    0.20),   # 12–15L: 20%
    (float("inf"), 0.30),   # >15L: 30%
]

OLD_REGIME_BRACKETS: dict[AgeGroup, tuple[TaxBracket, ...]] = {
    age: build_bracket_table(slabs) for age, slabs in OLD_REGIME_SLABS.items()
}
NEW_REGIME_BRACKETS: tuple[TaxBracket, ...] = build_bracket_table(NEW_REGIME_SLABS)


# ===========================================================================
# INTERNAL HELPERS
# ===========================================================================

def _check_gross_income(gross_income: float) -> None:
    check = ViolationCollector("income_tax")
    if not math.isfinite(gross_income) or gross_income < 0:
        check.add("gross_income", "Gross income must be a finite, non-negative amount")
    check.raise_if_any()


def calculate_total_deductions(
    deductions: Deductions,
    standard_deduction: float = OLD_STD_DEDUCTION,
) -> float:
    """
    Old-regime deduction total. Each itemised amount is clamped to its own
    statutory cap BEFORE summation; HRA and other deductions are uncapped.
    """
    section_80c  = min(deductions.section_80c, CAP_80C)
    section_80d  = min(deductions.section_80d, CAP_80D)
    home_loan    = min(deductions.home_loan_interest, CAP_24B)
    nps          = min(deductions.nps_80ccd1b, CAP_80CCD1B)
    return round_half_up(
        standard_deduction
        + section_80c
        + section_80d
        + deductions.hra
        + home_loan
        + nps
        + deductions.other_deductions
    )


# ===========================================================================
# OLD REGIME CALCULATOR
# ===========================================================================

def calculate_old_regime(
    gross_income: float,
    deductions: Optional[Deductions] = None,
    age_group: AgeGroup = AgeGroup.below_60,
) -> RegimeTaxResult:
    """
    Old regime: std deduction ₹50K + capped itemised deductions, age-dependent
    slab table, 87A rebate up to ₹12,500 if taxable <= ₹5L, 4% cess.
    """
    _check_gross_income(gross_income)
    deductions = deductions or Deductions()

    total_deductions = calculate_total_deductions(deductions, OLD_STD_DEDUCTION)
    taxable_income = max(0.0, round_half_up(gross_income - total_deductions))

    slab = compute_slab_tax(
        taxable_income,
        OLD_REGIME_BRACKETS[age_group],
        rebate_threshold=OLD_87A_TAXABLE_CEILING,
        rebate_cap_amount=OLD_87A_MAX_REBATE,
        cess_rate=CESS_RATE,
    )
    return RegimeTaxResult(
        **slab.model_dump(),
        regime="old",
        gross_income=gross_income,
        standard_deduction=OLD_STD_DEDUCTION,
        deductions=total_deductions,
    )


# ===========================================================================
# NEW REGIME CALCULATOR
# ===========================================================================

def calculate_new_regime(gross_income: float) -> RegimeTaxResult:
    """
    New regime (Section 115BAC): standard deduction is the ONLY deduction.
    Age does not change the table. 87A rebate (full tax) if taxable <= ₹7L.
    """
    _check_gross_income(gross_income)

    taxable_income = max(0.0, round_half_up(gross_income - NEW_STD_DEDUCTION))

    slab = compute_slab_tax(
        taxable_income,
        NEW_REGIME_BRACKETS,
        rebate_threshold=NEW_87A_TAXABLE_CEILING,
        rebate_cap_amount=NEW_87A_MAX_REBATE,
        cess_rate=CESS_RATE,
    )
    return RegimeTaxResult(
        **slab.model_dump(),
        regime="new",
        gross_income=gross_income,
        standard_deduction=NEW_STD_DEDUCTION,
        deductions=float(NEW_STD_DEDUCTION),
    )


# ===========================================================================
# COMPARE REGIMES — public API
# ===========================================================================

def compare_regimes(
    gross_income: float,
    age_group: AgeGroup = AgeGroup.below_60,
    deductions: Optional[Deductions] = None,
) -> RegimeComparisonResult:
    """
    Compute both regimes and recommend the lower-tax one.
    Exact tie → "equal". Also builds a short rationale and old-regime
    suggestions for unused deduction headroom.

    Uses a local import of optimizer to avoid a circular import at module
    level (optimizer.py imports the cap constants from this module).
    """
    from docsuite.documents.income_tax.optimizer import generate_old_suggestions

    deductions = deductions or Deductions()
    old = calculate_old_regime(gross_income, deductions, age_group)
    new = calculate_new_regime(gross_income)

    if old.total_tax < new.total_tax:
        recommendation = "old"
    elif new.total_tax < old.total_tax:
        recommendation = "new"
    else:
        recommendation = "equal"

    savings = abs(old.total_tax - new.total_tax)
    savings_percentage = (
        round_half_up(savings / gross_income * 100, 2) if gross_income > 0 else 0.0
    )

    if recommendation == "equal":
        rationale = (
            f"Both regimes result in the same tax ({format_inr(old.total_tax)}). "
            "The New Regime needs no investment proofs, so either choice is fine."
        )
    elif recommendation == "old":
        rationale = (
            f"Old Regime saves {format_inr(savings)} over the New Regime. "
            f"Old Regime tax: {format_inr(old.total_tax)} vs New Regime tax: "
            f"{format_inr(new.total_tax)}. Your deductions of "
            f"{format_inr(old.deductions)} outweigh the lower New Regime slab rates."
        )
    else:
        rationale = (
            f"New Regime saves {format_inr(savings)} over the Old Regime. "
            f"New Regime tax: {format_inr(new.total_tax)} vs Old Regime tax: "
            f"{format_inr(old.total_tax)}. Your Old Regime deductions "
            f"({format_inr(old.deductions)}) are not enough to overcome the lower "
            "New Regime slab rates."
        )

    return RegimeComparisonResult(
        old_regime=old,
        new_regime=new,
        recommendation=recommendation,
        savings=savings,
        savings_percentage=savings_percentage,
        rationale=rationale,
        suggestions=generate_old_suggestions(deductions, old, age_group),
    )
