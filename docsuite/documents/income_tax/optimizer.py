"""
DocSuite Income Tax Optimizer — AY 2025-26
Generates plain-English suggestions for unused old-regime deduction headroom.
Pure functions. No I/O.

Called by compare_regimes() in tax_engine.py via local import to avoid circular import.
(optimizer.py imports constants from tax_engine — so tax_engine must NOT import this at module level.)
"""
from __future__ import annotations

from docsuite.common.money import format_inr, round_half_up
from docsuite.common.slab_tax import marginal_rate
from docsuite.documents.income_tax.schemas import AgeGroup, Deductions, RegimeTaxResult
from docsuite.documents.income_tax.tax_engine import (
    CAP_24B, CAP_80C, CAP_80CCD1B, CAP_80D, CESS_RATE, OLD_REGIME_BRACKETS,
)

_SUGGESTION_MIN_SAVING = 1_000   # Suppress suggestions where tax saving < ₹1,000
_MAX_SUGGESTIONS = 3


def _old_marginal_rate(taxable_income: float, age_group: AgeGroup) -> float:
    """
    Effective marginal rate for old regime = slab_rate × 1.04 (cess inclusive).
    Returns combined rate (e.g., 0.312 for 30% slab + 4% cess).
    """
    return marginal_rate(taxable_income, OLD_REGIME_BRACKETS[age_group]) * (1 + CESS_RATE)


def generate_old_suggestions(
    deductions: Deductions,
    old_result: RegimeTaxResult,
    age_group: AgeGroup = AgeGroup.below_60,
) -> list[str]:
    """
    Generate actionable suggestions for unused old-regime deduction headroom.
    Covers: 80C, 80D, 80CCD(1B) NPS, Section 24(b).
    Suppresses suggestions with < ₹1,000 tax saving.
    Returns at most 3 suggestions, sorted by rupee saving descending.
    """
    effective_rate = _old_marginal_rate(old_result.taxable_income, age_group)
    if effective_rate == 0.0 or old_result.total_tax == 0:
        return []   # Nothing left to save

    # --- Collect candidates ---
    candidates: list[tuple[float, str]] = []   # (saving, suggestion_text)

    headroom = [
        (
            CAP_80C - min(deductions.section_80c, CAP_80C),
            "Invest {gap} more in 80C instruments (PPF, ELSS, LIC) "
            "to save {saving} in the Old Regime.",
        ),
        (
            CAP_80D - min(deductions.section_80d, CAP_80D),
            "Pay {gap} more in health insurance premiums under Section 80D "
            "to save {saving} in the Old Regime.",
        ),
        (
            CAP_80CCD1B - min(deductions.nps_80ccd1b, CAP_80CCD1B),
            "Contribute {gap} more to NPS (Section 80CCD(1B)) "
            "to save {saving} in the Old Regime.",
        ),
        (
            CAP_24B - min(deductions.home_loan_interest, CAP_24B),
            "Home loan interest paid up to {gap} more can be claimed under "
            "Section 24(b) to save {saving} in the Old Regime.",
        ),
    ]

    for gap, template in headroom:
        # Saving can never exceed the tax actually payable
        saving = min(gap * effective_rate, old_result.total_tax)
        if gap > 0 and saving >= _SUGGESTION_MIN_SAVING:
            candidates.append((
                saving,
                template.format(gap=format_inr(gap), saving=format_inr(round_half_up(saving))),
            ))

    # Sort by saving descending, cap at 3
    candidates.sort(key=lambda x: x[0], reverse=True)
    return [text for _, text in candidates[:_MAX_SUGGESTIONS]]


__all__ = ["generate_old_suggestions"]
