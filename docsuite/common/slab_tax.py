"""
Slab Tax Engine — progressive bracket tax with 87A-style rebate and cess.
Pure Python, deterministic, no I/O. Same input → same output.

Bracket tables are built ONCE at import time with build_bracket_table(), which
validates them. compute_slab_tax() trusts the table it is given and does not
re-validate on every call.

Computation sequence (order determines correctness):
  1. tax_in_slab for every bracket the income reaches (rounded to whole rupees)
  2. tax_before_rebate = sum(tax_in_slab)
  3. rebate = min(tax_before_rebate, cap) if taxable_income <= threshold else 0
  4. cess = round(tax_after_rebate × cess_rate)   ← on POST-rebate tax
  5. total_tax = tax_after_rebate + cess
"""
from __future__ import annotations

import math
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from docsuite.common.errors import ReferenceTableError, ViolationCollector
from docsuite.common.money import round_half_up

UNBOUNDED = float("inf")


# ===========================================================================
# DATA CONTRACTS
# ===========================================================================

class TaxBracket(BaseModel):
    """One progressive tier: income in [lower_bound, upper_bound) is taxed at rate."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    lower_bound: float = Field(..., ge=0)
    upper_bound: float                    # float("inf") for the top bracket
    rate: float = Field(..., ge=0, le=1)  # fraction, e.g. 0.05 for 5%


class SlabBreakdownEntry(BaseModel):
    """Tax attributable to one bracket for a given income."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    slab_start: float
    slab_end: float          # min(taxable_income, upper_bound) — always finite
    rate: float
    tax_in_slab: float


class SlabTaxResult(BaseModel):
    """
    Full slab computation for one taxable income.

    Invariants:
      total_tax == tax_after_rebate + cess
      sum(b.tax_in_slab for b in breakdown) == tax_before_rebate
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    taxable_income: float
    tax_before_rebate: float
    rebate: float
    tax_after_rebate: float
    cess: float
    total_tax: float
    effective_rate: float               # percent of taxable income, 2 dp
    breakdown: List[SlabBreakdownEntry] = Field(default_factory=list)


# ===========================================================================
# TABLE CONSTRUCTION (startup-time validation)
# ===========================================================================

def validate_brackets(brackets: Sequence[TaxBracket]) -> None:
    """
    Check a bracket table covers [0, +inf) with no gaps or overlaps.
    Raises ReferenceTableError — this is a configuration bug, not user input.
    """
    if not brackets:
        raise ReferenceTableError("Bracket table is empty")
    if brackets[0].lower_bound != 0:
        raise ReferenceTableError(
            f"First bracket must start at 0, starts at {brackets[0].lower_bound}"
        )
    for prev, nxt in zip(brackets, brackets[1:]):
        if prev.upper_bound != nxt.lower_bound:
            raise ReferenceTableError(
                f"Brackets are not contiguous: {prev.upper_bound} → {nxt.lower_bound}"
            )
    for bracket in brackets:
        if bracket.upper_bound <= bracket.lower_bound:
            raise ReferenceTableError(
                f"Bracket upper bound {bracket.upper_bound} must exceed lower bound "
                f"{bracket.lower_bound}"
            )
    if not math.isinf(brackets[-1].upper_bound):
        raise ReferenceTableError("Final bracket must be unbounded (upper_bound=inf)")


def build_bracket_table(slabs: Sequence[tuple[float, float]]) -> tuple[TaxBracket, ...]:
    """
    Build contiguous brackets from a list[tuple[ceiling, rate]] — the same
    shape the regime tables are written in:

        [(250_000, 0.00), (500_000, 0.05), (1_000_000, 0.20), (float("inf"), 0.30)]
    """
    brackets: list[TaxBracket] = []
    lower = 0.0
    for ceiling, rate in slabs:
        if not 0 <= rate <= 1:
            raise ReferenceTableError(f"Rate {rate} outside [0, 1]")
        brackets.append(TaxBracket(lower_bound=lower, upper_bound=ceiling, rate=rate))
        lower = ceiling
    validate_brackets(brackets)
    return tuple(brackets)


# ===========================================================================
# COMPUTATION
# ===========================================================================

def compute_slab_tax(
    taxable_income: float,
    brackets: Sequence[TaxBracket],
    rebate_threshold: float,
    rebate_cap_amount: float,
    cess_rate: float,
) -> SlabTaxResult:
    """
    Apply progressive slab tax, rebate and cess to taxable_income.

    Args:
        taxable_income: income after deductions, >= 0.
        brackets: a table produced by build_bracket_table().
        rebate_threshold: rebate applies only when taxable_income <= this.
        rebate_cap_amount: maximum rebate.
        cess_rate: fraction levied on post-rebate tax (0.04 for 4%).

    Raises:
        CalculationInputError: if taxable_income is negative or not finite.
    """
    check = ViolationCollector("slab_tax")
    if not math.isfinite(taxable_income) or taxable_income < 0:
        check.add("taxable_income", "Taxable income must be a finite, non-negative amount")
    check.raise_if_any()

    breakdown: list[SlabBreakdownEntry] = []
    for bracket in brackets:
        if taxable_income <= bracket.lower_bound:
            break
        slab_end = min(taxable_income, bracket.upper_bound)
        tax_in_slab = round_half_up((slab_end - bracket.lower_bound) * bracket.rate)
        breakdown.append(SlabBreakdownEntry(
            slab_start=bracket.lower_bound,
            slab_end=slab_end,
            rate=bracket.rate,
            tax_in_slab=tax_in_slab,
        ))

    tax_before_rebate = sum(entry.tax_in_slab for entry in breakdown)

    if taxable_income <= rebate_threshold:
        rebate = min(tax_before_rebate, rebate_cap_amount)
    else:
        rebate = 0.0
    tax_after_rebate = tax_before_rebate - rebate

    cess = round_half_up(tax_after_rebate * cess_rate)
    total_tax = tax_after_rebate + cess

    effective_rate = (
        round_half_up(total_tax / taxable_income * 100, 2) if taxable_income > 0 else 0.0
    )

    return SlabTaxResult(
        taxable_income=taxable_income,
        tax_before_rebate=tax_before_rebate,
        rebate=rebate,
        tax_after_rebate=tax_after_rebate,
        cess=cess,
        total_tax=total_tax,
        effective_rate=effective_rate,
        breakdown=breakdown,
    )


def marginal_rate(taxable_income: float, brackets: Sequence[TaxBracket]) -> float:
    """
    Slab rate that applies to the last rupee of taxable_income.
    An income sitting exactly on a ceiling belongs to the lower bracket.
    """
    for bracket in brackets:
        if taxable_income <= bracket.upper_bound:
            return bracket.rate
    return brackets[-1].rate


__all__ = [
    "UNBOUNDED",
    "TaxBracket",
    "SlabBreakdownEntry",
    "SlabTaxResult",
    "validate_brackets",
    "build_bracket_table",
    "compute_slab_tax",
    "marginal_rate",
]
