"""
Slab tax engine tests — bracket tables, per-slab breakdown, 87A rebate, cess.

Groups:
  1. Table construction / validation (configuration errors)
  2. Worked slab computations against hand-computed figures
  3. Properties: monotonicity, breakdown sum, rebate boundaries
"""
from __future__ import annotations

import pytest

from docsuite.common.errors import CalculationInputError, ReferenceTableError
from docsuite.common.slab_tax import (
    UNBOUNDED,
    TaxBracket,
    build_bracket_table,
    compute_slab_tax,
    marginal_rate,
    validate_brackets,
)
from docsuite.documents.income_tax.schemas import AgeGroup
from docsuite.documents.income_tax.tax_engine import (
    CESS_RATE,
    NEW_87A_MAX_REBATE, NEW_87A_TAXABLE_CEILING,
    NEW_REGIME_BRACKETS,
    OLD_87A_MAX_REBATE, OLD_87A_TAXABLE_CEILING,
    OLD_REGIME_BRACKETS,
)

OLD_BELOW_60 = OLD_REGIME_BRACKETS[AgeGroup.below_60]


def _old(taxable: float):
    return compute_slab_tax(
        taxable, OLD_BELOW_60, OLD_87A_TAXABLE_CEILING, OLD_87A_MAX_REBATE, CESS_RATE
    )


def _new(taxable: float):
    return compute_slab_tax(
        taxable, NEW_REGIME_BRACKETS, NEW_87A_TAXABLE_CEILING, NEW_87A_MAX_REBATE, CESS_RATE
    )


# ===========================================================================
# TEST GROUP 1: Table construction
# ===========================================================================

def test_build_bracket_table_is_contiguous() -> None:
    table = build_bracket_table([(100, 0.0), (200, 0.1), (UNBOUNDED, 0.2)])
    assert [(b.lower_bound, b.upper_bound) for b in table] == [
        (0, 100), (100, 200), (200, UNBOUNDED),
    ]


def test_final_bracket_must_be_unbounded() -> None:
    with pytest.raises(ReferenceTableError):
        build_bracket_table([(100, 0.0), (200, 0.1)])


def test_rate_outside_unit_interval_rejected() -> None:
    with pytest.raises(ReferenceTableError):
        build_bracket_table([(100, 0.0), (UNBOUNDED, 1.5)])


def test_descending_ceilings_rejected() -> None:
    with pytest.raises(ReferenceTableError):
        build_bracket_table([(200, 0.0), (100, 0.1), (UNBOUNDED, 0.2)])


def test_validate_brackets_detects_gap() -> None:
    brackets = [
        TaxBracket(lower_bound=0, upper_bound=100, rate=0.0),
        TaxBracket(lower_bound=150, upper_bound=UNBOUNDED, rate=0.1),
    ]
    with pytest.raises(ReferenceTableError):
        validate_brackets(brackets)


def test_validate_brackets_requires_zero_start() -> None:
    with pytest.raises(ReferenceTableError):
        validate_brackets([TaxBracket(lower_bound=10, upper_bound=UNBOUNDED, rate=0.1)])


def test_validate_brackets_rejects_empty_table() -> None:
    with pytest.raises(ReferenceTableError):
        validate_brackets([])


# ===========================================================================
# TEST GROUP 2: Worked computations
# ===========================================================================

def test_zero_income_empty_breakdown() -> None:
    result = _new(0)
    assert result.breakdown == []
    assert result.total_tax == 0
    assert result.effective_rate == 0


def test_income_inside_first_slab_single_entry() -> None:
    result = _old(200_000)
    assert len(result.breakdown) == 1
    assert result.breakdown[0].slab_end == 200_000
    assert result.total_tax == 0


def test_old_regime_600k_below_60() -> None:
    """₹6L taxable, old regime: 12,500 + 20,000 = 32,500; no rebate; cess 1,300."""
    result = _old(600_000)
    assert [e.tax_in_slab for e in result.breakdown] == [0, 12_500, 20_000]
    assert result.tax_before_rebate == 32_500
    assert result.rebate == 0
    assert result.cess == 1_300
    assert result.total_tax == 33_800
    assert result.effective_rate == pytest.approx(5.63, abs=0.001)


def test_new_regime_950k() -> None:
    """0 + 15,000 + 30,000 + 7,500 = 52,500; cess 2,100."""
    result = _new(950_000)
    assert [(e.slab_start, e.slab_end) for e in result.breakdown] == [
        (0, 300_000), (300_000, 600_000), (600_000, 900_000), (900_000, 950_000),
    ]
    assert result.tax_before_rebate == 52_500
    assert result.total_tax == 54_600


def test_top_slab_entry_has_finite_end() -> None:
    result = _new(2_000_000)
    assert result.breakdown[-1].slab_end == 2_000_000
    assert result.breakdown[-1].rate == 0.30


def test_negative_taxable_income_rejected() -> None:
    with pytest.raises(CalculationInputError) as exc_info:
        _new(-1)
    assert exc_info.value.fields == ["taxable_income"]


def test_marginal_rate_on_ceiling_belongs_to_lower_bracket() -> None:
    assert marginal_rate(250_000, OLD_BELOW_60) == 0.0
    assert marginal_rate(250_001, OLD_BELOW_60) == 0.05
    assert marginal_rate(5_000_000, OLD_BELOW_60) == 0.30


# ===========================================================================
# TEST GROUP 3: Properties
# ===========================================================================

_INCOMES = sorted(set(range(0, 3_000_001, 25_000)) | {
    249_999, 250_001, 499_999, 500_001, 699_999, 700_001, 1_000_001,
})


@pytest.mark.parametrize("compute", [_old, _new], ids=["old", "new"])
def test_tax_is_non_decreasing_in_income(compute) -> None:
    totals = [compute(income).total_tax for income in _INCOMES]
    assert all(a <= b for a, b in zip(totals, totals[1:]))


@pytest.mark.parametrize("compute", [_old, _new], ids=["old", "new"])
def test_breakdown_sums_to_tax_before_rebate(compute) -> None:
    for income in _INCOMES:
        result = compute(income)
        assert sum(e.tax_in_slab for e in result.breakdown) == result.tax_before_rebate
        assert result.total_tax == result.tax_after_rebate + result.cess


def test_old_rebate_applies_at_threshold_not_above() -> None:
    at = _old(500_000)
    above = _old(500_001)
    assert at.rebate == 12_500
    assert at.total_tax == 0
    assert above.rebate == 0
    assert above.total_tax == 13_000


def test_new_rebate_applies_at_threshold_not_above() -> None:
    at = _new(700_000)
    above = _new(700_001)
    assert at.rebate == 25_000
    assert at.total_tax == 0
    assert above.rebate == 0
    assert above.total_tax == 26_000
