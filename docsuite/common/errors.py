"""
errors.py — exception types shared by every calculator.

Two families:
  - CalculationInputError: the caller handed a calculator something it cannot
    compute (negative amount, filing date before due date, missing deposit date).
    Collects ALL violations before raising so a form can flag every field at once.
  - ReferenceTableError: a static table (tax brackets, state list) is malformed.
    Raised at import / table-construction time only, never per calculation.

Both subclass ValueError so the FastAPI ValueError handler in main.py maps them
to 422 without extra wiring.
"""
from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

from docsuite.common.schemas import ErrorDetail

logger = logging.getLogger(__name__)


class CalculationInputError(ValueError):
    """
    Invalid calculator input.

    str(exc) is the JSON-encoded list of {"field", "issue"} dicts — the same
    payload the HTTP layer renders into the error envelope.
    """

    def __init__(self, violations: Iterable[ErrorDetail]):
        self.violations: list[ErrorDetail] = list(violations)
        super().__init__(json.dumps([v.model_dump() for v in self.violations]))

    @property
    def fields(self) -> list[Optional[str]]:
        return [v.field for v in self.violations]


class ReferenceTableError(ValueError):
    """Malformed static reference table (programmer error)."""


class ViolationCollector:
    """
    Accumulates input violations during a calculator's validation pass.

    Usage:
        check = ViolationCollector("gst_penalty")
        if amount < 0:
            check.add("tax_amount", "Tax amount cannot be negative")
        check.raise_if_any()
    """

    def __init__(self, calculator: str):
        self.calculator = calculator
        self.violations: list[ErrorDetail] = []

    def add(self, field: Optional[str], issue: str) -> None:
        self.violations.append(ErrorDetail(field=field, issue=issue))

    def __bool__(self) -> bool:
        return bool(self.violations)

    def raise_if_any(self) -> None:
        if self.violations:
            # Log only calculator and count — never amounts
            logger.info(
                "Input validation failed: calculator=%s violations=%d",
                self.calculator,
                len(self.violations),
            )
            raise CalculationInputError(self.violations)


__all__ = [
    "CalculationInputError",
    "ReferenceTableError",
    "ViolationCollector",
]
