"""
schemas.py — GST late-filing penalty Pydantic v2 data contracts.

Defines:
  - GSTReturnType     (GSTR1 / GSTR3B / GSTR9)
  - GSTPenaltyInput   (POST /api/gst/calculate body)
  - GSTPenaltyResult  (PenaltyResult + CGST/SGST split and fee schedule used)
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from docsuite.common.penalty import PenaltyResult


class GSTReturnType(str, Enum):
    GSTR1 = "GSTR1"      # Outward supplies
    GSTR3B = "GSTR3B"    # Monthly summary return
    GSTR9 = "GSTR9"      # Annual return


class GSTPenaltyInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    return_type: GSTReturnType
    tax_amount: float = Field(..., ge=0, description="Tax liability for the period in INR.")
    due_date: date
    filing_date: date
    tax_paid_late: bool = False
    deposit_date: Optional[date] = None    # Interest period ends here when given
    is_nil_return: bool = False            # tax_amount == 0 also counts as NIL


class GSTPenaltyResult(PenaltyResult):
    """late_fee is the combined CGST + SGST fee; each half is reported separately."""
    return_type: GSTReturnType
    cgst_late_fee: float
    sgst_late_fee: float
    daily_rate: float
    max_cap: float
    is_nil_return: bool


__all__ = [
    "GSTReturnType",
    "GSTPenaltyInput",
    "GSTPenaltyResult",
]
