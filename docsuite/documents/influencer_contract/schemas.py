"""
schemas.py — influencer–brand contract payment Pydantic v2 data contracts.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PaymentStructure(str, Enum):
    full_advance = "full-advance"
    half_advance = "half-advance"
    full_after = "full-after"


class PaymentBreakdownRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total_amount: float = Field(..., ge=0)
    structure: PaymentStructure = PaymentStructure.full_after


class PaymentBreakdown(BaseModel):
    """advance_amount + remaining_amount == total_amount."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    structure: PaymentStructure
    total_amount: float
    advance_amount: float
    remaining_amount: float
    advance_percentage: int
    total_amount_in_words: str


__all__ = [
    "PaymentStructure",
    "PaymentBreakdownRequest",
    "PaymentBreakdown",
]
