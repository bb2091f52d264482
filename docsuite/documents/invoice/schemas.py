"""
schemas.py — GST invoice Pydantic v2 data contracts.

Defines:
  - InvoiceInput   (single line item + parties; POST /api/invoice/totals body)
  - InvoiceTotals  (subtotal, tax split, total, amount in words)
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InvoiceInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    quantity: float = Field(..., ge=0)
    rate: float = Field(..., ge=0, description="Unit price in INR, before tax.")
    seller_gstin: str = Field(..., min_length=2)
    buyer_gstin: Optional[str] = None
    place_of_supply_state: Optional[str] = Field(
        default=None, description="Two-digit GST state code, used when the buyer has no GSTIN."
    )
    cgst_rate: float = Field(default=9, ge=0, le=100)
    sgst_rate: float = Field(default=9, ge=0, le=100)
    igst_rate: float = Field(default=18, ge=0, le=100)


class InvoiceTotals(BaseModel):
    """
    Invariant: is_inter_state → cgst_amount == sgst_amount == 0;
               not is_inter_state → igst_amount == 0.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    subtotal: float
    cgst_amount: float
    sgst_amount: float
    igst_amount: float
    total: float
    is_inter_state: bool
    seller_state_code: Optional[str] = None
    buyer_state_code: Optional[str] = None
    amount_in_words: str


__all__ = [
    "InvoiceInput",
    "InvoiceTotals",
]
