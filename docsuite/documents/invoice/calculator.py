"""
Invoice totals — subtotal, CGST/SGST vs IGST split, grand total.

All arithmetic is done in integer paise; rupee floats are produced only at the
very end. The split follows is_inter_state strictly: an inter-state invoice
never carries CGST/SGST and an intra-state one never carries IGST. When the
rate that applies is 0 while the other side's rates are not, the input is
rejected rather than producing an invoice with no tax at all.
"""
from __future__ import annotations

import math
from typing import Optional

from docsuite.common.errors import ViolationCollector
from docsuite.common.money import from_paise, round_half_up, to_paise
from docsuite.common.number_words import amount_to_words
from docsuite.documents.invoice.gstin import is_inter_state, state_code_from_gstin
from docsuite.documents.invoice.schemas import InvoiceInput, InvoiceTotals


def _tax_paise(subtotal_paise: int, rate_percent: float) -> int:
    return int(round_half_up(subtotal_paise * rate_percent / 100))


def calculate_invoice_totals(data: InvoiceInput) -> InvoiceTotals:
    """
    Raises:
        CalculationInputError: seller GSTIN (or a supplied buyer GSTIN / place
        of supply) does not start with a two-digit state code; the applicable
        GST rate is 0 while the other split is not; the line amount is too
        large to represent.
    """
    check = ViolationCollector("invoice")
    seller_state = state_code_from_gstin(data.seller_gstin)
    if seller_state is None:
        check.add("seller_gstin", "GSTIN must start with a two-digit state code")

    buyer_state: Optional[str] = None
    if data.buyer_gstin and data.buyer_gstin.strip():
        buyer_state = state_code_from_gstin(data.buyer_gstin)
        if buyer_state is None:
            check.add("buyer_gstin", "GSTIN must start with a two-digit state code")

    place_of_supply = (data.place_of_supply_state or "").strip() or None
    if place_of_supply is not None and not (len(place_of_supply) == 2 and place_of_supply.isdigit()):
        check.add("place_of_supply_state", "Place of supply must be a two-digit GST state code")

    max_rate = max(data.cgst_rate + data.sgst_rate, data.igst_rate)
    if not math.isfinite(data.quantity * data.rate * 100 * (1 + max_rate / 100)):
        check.add("rate", "Line amount is too large to compute")
    check.raise_if_any()

    inter_state = is_inter_state(seller_state, buyer_state, place_of_supply)
    intra_rate = data.cgst_rate + data.sgst_rate
    if inter_state and data.igst_rate == 0 and intra_rate > 0:
        check.add("igst_rate", "IGST rate is required for an inter-state supply")
    if not inter_state and intra_rate == 0 and data.igst_rate > 0:
        check.add("cgst_rate", "CGST and SGST rates are required for an intra-state supply")
    check.raise_if_any()

    subtotal_paise = to_paise(data.quantity * data.rate)
    cgst_paise = sgst_paise = igst_paise = 0
    if inter_state:
        igst_paise = _tax_paise(subtotal_paise, data.igst_rate)
    else:
        cgst_paise = _tax_paise(subtotal_paise, data.cgst_rate)
        sgst_paise = _tax_paise(subtotal_paise, data.sgst_rate)

    total_paise = subtotal_paise + cgst_paise + sgst_paise + igst_paise
    total = from_paise(total_paise)

    return InvoiceTotals(
        subtotal=from_paise(subtotal_paise),
        cgst_amount=from_paise(cgst_paise),
        sgst_amount=from_paise(sgst_paise),
        igst_amount=from_paise(igst_paise),
        total=total,
        is_inter_state=inter_state,
        seller_state_code=seller_state,
        buyer_state_code=buyer_state or place_of_supply,
        amount_in_words=amount_to_words(round_half_up(total)),
    )


__all__ = ["calculate_invoice_totals"]
