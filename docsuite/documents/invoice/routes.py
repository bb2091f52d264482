"""
Invoice HTTP routes — POST /api/invoice/totals,
                      GET  /api/invoice/gstin/{gstin}
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsuite.documents.invoice.calculator import calculate_invoice_totals
from docsuite.documents.invoice.gstin import analyze_gstin
from docsuite.documents.invoice.schemas import InvoiceInput

router = APIRouter(prefix="/api", tags=["invoice"])
logger = logging.getLogger(__name__)


@router.post("/invoice/totals")
async def invoice_totals(request_body: InvoiceInput) -> JSONResponse:
    """Subtotal, GST split and total for a single-line invoice."""
    result = calculate_invoice_totals(request_body)
    logger.info("Invoice totals calculated inter_state=%s", result.is_inter_state)
    return JSONResponse(status_code=200, content=result.model_dump())


@router.get("/invoice/gstin/{gstin}")
async def gstin_details(gstin: str) -> JSONResponse:
    """
    Format check and state lookup for a GSTIN. An invalid GSTIN is a normal
    200 response with is_valid=false — the form shows it inline.
    """
    info = analyze_gstin(gstin)
    return JSONResponse(status_code=200, content=info.model_dump())
