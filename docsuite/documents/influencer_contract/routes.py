"""
Influencer contract HTTP routes — POST /api/influencer-contract/payment-breakdown
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsuite.documents.influencer_contract.calculator import calculate_payment_breakdown
from docsuite.documents.influencer_contract.schemas import PaymentBreakdownRequest

router = APIRouter(prefix="/api", tags=["influencer_contract"])
logger = logging.getLogger(__name__)


@router.post("/influencer-contract/payment-breakdown")
async def payment_breakdown(request_body: PaymentBreakdownRequest) -> JSONResponse:
    result = calculate_payment_breakdown(request_body.total_amount, request_body.structure)
    logger.info("Payment breakdown calculated structure=%s", result.structure.value)
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))
