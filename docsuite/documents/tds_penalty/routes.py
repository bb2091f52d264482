"""
TDS penalty HTTP routes — POST /api/tds/calculate
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsuite.documents.tds_penalty.calculator import calculate_tds_penalty
from docsuite.documents.tds_penalty.schemas import TDSPenaltyInput

router = APIRouter(prefix="/api", tags=["tds_penalty"])
logger = logging.getLogger(__name__)


@router.post("/tds/calculate")
async def calculate_tds(request_body: TDSPenaltyInput) -> JSONResponse:
    """Section 234E late fee and Section 201(1A) interest for a TDS return."""
    result = calculate_tds_penalty(request_body)
    logger.info(
        "TDS penalty calculated section=%s late_days=%d risk=%s",
        result.section,
        result.late_days,
        result.risk_level.value,
    )
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))
