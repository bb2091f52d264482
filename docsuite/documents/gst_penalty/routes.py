"""
GST penalty HTTP routes — POST /api/gst/calculate
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsuite.documents.gst_penalty.calculator import calculate_gst_penalty
from docsuite.documents.gst_penalty.schemas import GSTPenaltyInput

router = APIRouter(prefix="/api", tags=["gst_penalty"])
logger = logging.getLogger(__name__)


@router.post("/gst/calculate")
async def calculate_gst(request_body: GSTPenaltyInput) -> JSONResponse:
    """Late fee and interest for a late GSTR-1 / GSTR-3B / GSTR-9 filing."""
    result = calculate_gst_penalty(request_body)
    logger.info(
        "GST penalty calculated return_type=%s late_days=%d risk=%s",
        result.return_type.value,
        result.late_days,
        result.risk_level.value,
    )
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))
