"""
Rent agreement HTTP routes — POST /api/rent-agreement/calculate,
                             GET  /api/rent-agreement/states
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsuite.documents.rent_agreement.calculator import (
    calculate_rent_agreement, list_state_options,
)
from docsuite.documents.rent_agreement.schemas import RentAgreementInput

router = APIRouter(prefix="/api", tags=["rent_agreement"])
logger = logging.getLogger(__name__)


@router.post("/rent-agreement/calculate")
async def calculate_rent(request_body: RentAgreementInput) -> JSONResponse:
    """Stamp duty, end date and first-month outlay for a rent agreement."""
    result = calculate_rent_agreement(request_body)
    logger.info(
        "Rent agreement calculated state=%s duration_months=%d",
        request_body.state_code.upper(),
        request_body.agreement_duration,
    )
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))


@router.get("/rent-agreement/states")
async def get_states() -> JSONResponse:
    """The 36 states / UTs with their stamp-duty percentage."""
    states = list_state_options()
    return JSONResponse(status_code=200, content=[s.model_dump() for s in states])
