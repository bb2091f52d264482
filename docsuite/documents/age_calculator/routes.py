"""
Age calculator HTTP routes — POST /api/age-calculator/calculate
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsuite.documents.age_calculator.calculator import calculate_age
from docsuite.documents.age_calculator.schemas import AgeCalculatorInput

router = APIRouter(prefix="/api", tags=["age_calculator"])
logger = logging.getLogger(__name__)


@router.post("/age-calculator/calculate")
async def calculate(request_body: AgeCalculatorInput) -> JSONResponse:
    """Exact age on the target date (today by default) plus birthday and milestones."""
    result = calculate_age(request_body.birth_date, request_body.target_date)
    logger.info("Age calculated target_defaulted=%s", request_body.target_date is None)
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))
