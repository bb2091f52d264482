"""
Salary slip HTTP routes — POST /api/salary-slip/calculate
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsuite.documents.salary_slip.calculator import calculate_salary_slip
from docsuite.documents.salary_slip.schemas import SalarySlipInput

router = APIRouter(prefix="/api", tags=["salary_slip"])
logger = logging.getLogger(__name__)


@router.post("/salary-slip/calculate")
async def calculate_slip(request_body: SalarySlipInput) -> JSONResponse:
    result = calculate_salary_slip(request_body)
    logger.info(
        "Salary slip calculated pf_auto=%s esi_auto=%s",
        request_body.deductions.provident_fund is None,
        request_body.deductions.esi is None,
    )
    return JSONResponse(status_code=200, content=result.model_dump())
