"""
Income tax HTTP routes — POST /api/income-tax/compare

Stateless: every request carries the full form, nothing is stored.
CalculationInputError raised by the engine propagates to the handler in main.py.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docsuite.documents.income_tax.schemas import IncomeTaxRequest
from docsuite.documents.income_tax.tax_engine import compare_regimes

router = APIRouter(prefix="/api", tags=["income_tax"])
logger = logging.getLogger(__name__)


@router.post("/income-tax/compare")
async def compare_income_tax(request_body: IncomeTaxRequest) -> JSONResponse:
    """Compare Old vs New regime for one salaried taxpayer (FY 2024-25)."""
    result = compare_regimes(
        request_body.gross_income,
        request_body.age_group,
        request_body.deductions,
    )

    logger.info(
        "Regime comparison age_group=%s recommended=%s suggestions=%d",
        request_body.age_group.value,
        result.recommendation,
        len(result.suggestions),
    )
    return JSONResponse(status_code=200, content=result.model_dump())
