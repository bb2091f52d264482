"""
main.py — DocSuite FastAPI application entry point.

Start with: uvicorn docsuite.main:app --reload --port 8000
(run from the repository root)
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docsuite.common.errors import CalculationInputError
from docsuite.common.number_words import amount_to_words
from docsuite.config import settings

# ---------------------------------------------------------------------------
# Logging — configured before anything else
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.effective_log_level,
    format="%(asctime)s %(levelname)s %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan — startup & shutdown hooks
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Nothing to open or close: reference tables are validated at import and
    every calculator is a pure function. Only logs the lifecycle.
    """
    logger.info("DocSuite v%s starting up", settings.app_version)
    yield
    logger.info("DocSuite shutting down")


# ---------------------------------------------------------------------------
# FastAPI application instance
# ---------------------------------------------------------------------------
app = FastAPI(
    title="DocSuite API",
    version=settings.app_version,
    description=(
        "Calculation core for Indian business documents: income-tax regime "
        "comparison, GST / TDS late-filing penalties, rent-agreement stamp duty, "
        "GST invoice totals, salary slips, influencer contract payments and age calculation."
    ),
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# ---------------------------------------------------------------------------
# CORS middleware — restricted to frontend origins from settings
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Error response helper
# ---------------------------------------------------------------------------
def _make_error_response(
    code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
    status_code: int = 500,
) -> JSONResponse:
    """Build a standard {error: {code, message, details}} response."""
    body = {
        "error": {
            "code": code,
            "message": message,
            "details": details or [],
        }
    }
    return JSONResponse(status_code=status_code, content=body)


# ---------------------------------------------------------------------------
# Global exception handlers — registered BEFORE routers
# ---------------------------------------------------------------------------
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Converts Pydantic / FastAPI 422 validation errors to standard format.
    Returns ALL field violations in one response.
    """
    details = []
    for error in exc.errors():
        # Build dot-notation field path, excluding the top-level 'body' / 'query' loc
        field = ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query"))
        details.append({"field": field or None, "issue": error["msg"]})
    return _make_error_response(
        code="VALIDATION_ERROR",
        message="Request validation failed",
        details=details,
        status_code=422,
    )


@app.exception_handler(CalculationInputError)
async def calculation_input_error_handler(
    request: Request, exc: CalculationInputError
) -> JSONResponse:
    """
    Business-rule violations raised by a calculator (filing before due date,
    missing deposit date, deductions above earnings...). Same envelope as
    request validation so the form can flag fields uniformly.
    """
    return _make_error_response(
        code="VALIDATION_ERROR",
        message="Calculation input is invalid",
        details=[v.model_dump() for v in exc.violations],
        status_code=422,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Converts FastAPI HTTPException to standard error format with semantic code.
    """
    code_map = {
        400: "BAD_REQUEST",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        422: "VALIDATION_ERROR",
    }
    code = code_map.get(exc.status_code, f"HTTP_{exc.status_code}")
    return _make_error_response(
        code=code,
        message=str(exc.detail),
        status_code=exc.status_code,
    )


@app.exception_handler(ValueError)
async def value_error_handler(
    request: Request, exc: ValueError
) -> JSONResponse:
    """
    Catches any other explicit ValueError from business logic.
    Surfaces as 422 VALIDATION_ERROR so the caller understands it's a data issue.
    """
    return _make_error_response(
        code="VALIDATION_ERROR",
        message=str(exc),
        status_code=422,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """
    Catch-all for unexpected errors.
    DEBUG=true  → includes exception type & message in details (dev only).
    DEBUG=false → generic message; full traceback logged server-side only.
    """
    logger.error(
        "Unhandled exception on %s %s",
        request.method,
        request.url.path,
        exc_info=True,
    )
    if settings.debug:
        details = [{"issue": f"{type(exc).__name__}: {exc}"}]
        message = "An unexpected error occurred (debug details included)"
    else:
        details = []
        message = "An unexpected error occurred"
    return _make_error_response(
        code="INTERNAL_ERROR",
        message=message,
        details=details,
        status_code=500,
    )


# ---------------------------------------------------------------------------
# Health endpoint (no auth required)
# ---------------------------------------------------------------------------
@app.get("/api/health", tags=["System"])
async def health_check() -> dict:
    """Returns service health status."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ---------------------------------------------------------------------------
# Shared utility endpoint
# ---------------------------------------------------------------------------
@app.get("/api/amount-in-words", tags=["utilities"])
async def amount_in_words(amount: float = Query(..., description="Amount in INR")) -> dict:
    """Indian-scale amount in words, e.g. 150000 → 'One Lakh Fifty Thousand Rupees Only'."""
    return {"amount": amount, "words": amount_to_words(amount)}


# ---------------------------------------------------------------------------
# Document routers
# ---------------------------------------------------------------------------
from docsuite.documents.age_calculator.routes import router as age_calculator_router
from docsuite.documents.gst_penalty.routes import router as gst_penalty_router
from docsuite.documents.income_tax.routes import router as income_tax_router
from docsuite.documents.influencer_contract.routes import router as influencer_contract_router
from docsuite.documents.invoice.routes import router as invoice_router
from docsuite.documents.rent_agreement.routes import router as rent_agreement_router
from docsuite.documents.salary_slip.routes import router as salary_slip_router
from docsuite.documents.tds_penalty.routes import router as tds_penalty_router

app.include_router(income_tax_router)
app.include_router(gst_penalty_router)
app.include_router(tds_penalty_router)
app.include_router(rent_agreement_router)
app.include_router(invoice_router)
app.include_router(salary_slip_router)
app.include_router(influencer_contract_router)
app.include_router(age_calculator_router)
