"""
schemas.py — shared Pydantic v2 contracts.

Defines:
  - ErrorDetail, ErrorBody, ErrorResponse  (cross-cutting error envelope)

Every HTTP error and every CalculationInputError serialises to the same shape:
    {"error": {"code": "...", "message": "...", "details": [{"field", "issue"}]}}
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """Single field-level validation or business-rule error."""
    model_config = ConfigDict(extra="forbid")

    field: Optional[str] = None   # Dot-notation field path, e.g. "filing_date"
    issue: str                     # Human-readable description of the problem


class ErrorBody(BaseModel):
    """Error envelope body."""
    model_config = ConfigDict(extra="forbid")

    code: str                                      # VALIDATION_ERROR, NOT_FOUND, etc.
    message: str                                   # High-level error description
    details: List[ErrorDetail] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """
    Standard error response format for all DocSuite endpoints.

    Structure: {"error": {"code": "...", "message": "...", "details": [...]}}
    """
    model_config = ConfigDict(extra="forbid")

    error: ErrorBody


__all__ = [
    "ErrorDetail",
    "ErrorBody",
    "ErrorResponse",
]
