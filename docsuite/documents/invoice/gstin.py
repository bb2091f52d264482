"""
gstin.py — GSTIN parsing and inter-state detection.

A GSTIN is 15 characters:
  [0:2]   state code (01–38, 97)
  [2:12]  PAN of the registered person
  [12]    entity number for the same PAN (1–9, A–Z)
  [13]    always 'Z'
  [14]    checksum character
"""
from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

from docsuite.common.states import gst_state_name

GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$")
GSTIN_LENGTH = 15


class GSTINInfo(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    gstin: str
    is_valid: bool
    state_code: Optional[str] = None
    state_name: Optional[str] = None
    pan: Optional[str] = None


def normalize_gstin(gstin: Optional[str]) -> str:
    return (gstin or "").strip().upper()


def state_code_from_gstin(gstin: Optional[str]) -> Optional[str]:
    """First two characters when they are digits, else None."""
    value = normalize_gstin(gstin)
    if len(value) < 2 or not value[:2].isdigit():
        return None
    return value[:2]


def analyze_gstin(gstin: str) -> GSTINInfo:
    value = normalize_gstin(gstin)
    if not GSTIN_PATTERN.match(value):
        return GSTINInfo(gstin=value, is_valid=False, state_code=state_code_from_gstin(value))
    state_code = value[:2]
    return GSTINInfo(
        gstin=value,
        # Pattern accepts any two digits; only assigned codes are real registrations
        is_valid=gst_state_name(state_code) is not None,
        state_code=state_code,
        state_name=gst_state_name(state_code),
        pan=value[2:12],
    )


def is_inter_state(
    seller_state: Optional[str],
    buyer_state: Optional[str],
    place_of_supply_state: Optional[str] = None,
) -> bool:
    """
    Buyer's GSTIN state wins; otherwise the explicit place of supply; with
    neither, the supply is treated as intra-state.
    """
    if buyer_state:
        return seller_state != buyer_state
    if place_of_supply_state:
        return seller_state != place_of_supply_state
    return False


__all__ = [
    "GSTIN_PATTERN",
    "GSTINInfo",
    "normalize_gstin",
    "state_code_from_gstin",
    "analyze_gstin",
    "is_inter_state",
]
