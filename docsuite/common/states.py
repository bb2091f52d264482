"""
states.py — static reference data for Indian states and union territories.

Two independent code systems live here:
  - INDIAN_STATES: two-letter codes with the stamp-duty percentage applied to
    lease value (rent agreements). Reproduced verbatim — stamp-duty output
    depends on these numbers bit-for-bit.
  - GST_STATE_CODES: two-digit GST state codes, the first two characters of
    every GSTIN (invoices).

Both tables are validated once at import; lookups never mutate them.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from docsuite.common.errors import ReferenceTableError

DEFAULT_STAMP_DUTY_PERCENT = 2.0   # Applied when the state code is unknown


class StateRecord(BaseModel):
    """One state / UT row of the stamp-duty table."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(..., min_length=2, max_length=2)
    name: str
    stamp_duty_percent: Optional[float] = Field(default=None, ge=0)


# ===========================================================================
# STAMP-DUTY TABLE — 36 states / UTs (approximate residential lease rates)
# ===========================================================================

INDIAN_STATES: tuple[StateRecord, ...] = tuple(
    StateRecord(code=code, name=name, stamp_duty_percent=pct)
    for code, name, pct in (
        ("AN", "Andaman and Nicobar Islands", 3),
        ("AP", "Andhra Pradesh", 5),
        ("AR", "Arunachal Pradesh", 6),
        ("AS", "Assam", 8.25),
        ("BR", "Bihar", 6),
        ("CG", "Chhattisgarh", 5),
        ("CH", "Chandigarh", 3),
        ("DD", "Dadra and Nagar Haveli and Daman and Diu", 3),
        ("DL", "Delhi", 2),
        ("GA", "Goa", 3.5),
        ("GJ", "Gujarat", 4.9),
        ("HP", "Himachal Pradesh", 5),
        ("HR", "Haryana", 2),
        ("JH", "Jharkhand", 4),
        ("JK", "Jammu and Kashmir", 5),
        ("KA", "Karnataka", 1),
        ("KL", "Kerala", 8),
        ("LA", "Ladakh", 5),
        ("LD", "Lakshadweep", 3),
        ("MH", "Maharashtra", 0.25),
        ("ML", "Meghalaya", 5),
        ("MN", "Manipur", 7),
        ("MP", "Madhya Pradesh", 2),
        ("MZ", "Mizoram", 5),
        ("NL", "Nagaland", 8.25),
        ("OD", "Odisha", 5),
        ("PB", "Punjab", 3),
        ("PY", "Puducherry", 6),
        ("RJ", "Rajasthan", 1),
        ("SK", "Sikkim", 5),
        ("TN", "Tamil Nadu", 1),
        ("TS", "Telangana", 0.4),
        ("TR", "Tripura", 5),
        ("UK", "Uttarakhand", 5),
        ("UP", "Uttar Pradesh", 2),
        ("WB", "West Bengal", 0.25),
    )
)

_STATES_BY_CODE: Mapping[str, StateRecord] = MappingProxyType(
    {state.code: state for state in INDIAN_STATES}
)


# ===========================================================================
# GST STATE CODES — first two digits of a GSTIN
# ===========================================================================

GST_STATE_CODES: Mapping[str, str] = MappingProxyType({
    "01": "Jammu and Kashmir",
    "02": "Himachal Pradesh",
    "03": "Punjab",
    "04": "Chandigarh",
    "05": "Uttarakhand",
    "06": "Haryana",
    "07": "Delhi",
    "08": "Rajasthan",
    "09": "Uttar Pradesh",
    "10": "Bihar",
    "11": "Sikkim",
    "12": "Arunachal Pradesh",
    "13": "Nagaland",
    "14": "Manipur",
    "15": "Mizoram",
    "16": "Tripura",
    "17": "Meghalaya",
    "18": "Assam",
    "19": "West Bengal",
    "20": "Jharkhand",
    "21": "Odisha",
    "22": "Chhattisgarh",
    "23": "Madhya Pradesh",
    "24": "Gujarat",
    "26": "Dadra and Nagar Haveli and Daman and Diu",
    "27": "Maharashtra",
    "29": "Karnataka",
    "30": "Goa",
    "31": "Lakshadweep",
    "32": "Kerala",
    "33": "Tamil Nadu",
    "34": "Puducherry",
    "35": "Andaman and Nicobar Islands",
    "36": "Telangana",
    "37": "Andhra Pradesh",
    "38": "Ladakh",
    "97": "Other Territory",
})


def _validate_tables() -> None:
    if len(INDIAN_STATES) != 36:
        raise ReferenceTableError(f"Expected 36 state records, found {len(INDIAN_STATES)}")
    if len(_STATES_BY_CODE) != len(INDIAN_STATES):
        raise ReferenceTableError("Duplicate state code in INDIAN_STATES")
    for code in GST_STATE_CODES:
        if len(code) != 2 or not code.isdigit():
            raise ReferenceTableError(f"Malformed GST state code: {code!r}")


_validate_tables()


# ===========================================================================
# LOOKUPS
# ===========================================================================

def get_state(code: str) -> Optional[StateRecord]:
    return _STATES_BY_CODE.get(code.upper()) if code else None


def get_state_name(code: str) -> str:
    """State name for a two-letter code; unknown codes are echoed back."""
    state = get_state(code)
    return state.name if state else code


def stamp_duty_percent(code: str) -> float:
    """Stamp-duty percentage for the state, DEFAULT_STAMP_DUTY_PERCENT if unknown."""
    state = get_state(code)
    if state is None or state.stamp_duty_percent is None:
        return DEFAULT_STAMP_DUTY_PERCENT
    return state.stamp_duty_percent


def gst_state_name(state_code: str) -> Optional[str]:
    return GST_STATE_CODES.get(state_code)


__all__ = [
    "DEFAULT_STAMP_DUTY_PERCENT",
    "StateRecord",
    "INDIAN_STATES",
    "GST_STATE_CODES",
    "get_state",
    "get_state_name",
    "stamp_duty_percent",
    "gst_state_name",
]
