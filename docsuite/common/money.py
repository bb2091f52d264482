"""
money.py — rupee/paise arithmetic and Indian-locale formatting.

Currency values are plain floats (rupees) everywhere in the calculators.
Rounding goes through round_half_up — Python's round() is banker's rounding
(round(2.5) == 2), which disagrees with how rupee amounts are rounded on
invoices and challans.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

RUPEE_SYMBOL = "₹"


def round_half_up(value: float, places: int = 0) -> float:
    """Round to `places` decimals with 0.5 going away from zero."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite amount: {value!r}")
    exact = Decimal(str(value))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Enough digits for any finite float at the requested places
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def to_paise(amount: float) -> int:
    return int(round_half_up(amount * 100))


def from_paise(paise: int) -> float:
    return paise / 100


def group_indian_digits(digits: str) -> str:
    """
    '1234567' → '12,34,567'.
    Last three digits form one group, every group before that has two.
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(amount: float, decimals: int = 0, symbol: bool = True) -> str:
    """
    Indian-locale currency string: format_inr(1234567) → '₹12,34,567'.
    Presentation only — calculators return raw numbers.
    """
    if not math.isfinite(amount):
        raise ValueError(f"Cannot format non-finite amount: {amount!r}")
    rounded = round_half_up(abs(amount), decimals)
    text = f"{rounded:.{decimals}f}"
    whole, _, fraction = text.partition(".")
    out = group_indian_digits(whole)
    if fraction:
        out = f"{out}.{fraction}"
    if symbol:
        out = RUPEE_SYMBOL + out
    return f"-{out}" if amount < 0 and rounded != 0 else out


__all__ = [
    "RUPEE_SYMBOL",
    "round_half_up",
    "to_paise",
    "from_paise",
    "group_indian_digits",
    "format_inr",
]
