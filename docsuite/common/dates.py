"""
dates.py — calendar-date arithmetic for due dates and agreement terms.

All inputs are datetime.date (no time of day, no timezone). Day counts are
plain calendar differences, so 2024-12-20 → 2025-01-15 is 26 days regardless
of DST or server timezone.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime


def days_between(start: date, end: date) -> int:
    """Signed number of calendar days from start to end."""
    return (end - start).days


def add_months(start: date, months: int) -> date:
    """
    Add calendar months. The day is clamped to the last day of the target
    month: 2024-01-31 + 1 month → 2024-02-29.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def full_months_between(start: date, end: date) -> int:
    """
    Whole calendar months from start to end, 0 when end is before start.
    Month ends clamp like add_months: 2024-01-31 → 2024-02-29 is one month.
    """
    months = (end.year - start.year) * 12 + end.month - start.month
    if months > 0 and add_months(start, months) > end:
        months -= 1
    return max(months, 0)


def parse_iso_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD string. Raises ValueError on anything else."""
    return datetime.strptime(value, "%Y-%m-%d").date()


__all__ = ["days_between", "add_months", "full_months_between", "parse_iso_date"]
