"""
Age calculator — exact age, next birthday, eligibility and day-count milestones.
Pure calendar arithmetic on datetime.date; no time of day.

Age is counted in whole calendar months from the birth date (month ends clamp,
so a 29 February birthday falls on 28 February in other years), then split
into years and months, with the leftover as days.
"""
from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Optional

from docsuite.common.dates import add_months, days_between, full_months_between
from docsuite.common.errors import ViolationCollector
from docsuite.common.money import round_half_up
from docsuite.documents.age_calculator.schemas import (
    AgeInsights, Eligibility, Milestone, MilestoneStatus, NextBirthday,
)

logger = logging.getLogger(__name__)

VOTING_AGE            = 18
DRIVING_AGE           = 18
SENIOR_CITIZEN_AGE    = 60
RETIREMENT_AGE        = 60
LIFE_EXPECTANCY_YEARS = 80

AVG_DAYS_PER_MONTH = 30.44
SECONDS_PER_DAY    = 86_400

# (label, days after birth)
MILESTONES: tuple[tuple[str, int], ...] = (
    ("10,000 Days Old", 10_000),
    ("20,000 Days Old", 20_000),
    ("1 Billion Seconds", 1_000_000_000 // SECONDS_PER_DAY),    # day 11,574
)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def next_birthday(birth_date: date, on: date) -> NextBirthday:
    """First birthday on or after `on`. A birthday falling on `on` is 0 days away."""
    turning = on.year - birth_date.year
    anniversary = add_months(birth_date, turning * 12)
    if anniversary < on:
        turning += 1
        anniversary = add_months(birth_date, turning * 12)

    days_left = days_between(on, anniversary)
    return NextBirthday(
        on_date=anniversary,
        turning=turning,
        days_left=days_left,
        months_left=math.floor(days_left / AVG_DAYS_PER_MONTH),
        weekday=WEEKDAYS[anniversary.weekday()],
    )


def eligibility(years: int) -> Eligibility:
    return Eligibility(
        voting=years >= VOTING_AGE,
        driving=years >= DRIVING_AGE,
        senior_citizen=years >= SENIOR_CITIZEN_AGE,
        years_to_retirement=RETIREMENT_AGE - years if years < RETIREMENT_AGE else None,
    )


def life_progress(years: int) -> int:
    return min(int(round_half_up(years * 100 / LIFE_EXPECTANCY_YEARS)), 100)


def milestones(birth_date: date, on: date) -> list[Milestone]:
    result = []
    for label, days in MILESTONES:
        reached = birth_date + timedelta(days=days)
        status = MilestoneStatus.passed if reached <= on else MilestoneStatus.upcoming
        result.append(Milestone(label=label, on_date=reached, status=status))
    return result


def calculate_age(birth_date: date, target_date: Optional[date] = None) -> AgeInsights:
    """
    Raises:
        CalculationInputError: birth date after the target date.
    """
    on = target_date or date.today()

    check = ViolationCollector("age_calculator")
    if birth_date > on:
        check.add("birth_date", "Birth date cannot be after the target date")
    check.raise_if_any()

    total_months = full_months_between(birth_date, on)
    years, months = divmod(total_months, 12)
    days = days_between(add_months(birth_date, total_months), on)
    total_days = days_between(birth_date, on)

    insights = AgeInsights(
        birth_date=birth_date,
        target_date=on,
        years=years,
        months=months,
        days=days,
        total_months=total_months,
        total_weeks=total_days // 7,
        total_days=total_days,
        next_birthday=next_birthday(birth_date, on),
        eligibility=eligibility(years),
        life_progress=life_progress(years),
        milestones=milestones(birth_date, on),
    )
    logger.debug("Age calculated years=%d next_birthday_days=%d",
                 years, insights.next_birthday.days_left)
    return insights


__all__ = [
    "MILESTONES",
    "next_birthday",
    "eligibility",
    "life_progress",
    "milestones",
    "calculate_age",
]
