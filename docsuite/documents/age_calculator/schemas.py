"""
schemas.py — age calculator Pydantic v2 data contracts.

Defines:
  - AgeCalculatorInput  (POST /api/age-calculator/calculate body)
  - NextBirthday, Eligibility, Milestone
  - AgeInsights         (full result)
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AgeCalculatorInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    birth_date: date
    target_date: Optional[date] = Field(
        default=None, description="Date the age is measured on. Today when omitted."
    )


class NextBirthday(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    on_date: date
    turning: int
    days_left: int = Field(..., ge=0)
    months_left: int = Field(..., ge=0)
    weekday: str


class Eligibility(BaseModel):
    """India thresholds: voting and driving at 18, senior citizen and retirement at 60."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    voting: bool
    driving: bool
    senior_citizen: bool
    years_to_retirement: Optional[int] = None    # None once retirement age is reached


class MilestoneStatus(str, Enum):
    passed = "passed"
    upcoming = "upcoming"


class Milestone(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    on_date: date
    status: MilestoneStatus


class AgeInsights(BaseModel):
    """
    Invariant: add_months(birth_date, years * 12 + months) + days == target_date
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    birth_date: date
    target_date: date
    years: int
    months: int
    days: int
    total_months: int
    total_weeks: int
    total_days: int
    next_birthday: NextBirthday
    eligibility: Eligibility
    life_progress: int = Field(..., ge=0, le=100)   # percent of an 80-year life
    milestones: List[Milestone] = Field(default_factory=list)


__all__ = [
    "AgeCalculatorInput",
    "NextBirthday",
    "Eligibility",
    "MilestoneStatus",
    "Milestone",
    "AgeInsights",
]
