"""Calendar helpers for laying plan workouts out into weeks and days."""

from __future__ import annotations

import re
from datetime import date, timedelta

from workout_converter.models.enums import TrainingPhase

DAY_KEYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_DATE_PREFIX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def parse_day(value: str | None) -> date | None:
    """Parse the date part of ``YYYY-MM-DD[THH:MM:SS]``; None when invalid."""
    if not isinstance(value, str):
        return None
    match = _DATE_PREFIX.match(value)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def day_of_week(day: date) -> int:
    """Monday = 0 … Sunday = 6."""
    return day.weekday()


def week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def week_number(day: date, plan_start: date) -> int:
    """1-indexed plan week of *day*, weeks running Monday to Sunday.

    Days before the plan's first week give 0.
    """
    weeks = (week_start(day) - week_start(plan_start)).days // 7
    return max(0, weeks + 1)


def infer_week_phase(week: int, total_weeks: int) -> TrainingPhase:
    """Base for the first half, Peak from 85 %, Recovery for the last week."""
    if total_weeks <= 1:
        return TrainingPhase.BASE
    if week == total_weeks:
        return TrainingPhase.RECOVERY

    progress = week / total_weeks
    if progress <= 0.5:
        return TrainingPhase.BASE
    if progress >= 0.85:
        return TrainingPhase.PEAK
    return TrainingPhase.BUILD
