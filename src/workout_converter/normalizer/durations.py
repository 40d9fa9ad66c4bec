"""Source length → canonical duration mapping."""

from __future__ import annotations

from typing import Any, Mapping

from workout_converter.models.canonical import (
    DistanceDuration,
    Duration,
    PressLap,
    TimeDuration,
)
from workout_converter.models.enums import DistanceUnit, TimeUnit
from workout_converter.normalizer.values import numeric, round_half_up

LAP_BUTTON_UNIT = "lapButton"
REPETITION_UNIT = "repetition"

# Source unit alias → (variant, canonical unit).
_UNIT_ALIASES: dict[str, tuple[type, TimeUnit | DistanceUnit]] = {
    "second": (TimeDuration, TimeUnit.SECONDS),
    "seconds": (TimeDuration, TimeUnit.SECONDS),
    "minute": (TimeDuration, TimeUnit.MINUTES),
    "minutes": (TimeDuration, TimeUnit.MINUTES),
    "hour": (TimeDuration, TimeUnit.HOURS),
    "hours": (TimeDuration, TimeUnit.HOURS),
    "meter": (DistanceDuration, DistanceUnit.METERS),
    "meters": (DistanceDuration, DistanceUnit.METERS),
    "kilometer": (DistanceDuration, DistanceUnit.KILOMETERS),
    "kilometers": (DistanceDuration, DistanceUnit.KILOMETERS),
    "yard": (DistanceDuration, DistanceUnit.YARDS),
    "yards": (DistanceDuration, DistanceUnit.YARDS),
    "mile": (DistanceDuration, DistanceUnit.MILES),
    "miles": (DistanceDuration, DistanceUnit.MILES),
}

_SECONDS_PER_UNIT = {
    TimeUnit.SECONDS: 1,
    TimeUnit.MINUTES: 60,
    TimeUnit.HOURS: 3600,
}


def map_length_to_duration(length: Any) -> Duration | None:
    """Convert a source ``{unit, value}`` length to a canonical duration.

    Returns None for an unknown unit, a missing, non-finite or
    non-positive value, or a seconds value that rounds to zero; the caller
    drops the step. ``lapButton`` needs no
    value.
    """
    if not isinstance(length, Mapping):
        return None

    unit = length.get("unit")
    if not isinstance(unit, str) or not unit:
        return None
    if unit == LAP_BUTTON_UNIT:
        return PressLap()

    value = numeric(length.get("value"))
    if value is None or value <= 0:
        return None

    mapped = _UNIT_ALIASES.get(unit)
    if mapped is None:
        return None
    variant, canonical_unit = mapped
    if canonical_unit is TimeUnit.SECONDS and round_half_up(value) < 1:
        return None
    return variant(value, canonical_unit)


def get_repetition_count(length: Any) -> int | None:
    """Repeat count of a ``repetition`` container, clamped to at least 1."""
    if not isinstance(length, Mapping) or length.get("unit") != REPETITION_UNIT:
        return None
    value = numeric(length.get("value"))
    if value is None:
        return None
    return max(1, round_half_up(value))


def duration_seconds(duration: Duration) -> float | None:
    """Seconds covered by a time duration; None for distance or lap steps."""
    if isinstance(duration, TimeDuration):
        return duration.value * _SECONDS_PER_UNIT[duration.unit]
    return None
