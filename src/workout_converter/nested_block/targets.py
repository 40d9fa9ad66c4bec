"""Raw source target → explicitly typed nested-block target."""

from __future__ import annotations

from typing import Any, Mapping

from workout_converter.models.enums import NestedTargetType, NestedTargetUnit
from workout_converter.models.nested_block import NestedTarget
from workout_converter.normalizer.values import numeric

CADENCE_UNITS = {
    "rpm": NestedTargetUnit.RPM,
    "roundOrStridePerMinute": NestedTargetUnit.ROUND_OR_STRIDE_PER_MINUTE,
}
HEART_RATE_UNITS = ("bpm", "beatsPerMinute", "beatPerMinute")
PACE_UNITS = {
    "secondsPerKilometer": NestedTargetUnit.SECONDS_PER_KILOMETER,
    "secondsPerMile": NestedTargetUnit.SECONDS_PER_MILE,
    "secondsPer100Meters": NestedTargetUnit.SECONDS_PER_100_METERS,
    "secondsPer100Yards": NestedTargetUnit.SECONDS_PER_100_YARDS,
}
SPEED_UNITS = {
    "kilometersPerHour": NestedTargetUnit.KILOMETERS_PER_HOUR,
    "milesPerHour": NestedTargetUnit.MILES_PER_HOUR,
}
POWER_UNITS = {
    "percentOfFtp": NestedTargetUnit.PERCENT_OF_FTP,
    "watts": NestedTargetUnit.WATTS,
}

# Lower-cased intensity metric → (type, unit) for targets without a unit.
METRIC_TARGETS: dict[str, tuple[NestedTargetType, NestedTargetUnit | None]] = {
    "": (NestedTargetType.POWER, NestedTargetUnit.PERCENT_OF_FTP),
    "percentofftp": (NestedTargetType.POWER, NestedTargetUnit.PERCENT_OF_FTP),
    "watts": (NestedTargetType.POWER, NestedTargetUnit.WATTS),
    "percentofmaxhr": (NestedTargetType.HEART_RATE, NestedTargetUnit.PERCENT_OF_MAX_HR),
    "percentofthresholdhr": (NestedTargetType.HEART_RATE, NestedTargetUnit.PERCENT_OF_THRESHOLD_HR),
    "percentofthresholdpace": (NestedTargetType.PACE, None),
    "pace": (NestedTargetType.PACE, None),
}


def _bounds(target: Mapping[str, Any]) -> tuple[float, float] | None:
    low = numeric(target.get("minValue"))
    high = numeric(target.get("maxValue"))
    if low is None:
        low = numeric(target.get("value"))
    if low is None and high is None:
        return None
    if low is None:
        low = high
    if high is None:
        high = low
    return low, high


def _classify(unit: str | None, metric: str) -> tuple[NestedTargetType, NestedTargetUnit | None] | None:
    if unit:
        if unit in CADENCE_UNITS:
            return NestedTargetType.CADENCE, CADENCE_UNITS[unit]
        if unit in HEART_RATE_UNITS:
            return NestedTargetType.HEART_RATE, NestedTargetUnit.BPM
        if unit in PACE_UNITS:
            return NestedTargetType.PACE, PACE_UNITS[unit]
        if unit in SPEED_UNITS:
            return NestedTargetType.SPEED, SPEED_UNITS[unit]
        if unit in POWER_UNITS:
            return NestedTargetType.POWER, POWER_UNITS[unit]
        return None
    return METRIC_TARGETS.get(metric)


def map_target(target: Any, intensity_metric: str | None) -> NestedTarget | None:
    """Type one raw target; None when it cannot be typed or has no value.

    An explicit ``unit`` on the target decides first. Without one, the
    workout's primary intensity metric decides, and power as percent of FTP
    is assumed when no metric is declared either.
    """
    if not isinstance(target, Mapping):
        return None

    raw_unit = target.get("unit")
    unit = raw_unit.strip() if isinstance(raw_unit, str) else None
    metric = intensity_metric.strip().lower() if isinstance(intensity_metric, str) else ""

    classified = _classify(unit, metric)
    bounds = _bounds(target)
    if classified is None or bounds is None:
        return None

    target_type, target_unit = classified
    return NestedTarget(
        type=target_type,
        min_value=bounds[0],
        max_value=bounds[1],
        unit=target_unit,
    )
