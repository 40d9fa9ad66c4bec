"""Primary target extraction from a raw step's ``targets`` array."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from workout_converter.models.canonical import (
    FreeTextTarget,
    NumericRange,
    NumericTarget,
    Target,
)
from workout_converter.models.enums import TargetKind
from workout_converter.normalizer.values import format_range_text, numeric

logger = logging.getLogger(__name__)

# Declared intensity metric → line-script target kind.
_METRIC_TARGET_KINDS: dict[str, TargetKind] = {
    "percentOfFtp": TargetKind.POWER_PERCENT_FTP,
    "percentOfThresholdPace": TargetKind.PACE_PERCENT_THRESHOLD,
    "percentOfThresholdHr": TargetKind.HR_PERCENT_LTHR,
    "percentOfThresholdHeartRate": TargetKind.HR_PERCENT_LTHR,
}


def first_numeric_range(targets: Any) -> tuple[float, float] | None:
    """Return the ordered (min, max) of the first object-shaped target.

    ``min = minValue ?? value`` and ``max = maxValue ?? min``; a one-sided
    bound mirrors the other. None when neither bound is numeric.
    """
    if not isinstance(targets, (list, tuple)):
        return None

    first = next((t for t in targets if isinstance(t, Mapping)), None)
    if first is None:
        return None

    low = numeric(first.get("minValue"))
    if low is None:
        low = numeric(first.get("value"))
    high = numeric(first.get("maxValue"))
    if high is None:
        high = low
    if low is None and high is None:
        return None
    if low is None:
        low = high
    return (min(low, high), max(low, high))


def build_primary_target(targets: Any, intensity_metric: str | None) -> Target | None:
    """Build the step's primary target, typed by the workout's intensity metric.

    Unknown ``percent*`` metrics fall back to ``%``-suffixed free text and
    any other metric to plain free text. A value that breaks the target
    invariants (e.g. zero or negative) suppresses the target.
    """
    bounds = first_numeric_range(targets)
    if bounds is None:
        return None
    low, high = bounds

    kind = _METRIC_TARGET_KINDS.get(intensity_metric or "")
    try:
        if kind is not None:
            value = low if low == high else NumericRange(low, high)
            return NumericTarget(kind, value)
        if intensity_metric and intensity_metric.startswith("percent"):
            return FreeTextTarget(format_range_text(low, high, "%"))
        return FreeTextTarget(format_range_text(low, high))
    except ValueError as exc:
        logger.debug("Dropping primary target %s-%s: %s", low, high, exc)
        return None
