"""Canonical durations and targets shared by both destinations.

Durations and targets are closed tagged variants: each variant is its own
frozen dataclass and the ``Duration`` / ``Target`` aliases list every member.
Constructors enforce the numeric invariants and raise ``ValueError`` when
they do not hold; the builders catch that and drop the offending value.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Union

from workout_converter.models.enums import (
    DistanceUnit,
    IntensityClass,
    PaceDenominator,
    TargetKind,
    TimeUnit,
    ZoneMetric,
)


def _require_positive(value: float, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{what} must be finite and > 0, got {value!r}")


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeDuration:
    value: float
    unit: TimeUnit = TimeUnit.SECONDS

    def __post_init__(self) -> None:
        _require_positive(self.value, "time duration")


@dataclass(frozen=True)
class DistanceDuration:
    value: float
    unit: DistanceUnit = DistanceUnit.METERS

    def __post_init__(self) -> None:
        _require_positive(self.value, "distance duration")


@dataclass(frozen=True)
class PressLap:
    """Open-ended step that lasts until the athlete presses lap."""


Duration = Union[TimeDuration, DistanceDuration, PressLap]


# ---------------------------------------------------------------------------
# Targets
# ---------------------------------------------------------------------------

NUMERIC_TARGET_KINDS = frozenset({
    TargetKind.POWER_PERCENT_FTP,
    TargetKind.POWER_WATTS,
    TargetKind.HR_PERCENT_MAX,
    TargetKind.HR_PERCENT_LTHR,
    TargetKind.PACE_PERCENT_THRESHOLD,
})

_ZONE_PATTERN = re.compile(r"^Z\d+$", re.IGNORECASE)


@dataclass(frozen=True)
class NumericRange:
    """An inclusive ``min``-``max`` pair.

    Ordered by default. Absolute pace pairs are built with ``ordered=False``
    because a faster pace is the smaller number.
    """

    min: float
    max: float
    ordered: bool = field(default=True, compare=False, repr=False)

    def __post_init__(self) -> None:
        _require_positive(self.min, "range min")
        _require_positive(self.max, "range max")
        if self.ordered and self.max < self.min:
            raise ValueError(f"range max {self.max} is below min {self.min}")

    @property
    def is_point(self) -> bool:
        return self.min == self.max


TargetValue = Union[float, NumericRange]


def _check_value(value: TargetValue, what: str) -> None:
    if not isinstance(value, NumericRange):
        _require_positive(value, what)


@dataclass(frozen=True)
class NumericTarget:
    """Percent-of-threshold, watts and percent-HR targets."""

    kind: TargetKind
    value: TargetValue

    def __post_init__(self) -> None:
        if self.kind not in NUMERIC_TARGET_KINDS:
            raise ValueError(f"{self.kind} is not a numeric target kind")
        _check_value(self.value, self.kind.value)


@dataclass(frozen=True)
class AbsolutePaceTarget:
    value: TargetValue
    denominator_unit: PaceDenominator = PaceDenominator.KM
    kind: TargetKind = field(default=TargetKind.PACE_ABSOLUTE, init=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, NumericRange) and self.value.ordered:
            # Re-wrap so equality ignores magnitude order.
            object.__setattr__(
                self, "value", NumericRange(self.value.min, self.value.max, ordered=False),
            )
        _check_value(self.value, "absolute pace")


@dataclass(frozen=True)
class ZoneTarget:
    zone: str
    metric: ZoneMetric = ZoneMetric.POWER
    kind: TargetKind = field(default=TargetKind.ZONE, init=False)

    def __post_init__(self) -> None:
        if not _ZONE_PATTERN.match(self.zone):
            raise ValueError(f"zone must look like Z1, Z2, ... got {self.zone!r}")


@dataclass(frozen=True)
class CadenceTarget:
    value: int | NumericRange
    kind: TargetKind = field(default=TargetKind.CADENCE_RPM, init=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, NumericRange):
            bounds = (self.value.min, self.value.max)
        else:
            bounds = (self.value,)
        for bound in bounds:
            if isinstance(bound, bool) or not isinstance(bound, int) or bound <= 0:
                raise ValueError(f"cadence must be a positive integer, got {bound!r}")


@dataclass(frozen=True)
class FreeTextTarget:
    text: str
    kind: TargetKind = field(default=TargetKind.FREE_TEXT, init=False)

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("free-text target cannot be empty")


Target = Union[NumericTarget, AbsolutePaceTarget, ZoneTarget, CadenceTarget, FreeTextTarget]


# ---------------------------------------------------------------------------
# Intensity class
# ---------------------------------------------------------------------------

_INTENSITY_ALIASES: dict[str, IntensityClass] = {
    "warmup": IntensityClass.WARMUP,
    "cooldown": IntensityClass.COOLDOWN,
    "rest": IntensityClass.REST,
    "recovery": IntensityClass.REST,
    "active": IntensityClass.ACTIVE,
}


def normalize_intensity_class(raw: object) -> IntensityClass | None:
    """Reduce a source intensity class to the canonical four.

    ``warmUp`` → warmup, ``coolDown`` → cooldown, ``rest``/``recovery`` →
    rest, anything else non-blank → active. Blank or non-string → None.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None
    return _INTENSITY_ALIASES.get(raw.strip().lower(), IntensityClass.ACTIVE)
