"""Whole-step normalization: one raw leaf step → canonical parts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

from workout_converter.models.canonical import (
    Duration,
    Target,
    normalize_intensity_class,
)
from workout_converter.models.enums import IntensityClass
from workout_converter.normalizer.cadence import extract_cadence_target
from workout_converter.normalizer.durations import map_length_to_duration
from workout_converter.normalizer.targets import build_primary_target

_NON_LETTERS = re.compile(r"[^a-z]")


@dataclass(frozen=True)
class NormalizedStep:
    duration: Duration
    intensity: IntensityClass | None
    label: str | None
    targets: tuple[Target, ...]


def _letters(value: str) -> str:
    return _NON_LETTERS.sub("", value.lower())


def is_redundant_label(name: str, intensity: IntensityClass | None) -> bool:
    """True when the step name only repeats its intensity ("Warm Up" / warmup)."""
    if intensity is None:
        return False
    return _letters(name) == _letters(intensity.value)


def step_label(name: Any, intensity: IntensityClass | None) -> str | None:
    """Trimmed step name, or None when blank or redundant with the intensity."""
    if not isinstance(name, str) or not name.strip():
        return None
    label = name.strip()
    return None if is_redundant_label(label, intensity) else label


def normalize_step(step: Mapping[str, Any], intensity_metric: str | None) -> NormalizedStep | None:
    """Normalize a raw leaf step; None when its duration is unusable."""
    duration = map_length_to_duration(step.get("length"))
    if duration is None:
        return None

    intensity = normalize_intensity_class(step.get("intensityClass"))
    targets: list[Target] = []
    primary = build_primary_target(step.get("targets"), intensity_metric)
    if primary is not None:
        targets.append(primary)
    cadence = extract_cadence_target(step)
    if cadence is not None:
        targets.append(cadence)

    return NormalizedStep(
        duration=duration,
        intensity=intensity,
        label=step_label(step.get("name"), intensity),
        targets=tuple(targets),
    )
