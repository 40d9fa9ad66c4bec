"""Normalizer — raw source units and targets → canonical values."""

from workout_converter.normalizer.cadence import extract_cadence_target
from workout_converter.normalizer.durations import (
    get_repetition_count,
    map_length_to_duration,
)
from workout_converter.normalizer.step import (
    NormalizedStep,
    is_redundant_label,
    normalize_step,
)
from workout_converter.normalizer.targets import (
    build_primary_target,
    first_numeric_range,
)

__all__ = [
    "NormalizedStep",
    "build_primary_target",
    "extract_cadence_target",
    "first_numeric_range",
    "get_repetition_count",
    "is_redundant_label",
    "map_length_to_duration",
    "normalize_step",
]
