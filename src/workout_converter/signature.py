"""Structural signatures for duplicate detection across a plan export.

Two workouts share a signature iff their nested structures (offsets already
stripped) and their duration and load scalars are equal. Names, ids and
calendar placement do not take part, so the same session placed on several
days of a plan hashes identically.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping

from workout_converter.models.nested_block import NestedStructure, NestedWorkout
from workout_converter.serialization.nested_block import structure_to_json

SIGNATURE_PREFIX = "TP:"


def normalize_for_hash(value: Any) -> Any:
    """Recursively rebuild mappings with sorted keys; lists keep their order."""
    if isinstance(value, Mapping):
        return {key: normalize_for_hash(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [normalize_for_hash(item) for item in value]
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def compute_signature(
    structure: NestedStructure | Mapping[str, Any],
    duration_min: float,
    tss: float,
) -> str:
    """Stable identity for a workout's structure plus its scalars."""
    if isinstance(structure, NestedStructure):
        structure = structure_to_json(structure)
    payload = normalize_for_hash({
        "structure": structure,
        "duration_min": duration_min,
        "tss": tss,
    })
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return SIGNATURE_PREFIX + hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def workout_signature(workout: NestedWorkout) -> str:
    return compute_signature(workout.structure, workout.base_duration_min, workout.base_tss)
