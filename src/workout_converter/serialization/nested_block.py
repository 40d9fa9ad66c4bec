"""Nested-block JSON serialization for NestedWorkout objects.

Produces the destination wire form: camelCase inside the structure tree,
snake_case at workout level, ``null`` where the destination expects an
explicit empty value.

All functions are pure (no I/O, no network calls).
"""

from __future__ import annotations

import json

from workout_converter.models.nested_block import (
    NestedBlock,
    NestedLength,
    NestedNode,
    NestedStep,
    NestedStructure,
    NestedTarget,
    NestedWorkout,
)


def to_nested_block_json(workout: NestedWorkout) -> dict:
    """Convert a NestedWorkout to a destination-compatible dict."""
    return {
        "id": workout.id,
        "name": workout.name,
        "detailed_description": workout.detailed_description,
        "sport_type": workout.sport_type.value,
        "type": workout.type.value,
        "intensity": workout.intensity.value,
        "suitable_phases": [phase.value for phase in workout.suitable_phases],
        "suitable_weekdays": (
            list(workout.suitable_weekdays) if workout.suitable_weekdays is not None else None
        ),
        "structure": structure_to_json(workout.structure),
        "base_duration_min": workout.base_duration_min,
        "base_tss": workout.base_tss,
        "variable_components": None,
        "source_file": workout.source_file,
        "source_format": workout.source_format,
        "signature": workout.signature,
    }


def to_nested_block_json_string(workout: NestedWorkout, indent: int = 2) -> str:
    """Convert a NestedWorkout to a destination-compatible JSON string."""
    return json.dumps(to_nested_block_json(workout), indent=indent)


def structure_to_json(structure: NestedStructure) -> dict:
    return {
        "primaryIntensityMetric": structure.primary_intensity_metric.value,
        "primaryLengthMetric": structure.primary_length_metric.value,
        "structure": [_convert_node(block) for block in structure.structure],
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_node(node: NestedNode) -> dict:
    if isinstance(node, NestedBlock):
        return {
            "type": node.type.value,
            "length": _convert_length(node.length),
            "steps": [_convert_node(child) for child in node.steps],
        }
    return _convert_step(node)


def _convert_step(step: NestedStep) -> dict:
    return {
        "name": step.name,
        "intensityClass": step.intensity_class.value,
        "length": _convert_length(step.length),
        "openDuration": step.open_duration,
        "targets": [_convert_target(target) for target in step.targets],
    }


def _convert_length(length: NestedLength) -> dict:
    return {"unit": length.unit.value, "value": length.value}


def _convert_target(target: NestedTarget) -> dict:
    result = {
        "type": target.type.value,
        "minValue": target.min_value,
        "maxValue": target.max_value,
    }
    if target.unit is not None:
        result["unit"] = target.unit.value
    return result
