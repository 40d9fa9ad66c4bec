"""Nested-block destination: typed structure copy, metadata, validation."""

from workout_converter.nested_block.builder import build_structure
from workout_converter.nested_block.config import TransformConfig
from workout_converter.nested_block.metadata import (
    infer_metadata,
    resolve_duration_minutes,
    structure_duration_minutes,
)
from workout_converter.nested_block.schema import (
    ValidationMessage,
    ValidationResult,
    validate_workouts,
)
from workout_converter.nested_block.targets import map_target
from workout_converter.nested_block.transformer import (
    is_supported_workout_type,
    transform_workout,
)

__all__ = [
    "TransformConfig",
    "ValidationMessage",
    "ValidationResult",
    "build_structure",
    "infer_metadata",
    "is_supported_workout_type",
    "map_target",
    "resolve_duration_minutes",
    "structure_duration_minutes",
    "transform_workout",
    "validate_workouts",
]
