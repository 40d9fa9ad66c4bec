"""Structured workout converter.

Pure transformation engine: source workout records in, line-script text or
nested-block workouts out, plus structural signatures for deduplication.
"""

from workout_converter.exceptions import UnsupportedWorkoutError
from workout_converter.line_script import build_description, build_document, render_document
from workout_converter.models import SourceWorkout
from workout_converter.nested_block import TransformConfig, transform_workout
from workout_converter.signature import compute_signature

__all__ = [
    "SourceWorkout",
    "TransformConfig",
    "UnsupportedWorkoutError",
    "build_description",
    "build_document",
    "compute_signature",
    "render_document",
    "transform_workout",
]
