"""Batch transform shared by the export flows."""

from __future__ import annotations

import logging
from typing import Iterable

from workout_converter.exceptions import UnsupportedWorkoutError
from workout_converter.models.nested_block import NestedWorkout
from workout_converter.models.source import SourceWorkout
from workout_converter.nested_block import TransformConfig, transform_workout
from workout_converter.nested_block.schema import ValidationMessage

logger = logging.getLogger(__name__)


def transform_batch(
    workouts: Iterable[SourceWorkout],
    config: TransformConfig,
) -> tuple[list[tuple[SourceWorkout, NestedWorkout]], list[ValidationMessage]]:
    """Transform each workout, turning unsupported ones into skip warnings.

    Returns the (source, transformed) pairs and the skip warnings.
    """
    transformed: list[tuple[SourceWorkout, NestedWorkout]] = []
    warnings: list[ValidationMessage] = []
    for workout in workouts:
        try:
            transformed.append((workout, transform_workout(workout, config)))
        except UnsupportedWorkoutError as exc:
            logger.warning("Skipping unsupported workout %r: %s", workout.name, exc)
            warnings.append(ValidationMessage(
                f"workouts[{workout.workout_id}]",
                f'Skipped "{workout.name}" - {exc}',
                "warning",
            ))
    logger.info("Transformed %d of %d workouts", len(transformed), len(warnings) + len(transformed))
    return transformed, warnings
