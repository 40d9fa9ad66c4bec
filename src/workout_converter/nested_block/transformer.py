"""Source workout → complete nested-block workout."""

from __future__ import annotations

import logging

from workout_converter.exceptions import UnsupportedWorkoutError
from workout_converter.models.enums import PRE_WORKOUT_COMMENTS_HEADING, SportType
from workout_converter.models.nested_block import NestedWorkout
from workout_converter.models.source import SourceWorkout
from workout_converter.nested_block.builder import build_structure
from workout_converter.nested_block.config import TransformConfig
from workout_converter.nested_block.metadata import infer_metadata, resolve_duration_minutes
from workout_converter.signature import compute_signature

logger = logging.getLogger(__name__)

# Scoped to the nested-block destination: strength and multisport types are
# not exported.
SOURCE_TYPE_TO_SPORT: dict[int, SportType] = {
    1: SportType.SWIMMING,
    2: SportType.CYCLING,
    3: SportType.RUNNING,
    8: SportType.CYCLING,  # Mountain bike
}

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    number = abs(number)
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return sign + "".join(reversed(digits))


def is_supported_workout_type(workout_type_id: int) -> bool:
    return workout_type_id in SOURCE_TYPE_TO_SPORT


def _clean(text: str | None) -> str | None:
    if text is None:
        return None
    return text.strip() or None


def build_detailed_description(workout: SourceWorkout) -> str | None:
    """Description and coach comments merged; either alone; or None."""
    description = _clean(workout.description)
    comments = _clean(workout.coach_comments)
    if description and comments:
        return f"{description}\n\n{PRE_WORKOUT_COMMENTS_HEADING}\n{comments}"
    return description or comments


def transform_workout(workout: SourceWorkout, config: TransformConfig | None = None) -> NestedWorkout:
    """Transform one source workout.

    Raises:
        UnsupportedWorkoutError: The sport has no nested-block counterpart,
            or the structure is missing, uses unsupported metrics, or
            leaves nothing once unusable steps are dropped.
    """
    config = config or TransformConfig()
    logger.debug("Transforming workout %r (id %s)", workout.name, workout.workout_id)

    sport_type = SOURCE_TYPE_TO_SPORT.get(workout.workout_type_id)
    if sport_type is None:
        raise UnsupportedWorkoutError(
            f"workout type {workout.workout_type_id} is not supported; "
            "only cycling, running and swimming workouts are exported",
            workout.workout_id,
        )

    structure = build_structure(workout.structure)
    if structure is None:
        raise UnsupportedWorkoutError(
            "missing structure or unsupported intensity/length metric",
            workout.workout_id,
        )

    duration_min = resolve_duration_minutes(workout)
    tss = workout.tss_planned or 0.0

    nested = NestedWorkout(
        id=to_base36(workout.workout_id),
        name=workout.name,
        detailed_description=build_detailed_description(workout),
        sport_type=sport_type,
        metadata=infer_metadata(workout.if_planned, config),
        structure=structure,
        base_duration_min=duration_min,
        base_tss=tss,
        source_file=f"workout_{workout.workout_id}.json",
        signature=compute_signature(structure, duration_min, tss),
    )
    logger.debug("Transformed workout %r (id %s)", nested.name, nested.id)
    return nested
