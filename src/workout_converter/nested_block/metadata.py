"""Workout metadata and duration for the nested-block destination.

Type, intensity and suitable phases come from one scalar, the planned
intensity factor (IF), read against fixed breakpoints highest first:

    IF >= 1.05  vo2max     very_hard  Build, Peak
    IF >= 0.95  threshold  hard       Build, Peak
    IF >= 0.85  tempo      moderate   Base, Build
    IF >= 0.70  endurance  easy       (none)
    otherwise   recovery   very_easy  Recovery
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from workout_converter.models.enums import (
    IF_EASY,
    IF_HARD,
    IF_MODERATE,
    IF_VERY_HARD,
    TrainingPhase,
    WorkoutIntensity,
    WorkoutType,
)
from workout_converter.models.nested_block import WorkoutMetadata
from workout_converter.models.source import SourceWorkout
from workout_converter.nested_block.config import TransformConfig
from workout_converter.normalizer.durations import (
    duration_seconds,
    get_repetition_count,
    map_length_to_duration,
)

logger = logging.getLogger(__name__)

FALLBACK_DURATION_MIN = 1.0

IF_BREAKPOINTS: tuple[tuple[float, WorkoutMetadata], ...] = (
    (IF_VERY_HARD, WorkoutMetadata(
        WorkoutType.VO2MAX, WorkoutIntensity.VERY_HARD,
        (TrainingPhase.BUILD, TrainingPhase.PEAK),
    )),
    (IF_HARD, WorkoutMetadata(
        WorkoutType.THRESHOLD, WorkoutIntensity.HARD,
        (TrainingPhase.BUILD, TrainingPhase.PEAK),
    )),
    (IF_MODERATE, WorkoutMetadata(
        WorkoutType.TEMPO, WorkoutIntensity.MODERATE,
        (TrainingPhase.BASE, TrainingPhase.BUILD),
    )),
    (IF_EASY, WorkoutMetadata(WorkoutType.ENDURANCE, WorkoutIntensity.EASY, ())),
)

RECOVERY_METADATA = WorkoutMetadata(
    WorkoutType.RECOVERY, WorkoutIntensity.VERY_EASY, (TrainingPhase.RECOVERY,),
)


def infer_metadata(
    intensity_factor: float | None,
    config: TransformConfig | None = None,
) -> WorkoutMetadata:
    """Metadata from IF, with each configured override applied on top."""
    value = intensity_factor or 0.0
    inferred = next(
        (metadata for breakpoint, metadata in IF_BREAKPOINTS if value >= breakpoint),
        RECOVERY_METADATA,
    )
    if config is None:
        return inferred

    return WorkoutMetadata(
        type=config.default_workout_type or inferred.type,
        intensity=config.default_intensity or inferred.intensity,
        suitable_phases=(
            tuple(config.default_suitable_phases)
            if config.default_suitable_phases is not None
            else inferred.suitable_phases
        ),
    )


def _node_seconds(node: Any) -> float:
    if not isinstance(node, Mapping):
        return 0.0
    children = node.get("steps")
    if isinstance(children, list):
        repeats = get_repetition_count(node.get("length")) or 1
        return repeats * sum(_node_seconds(child) for child in children)

    duration = map_length_to_duration(node.get("length"))
    if duration is None:
        return 0.0
    return duration_seconds(duration) or 0.0


def structure_duration_minutes(structure: Any) -> float:
    """Total timed minutes in a raw structure; distance and lap steps add nothing."""
    if not isinstance(structure, Mapping) or not isinstance(structure.get("structure"), list):
        return 0.0
    return sum(_node_seconds(node) for node in structure["structure"]) / 60


def resolve_duration_minutes(workout: SourceWorkout) -> float:
    """Planned hours as minutes, else the structure total, else one minute."""
    if workout.total_time_planned is not None:
        minutes = workout.total_time_planned * 60
    else:
        minutes = structure_duration_minutes(workout.structure)

    if minutes <= 0:
        logger.warning(
            "Using fallback duration of %s min for %r: planned duration unavailable",
            FALLBACK_DURATION_MIN, workout.name,
        )
        return FALLBACK_DURATION_MIN
    return minutes
