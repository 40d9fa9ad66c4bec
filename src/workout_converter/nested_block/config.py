"""Transform configuration for the nested-block destination."""

from __future__ import annotations

from dataclasses import dataclass

from workout_converter.models.enums import TrainingPhase, WorkoutIntensity, WorkoutType


@dataclass(frozen=True)
class TransformConfig:
    """Explicit metadata overrides and export target.

    Any override left as None is inferred from the workout's intensity
    factor instead. Without a target library name the export flow derives
    one from the plan name.
    """

    default_workout_type: WorkoutType | None = None
    default_intensity: WorkoutIntensity | None = None
    default_suitable_phases: tuple[TrainingPhase, ...] | None = None
    target_library_name: str | None = None
