"""Nested-block models — the destination-B workout structure.

Mirrors the source container/step tree exactly (no flattening) with
transient offsets removed and every target explicitly typed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from workout_converter.models.enums import (
    BlockType,
    LengthUnit,
    NestedTargetType,
    NestedTargetUnit,
    PrimaryIntensityMetric,
    PrimaryLengthMetric,
    SportType,
    StepIntensity,
    TrainingPhase,
    WorkoutIntensity,
    WorkoutType,
)


@dataclass(frozen=True)
class NestedTarget:
    type: NestedTargetType
    min_value: float
    max_value: float
    unit: NestedTargetUnit | None = None


@dataclass(frozen=True)
class NestedLength:
    unit: LengthUnit
    value: float


@dataclass(frozen=True)
class NestedStep:
    name: str
    intensity_class: StepIntensity
    length: NestedLength
    open_duration: bool | None = None
    targets: tuple[NestedTarget, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NestedBlock:
    type: BlockType
    length: NestedLength
    steps: tuple[Union[NestedStep, NestedBlock], ...]


NestedNode = Union[NestedStep, NestedBlock]


@dataclass(frozen=True)
class NestedStructure:
    primary_intensity_metric: PrimaryIntensityMetric
    primary_length_metric: PrimaryLengthMetric
    structure: tuple[NestedBlock, ...]


@dataclass(frozen=True)
class WorkoutMetadata:
    """Workout-level tags inferred from the intensity factor."""

    type: WorkoutType
    intensity: WorkoutIntensity
    suitable_phases: tuple[TrainingPhase, ...]


@dataclass(frozen=True)
class NestedWorkout:
    """Complete destination-B workout, ready for serialization."""

    id: str
    name: str
    detailed_description: str | None
    sport_type: SportType
    metadata: WorkoutMetadata
    structure: NestedStructure
    base_duration_min: float
    base_tss: float
    source_file: str
    signature: str
    source_format: str = "json"
    suitable_weekdays: tuple[str, ...] | None = None

    @property
    def type(self) -> WorkoutType:
        return self.metadata.type

    @property
    def intensity(self) -> WorkoutIntensity:
        return self.metadata.intensity

    @property
    def suitable_phases(self) -> tuple[TrainingPhase, ...]:
        return self.metadata.suitable_phases
