"""Pydantic models for the nested-block workout JSON format.

``validate_workouts`` checks serialized workouts against these models and
adds the business rules the schema cannot express.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError

from workout_converter.models.nested_block import NestedWorkout
from workout_converter.serialization.nested_block import to_nested_block_json


class TargetSchema(BaseModel):
    type: Literal["power", "heartRate", "cadence", "pace", "speed", "strokeRate", "resistance"]
    minValue: float
    maxValue: float
    unit: Optional[Literal[
        "percentOfFtp", "watts", "bpm", "percentOfMaxHr", "percentOfThresholdHr",
        "rpm", "roundOrStridePerMinute",
        "secondsPerKilometer", "secondsPerMile", "secondsPer100Meters", "secondsPer100Yards",
        "kilometersPerHour", "milesPerHour",
    ]] = None


class LengthSchema(BaseModel):
    unit: Literal["second", "minute", "hour", "meter", "kilometer", "mile", "repetition"]
    value: float


class StepSchema(BaseModel):
    name: str
    intensityClass: Literal["active", "warmUp", "rest", "coolDown", "recovery"]
    length: LengthSchema
    openDuration: Optional[bool]
    targets: List[TargetSchema]


class BlockSchema(BaseModel):
    type: Literal["step", "repetition"]
    length: LengthSchema
    steps: List[Union[StepSchema, "BlockSchema"]]


BlockSchema.model_rebuild()


class StructureSchema(BaseModel):
    primaryIntensityMetric: Literal[
        "percentOfFtp", "watts", "heartRate", "percentOfThresholdPace", "pace", "speed", "resistance",
    ]
    primaryLengthMetric: Literal["duration", "distance"]
    structure: List[BlockSchema]


class WorkoutSchema(BaseModel):
    id: str
    name: str
    detailed_description: Optional[str] = None
    sport_type: Literal["cycling", "running", "swimming", "strength"]
    type: Literal[
        "mixed", "vo2max", "threshold", "sweet_spot", "tempo", "endurance", "recovery", "anaerobic",
    ]
    intensity: Literal["very_easy", "easy", "moderate", "hard", "very_hard"]
    suitable_phases: List[Literal["Foundation", "Base", "Build", "Peak", "Taper", "Recovery"]]
    suitable_weekdays: Optional[List[str]] = None
    structure: StructureSchema
    base_duration_min: float
    base_tss: float
    variable_components: Optional[dict] = None
    source_file: str
    source_format: Literal["json"]
    signature: str


@dataclass(frozen=True)
class ValidationMessage:
    field: str
    message: str
    severity: Literal["error", "warning"] = "error"


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_workouts(workouts: Sequence[NestedWorkout]) -> ValidationResult:
    """Schema-check each workout, then apply name/structure/scalar rules."""
    result = ValidationResult()
    for index, workout in enumerate(workouts):
        prefix = f"workouts[{index}]"
        try:
            WorkoutSchema.model_validate(to_nested_block_json(workout))
        except ValidationError as exc:
            result.errors.append(ValidationMessage(prefix, f"Validation failed: {exc}"))
            continue

        if not workout.name.strip():
            result.errors.append(ValidationMessage(f"{prefix}.name", "Workout name is required"))
        if not workout.structure.structure:
            result.errors.append(ValidationMessage(
                f"{prefix}.structure", "Workout must have at least one structure block",
            ))
        if workout.base_duration_min <= 0:
            result.warnings.append(ValidationMessage(
                f"{prefix}.base_duration_min", "Duration should be greater than 0", "warning",
            ))
        if workout.base_tss < 0:
            result.warnings.append(ValidationMessage(
                f"{prefix}.base_tss", "TSS should not be negative", "warning",
            ))
    return result
