"""Data models for the workout converter."""

from workout_converter.models.canonical import (
    AbsolutePaceTarget,
    CadenceTarget,
    DistanceDuration,
    Duration,
    FreeTextTarget,
    NumericRange,
    NumericTarget,
    PressLap,
    Target,
    TimeDuration,
    ZoneTarget,
    normalize_intensity_class,
)
from workout_converter.models.enums import (
    IntensityClass,
    SportHint,
    SportType,
    TargetKind,
    TargetMode,
    TrainingPhase,
    WorkoutIntensity,
    WorkoutType,
)
from workout_converter.models.line_script import (
    LineScriptDocument,
    LineScriptStep,
    Section,
    TextLine,
    TimedPrompt,
)
from workout_converter.models.nested_block import (
    NestedBlock,
    NestedLength,
    NestedStep,
    NestedStructure,
    NestedTarget,
    NestedWorkout,
    WorkoutMetadata,
)
from workout_converter.models.source import SourceWorkout

__all__ = [
    "AbsolutePaceTarget",
    "CadenceTarget",
    "DistanceDuration",
    "Duration",
    "FreeTextTarget",
    "IntensityClass",
    "LineScriptDocument",
    "LineScriptStep",
    "NestedBlock",
    "NestedLength",
    "NestedStep",
    "NestedStructure",
    "NestedTarget",
    "NestedWorkout",
    "NumericRange",
    "NumericTarget",
    "PressLap",
    "Section",
    "SourceWorkout",
    "SportHint",
    "SportType",
    "Target",
    "TargetKind",
    "TargetMode",
    "TextLine",
    "TimeDuration",
    "TimedPrompt",
    "TrainingPhase",
    "WorkoutIntensity",
    "WorkoutMetadata",
    "WorkoutType",
    "ZoneTarget",
    "normalize_intensity_class",
]
