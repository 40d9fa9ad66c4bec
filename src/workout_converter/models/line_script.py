"""Line-script AST — the sectioned, repeat-aware tree rendered to text."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from workout_converter.models.canonical import Duration, Target
from workout_converter.models.enums import (
    IntensityClass,
    PromptPriority,
    SportHint,
    TargetMode,
)


@dataclass(frozen=True)
class TimedPrompt:
    """A message shown ``offset_seconds`` into a step."""

    offset_seconds: float
    message: str
    priority: PromptPriority = PromptPriority.NORMAL

    def __post_init__(self) -> None:
        if not math.isfinite(self.offset_seconds) or self.offset_seconds < 0:
            raise ValueError(f"prompt offset must be >= 0, got {self.offset_seconds!r}")
        if not self.message:
            raise ValueError("prompt message cannot be empty")


@dataclass(frozen=True)
class LineScriptStep:
    """One executable ``- ...`` line.

    ``intensity_tag`` is omitted from the rendered line when it is ACTIVE.
    """

    duration: Duration
    label: str | None = None
    target_mode: TargetMode = TargetMode.STEADY
    targets: tuple[Target, ...] = field(default_factory=tuple)
    intensity_tag: IntensityClass | None = None
    prompts: tuple[TimedPrompt, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.label is not None and not self.label:
            raise ValueError("step label cannot be empty; use None")


@dataclass(frozen=True)
class TextLine:
    """A non-step line (heading or comment) kept verbatim."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("text line cannot be empty")


SectionItem = Union[LineScriptStep, TextLine]


@dataclass(frozen=True)
class Section:
    """A run of items, optionally headed and optionally repeated."""

    items: tuple[SectionItem, ...]
    heading: str | None = None
    repeat_count: int | None = None

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("a section needs at least one item")
        if self.repeat_count is not None and (
            isinstance(self.repeat_count, bool)
            or not isinstance(self.repeat_count, int)
            or self.repeat_count < 1
        ):
            raise ValueError(f"repeat_count must be a positive int, got {self.repeat_count!r}")
        if self.heading is not None and not self.heading:
            raise ValueError("section heading cannot be empty; use None")

    @property
    def is_repeat(self) -> bool:
        return self.repeat_count is not None


@dataclass(frozen=True)
class LineScriptDocument:
    sections: tuple[Section, ...]
    sport_hint: SportHint | None = None

    def __post_init__(self) -> None:
        if not self.sections:
            raise ValueError("a document needs at least one section")
