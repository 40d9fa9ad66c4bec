"""Plan-level inputs for the export flows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from workout_converter.models.source import SourceWorkout


@dataclass(frozen=True)
class TrainingPlan:
    plan_id: int
    title: str
    start_date: str
    description: str | None = None
    week_count: int = 0

    @property
    def display_name(self) -> str:
        return self.title.strip() or f"Training Plan {self.plan_id}"

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> TrainingPlan:
        return cls(
            plan_id=int(raw.get("planId") or 0),
            title=raw.get("title") or "",
            start_date=raw.get("startDate") or "",
            description=raw.get("description"),
            week_count=int(raw.get("weekCount") or 0),
        )


@dataclass(frozen=True)
class PlanNote:
    """A calendar note attached to a plan day."""

    note_id: int
    title: str
    note_date: str
    description: str | None = None

    @property
    def display_title(self) -> str:
        return self.title.strip() or f"Note {self.note_id}"

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> PlanNote:
        return cls(
            note_id=int(raw.get("id") or 0),
            title=raw.get("title") or "",
            note_date=raw.get("noteDate") or "",
            description=raw.get("description"),
        )


@dataclass(frozen=True)
class WorkoutLibrary:
    name: str
    workouts: tuple[SourceWorkout, ...] = field(default_factory=tuple)
