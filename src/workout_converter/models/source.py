"""Source workout record as received from the source platform.

Library items and training-plan workouts share most fields but spell a few
of them differently; ``SourceWorkout.from_dict`` accepts either shape.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if math.isfinite(value) else None


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


@dataclass(frozen=True)
class SourceWorkout:
    """One workout from a source library or training plan.

    ``total_time_planned`` is in hours. ``structure`` is the raw structure
    tree (``{"structure": [...], "primaryIntensityMetric": ...}``) or None.
    """

    workout_id: int
    name: str
    workout_type_id: int
    description: str | None = None
    coach_comments: str | None = None
    total_time_planned: float | None = None
    tss_planned: float | None = None
    if_planned: float | None = None
    structure: Mapping[str, Any] | None = None
    library_id: int = 0
    workout_day: str | None = None
    order_on_day: int | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> SourceWorkout:
        """Build from a library-item or plan-workout API record."""
        workout_id = int(_first(raw, "exerciseLibraryItemId", "workoutId") or 0)
        name = _text(_first(raw, "itemName", "title")) or ""
        if not name.strip():
            name = f"Workout {workout_id}"

        structure = raw.get("structure")
        order = _number(raw.get("orderOnDay"))

        return cls(
            workout_id=workout_id,
            name=name,
            workout_type_id=int(_first(raw, "workoutTypeId", "workoutTypeValueId") or 0),
            description=_text(raw.get("description")),
            coach_comments=_text(raw.get("coachComments")),
            total_time_planned=_number(raw.get("totalTimePlanned")),
            tss_planned=_number(raw.get("tssPlanned")),
            if_planned=_number(raw.get("ifPlanned")),
            structure=structure if isinstance(structure, Mapping) else None,
            library_id=int(raw.get("exerciseLibraryId") or 0),
            workout_day=_text(raw.get("workoutDay")),
            order_on_day=int(order) if order is not None else None,
        )
