"""Multi-week training-plan export with workout deduplication.

Flow:
1. Transform the plan's workouts to nested-block workouts and validate them.
2. Resolve the shared workout library.
3. Resolve each distinct structural signature once: reuse a workout already
   in the library or upload a new one. Later occurrences of a signature
   reuse the first one's key.
4. Lay the placements out into weeks and days and create the plan.
5. Create plan notes; a failed note becomes a warning.

Requests are issued one at a time. Any collaborator failure in steps 2-4
aborts the rest of the export.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, Sequence

from workout_converter.models.nested_block import NestedWorkout
from workout_converter.models.source import SourceWorkout
from workout_converter.nested_block import TransformConfig, validate_workouts
from workout_converter.nested_block.schema import ValidationMessage
from workout_converter.normalizer.values import round_half_up
from workout_converter.serialization import to_nested_block_json

from plan_export.batch import transform_batch
from plan_export.calendar import DAY_KEYS, day_of_week, infer_week_phase, parse_day, week_number
from plan_export.destination import PlanDestination
from plan_export.exceptions import ErrorCode, ExportError
from plan_export.models import PlanNote, TrainingPlan
from plan_export.results import ExportResult

logger = logging.getLogger(__name__)

SHARED_LIBRARY_SOURCE_ID = "TP:PLAN_WORKOUTS_V1"


@dataclass
class _Week:
    days: dict[str, list[dict[str, Any]]] = field(
        default_factory=lambda: {key: [] for key in DAY_KEYS}
    )
    weekly_tss: int = 0


def _warning(field_name: str, message: str) -> ValidationMessage:
    return ValidationMessage(field_name, message, "warning")


def _placement_order(workout: SourceWorkout) -> tuple[str, float]:
    order = workout.order_on_day if workout.order_on_day is not None else float("inf")
    return (workout.workout_day or "", order)


def resolve_workout_keys(
    workouts: Sequence[NestedWorkout],
    destination: PlanDestination,
    library_id: str,
) -> dict[str, str]:
    """Map each distinct signature to a destination workout key.

    Looks up and, if needed, uploads once per signature.
    """
    keys: dict[str, str] = {}
    for workout in workouts:
        if workout.signature in keys:
            logger.info("Reusing deduplicated workout for %r", workout.name)
            continue

        existing = destination.find_workout_by_signature(library_id, workout.signature)
        if existing is not None:
            logger.info("Reusing existing library workout %s for %r", existing, workout.name)
            keys[workout.signature] = existing
            continue

        payload = to_nested_block_json(workout)
        payload["source_id"] = workout.signature
        keys[workout.signature] = destination.upload_workout(library_id, payload)
        logger.info("Uploaded workout %r as %s", workout.name, keys[workout.signature])
    return keys


def build_weeks(
    plan_start: date,
    workouts: Iterable[SourceWorkout],
    transformed: dict[int, NestedWorkout],
    keys: dict[str, str],
    warnings: list[ValidationMessage],
) -> dict[int, _Week]:
    """Place each workout on its plan week and weekday."""
    weeks: dict[int, _Week] = {}
    for workout in sorted(workouts, key=_placement_order):
        field_name = f"workouts:{workout.workout_id}"
        nested = transformed.get(workout.workout_id)
        if nested is None or nested.signature not in keys:
            warnings.append(_warning(
                field_name, f'Skipped placement for "{workout.name}": workout was not exported',
            ))
            continue

        day = parse_day(workout.workout_day)
        if day is None:
            warnings.append(_warning(
                field_name, f'Skipped placement for "{workout.name}": invalid date {workout.workout_day}',
            ))
            continue

        week = week_number(day, plan_start)
        if week < 1:
            warnings.append(_warning(
                field_name, f'Skipped placement for "{workout.name}": occurs before plan start',
            ))
            continue

        day_index = day_of_week(day)
        slots = weeks.setdefault(week, _Week()).days[DAY_KEYS[day_index]]
        if workout.order_on_day is not None:
            order = max(0, workout.order_on_day)
        else:
            order = len(slots)
        tss = max(0, round_half_up(nested.base_tss or 0))

        slots.append({
            "id": f"tp-{workout.workout_id}-{week}-{day_index}-{order}",
            "order": order,
            "workoutKey": keys[nested.signature],
            "workout": {
                "name": nested.name,
                "type": nested.type.value,
                "sport_type": nested.sport_type.value,
                "base_duration_min": max(1, round_half_up(nested.base_duration_min or 1)),
                "base_tss": tss,
            },
        })
        weeks[week].weekly_tss += tss
    return weeks


def build_plan_payload(plan: TrainingPlan, weeks: dict[int, _Week]) -> dict[str, Any]:
    total_weeks = max(plan.week_count, max(weeks, default=0), 1)
    week_payloads = []
    for number in range(1, total_weeks + 1):
        week = weeks.get(number, _Week())
        for slots in week.days.values():
            slots.sort(key=lambda slot: slot["order"])
        week_payloads.append({
            "weekNumber": number,
            "phase": infer_week_phase(number, total_weeks).value,
            "weeklyTss": week.weekly_tss,
            "notes": None,
            "workouts": week.days,
        })

    return {
        "metadata": {
            "name": plan.display_name,
            "description": plan.description,
            "goal": f"Imported from TrainingPeaks plan {plan.plan_id}",
            "source_id": f"TP:{plan.plan_id}",
        },
        "weeks": week_payloads,
        "publish": True,
    }


def create_notes(
    notes: Iterable[PlanNote],
    plan_id: str,
    plan_start: date,
    destination: PlanDestination,
    warnings: list[ValidationMessage],
) -> None:
    """Create plan notes; every failure is downgraded to a warning."""
    for note in notes:
        field_name = f"notes:{note.note_id}"
        day = parse_day(note.note_date)
        if day is None:
            warnings.append(_warning(field_name, f'Skipped note "{note.title}": invalid date {note.note_date}'))
            continue
        week = week_number(day, plan_start)
        if week < 1:
            warnings.append(_warning(field_name, f'Skipped note "{note.title}": occurs before plan start'))
            continue

        description = (note.description or "").strip() or None
        try:
            destination.create_plan_note(plan_id, {
                "week_number": week,
                "day_of_week": day_of_week(day),
                "title": note.display_title,
                "description": description,
            })
        except ExportError as exc:
            logger.warning("Failed to create note %r: %s", note.title, exc)
            warnings.append(_warning(
                field_name,
                f'Failed to create note "{note.title}" for week {week}, day {day_of_week(day)}: {exc}',
            ))


def export_training_plan(
    plan: TrainingPlan,
    workouts: Sequence[SourceWorkout],
    destination: PlanDestination,
    config: TransformConfig | None = None,
    notes: Sequence[PlanNote] = (),
) -> ExportResult:
    """Export a whole plan; all-or-nothing for workouts and the plan itself."""
    config = config or TransformConfig()
    plan_name = plan.display_name
    logger.info("Exporting training plan %r (%d workouts)", plan_name, len(workouts))

    def failed(errors: list[str], code: ErrorCode, exported: int = 0) -> ExportResult:
        logger.error("Training plan export %r failed: %s", plan_name, "; ".join(errors))
        return ExportResult(
            success=False, name=plan_name, items_exported=exported,
            warnings=warnings, errors=errors, error_code=code.value,
        )

    pairs, warnings = transform_batch(workouts, config)
    nested = [workout for _, workout in pairs]
    if not nested:
        return failed(["No plan workouts were available to export"], ErrorCode.EXPORT_ERROR)

    validation = validate_workouts(nested)
    warnings.extend(validation.warnings)
    if not validation.is_valid:
        return failed([error.message for error in validation.errors], ErrorCode.VALIDATION_ERROR)

    plan_start = parse_day(plan.start_date)
    if plan_start is None:
        return failed([f"Invalid training plan start date: {plan.start_date}"], ErrorCode.EXPORT_ERROR)

    library_name = config.target_library_name or f"{plan_name} - Workouts"
    scheduled = 0
    try:
        library = destination.resolve_library(library_name, SHARED_LIBRARY_SOURCE_ID)
        keys = resolve_workout_keys(nested, destination, library["id"])

        transformed = {source.workout_id: workout for source, workout in pairs}
        weeks = build_weeks(plan_start, workouts, transformed, keys, warnings)
        scheduled = sum(len(slots) for week in weeks.values() for slots in week.days.values())

        plan_id = destination.create_training_plan(build_plan_payload(plan, weeks))
        logger.info("Created training plan %r as %s", plan_name, plan_id)
    except ExportError as exc:
        return failed([exc.message], exc.code, scheduled)

    create_notes(notes, plan_id, plan_start, destination, warnings)
    return ExportResult(success=True, name=plan_name, items_exported=scheduled, warnings=warnings)
