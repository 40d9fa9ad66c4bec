"""Tests for the training-plan export flow."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from plan_export import (
    ExportAPIError,
    InvalidApiKeyError,
    PlanDestination,
    PlanNote,
    TrainingPlan,
    export_training_plan,
)
from plan_export.batch import transform_batch
from plan_export.plan_exporter import SHARED_LIBRARY_SOURCE_ID
from workout_converter import TransformConfig


def _make_plan(**overrides) -> TrainingPlan:
    defaults = {"plan_id": 42, "title": "Spring Build", "start_date": "2025-03-03T00:00:00", "week_count": 2}
    defaults.update(overrides)
    return TrainingPlan(**defaults)


def _make_destination() -> MagicMock:
    destination = MagicMock(spec=PlanDestination)
    destination.resolve_library.return_value = {"id": "lib-1", "name": "Spring Build - Workouts"}
    destination.find_workout_by_signature.return_value = None
    destination.upload_workout.side_effect = lambda library_id, payload: f"key-{payload['id']}"
    destination.create_training_plan.return_value = "plan-9"
    return destination


@pytest.fixture
def plan_workouts(make_workout):
    """The same intervals on two Tuesdays, plus a harder Thursday session."""
    return [
        make_workout(workout_id=1, workout_day="2025-03-04T00:00:00"),
        make_workout(workout_id=2, workout_day="2025-03-11T00:00:00", name="VO2 Intervals (repeat)"),
        make_workout(workout_id=3, workout_day="2025-03-06T00:00:00", name="Long Tempo", tss_planned=60.0),
    ]


def _plan_payload(destination: MagicMock) -> dict:
    return destination.create_training_plan.call_args.args[0]


class TestExportTrainingPlan:
    def test_success(self, plan_workouts):
        destination = _make_destination()
        result = export_training_plan(_make_plan(), plan_workouts, destination)
        assert result.success
        assert result.name == "Spring Build"
        assert result.items_exported == 3
        assert result.errors == []

    def test_shared_library_resolved(self, plan_workouts):
        destination = _make_destination()
        export_training_plan(_make_plan(), plan_workouts, destination)
        destination.resolve_library.assert_called_once_with(
            "Spring Build - Workouts", SHARED_LIBRARY_SOURCE_ID,
        )

    def test_configured_library_name(self, plan_workouts):
        destination = _make_destination()
        config = TransformConfig(target_library_name="Imported")
        export_training_plan(_make_plan(), plan_workouts, destination, config)
        assert destination.resolve_library.call_args.args[0] == "Imported"

    def test_duplicates_uploaded_once(self, plan_workouts):
        destination = _make_destination()
        export_training_plan(_make_plan(), plan_workouts, destination)
        assert destination.upload_workout.call_count == 2
        assert destination.find_workout_by_signature.call_count == 2

        weeks = _plan_payload(destination)["weeks"]
        first = weeks[0]["workouts"]["tuesday"][0]
        second = weeks[1]["workouts"]["tuesday"][0]
        assert first["workoutKey"] == second["workoutKey"] == "key-1"

    def test_upload_payload_carries_signature(self, plan_workouts):
        destination = _make_destination()
        export_training_plan(_make_plan(), plan_workouts, destination)
        payload = destination.upload_workout.call_args_list[0].args[1]
        assert payload["source_id"] == payload["signature"]
        assert payload["source_id"].startswith("TP:")

    def test_existing_library_workout_reused(self, plan_workouts):
        destination = _make_destination()
        destination.find_workout_by_signature.return_value = "existing-7"
        result = export_training_plan(_make_plan(), plan_workouts, destination)
        assert result.success
        destination.upload_workout.assert_not_called()

    def test_plan_payload_layout(self, plan_workouts):
        destination = _make_destination()
        export_training_plan(_make_plan(), plan_workouts, destination)
        payload = _plan_payload(destination)

        assert payload["publish"] is True
        assert payload["metadata"]["source_id"] == "TP:42"
        assert [week["weekNumber"] for week in payload["weeks"]] == [1, 2]
        assert [week["phase"] for week in payload["weeks"]] == ["Base", "Recovery"]
        assert [week["weeklyTss"] for week in payload["weeks"]] == [100, 40]

        tuesday = payload["weeks"][0]["workouts"]["tuesday"][0]
        assert tuesday["id"] == "tp-1-1-1-0"
        assert tuesday["workout"] == {
            "name": "VO2 Intervals",
            "type": "tempo",
            "sport_type": "cycling",
            "base_duration_min": 30,
            "base_tss": 40,
        }
        assert payload["weeks"][0]["workouts"]["thursday"][0]["workoutKey"] == "key-3"
        assert payload["weeks"][0]["workouts"]["monday"] == []

    def test_same_day_order(self, make_workout):
        destination = _make_destination()
        workouts = [
            make_workout(workout_id=1, workout_day="2025-03-04", order_on_day=2),
            make_workout(workout_id=2, workout_day="2025-03-04", order_on_day=1, tss_planned=20.0),
        ]
        export_training_plan(_make_plan(week_count=1), workouts, destination)
        tuesday = _plan_payload(destination)["weeks"][0]["workouts"]["tuesday"]
        assert [slot["order"] for slot in tuesday] == [1, 2]

    def test_bad_placements_become_warnings(self, make_workout):
        destination = _make_destination()
        workouts = [
            make_workout(workout_id=1, workout_day="2025-03-04"),
            make_workout(workout_id=2, workout_day="not a date"),
            make_workout(workout_id=3, workout_day="2025-02-20"),
        ]
        result = export_training_plan(_make_plan(), workouts, destination)
        assert result.success
        assert result.items_exported == 1
        messages = [w.message for w in result.warnings]
        assert any("invalid date" in m for m in messages)
        assert any("before plan start" in m for m in messages)

    def test_unsupported_workouts_skipped(self, make_workout):
        destination = _make_destination()
        workouts = [
            make_workout(workout_id=1, workout_day="2025-03-04"),
            make_workout(workout_id=2, workout_day="2025-03-05", workout_type_id=9, name="Gym"),
        ]
        result = export_training_plan(_make_plan(), workouts, destination)
        assert result.success
        assert result.items_exported == 1
        assert any('Skipped "Gym"' in w.message for w in result.warnings)


class TestExportFailures:
    def test_no_workouts(self):
        result = export_training_plan(_make_plan(), [], _make_destination())
        assert not result.success
        assert result.error_code == "EXPORT_ERROR"

    def test_all_unsupported(self, make_workout):
        destination = _make_destination()
        result = export_training_plan(_make_plan(), [make_workout(workout_type_id=9)], destination)
        assert not result.success
        assert len(result.warnings) == 1
        destination.resolve_library.assert_not_called()

    def test_validation_failure(self, make_workout):
        destination = _make_destination()
        result = export_training_plan(_make_plan(), [make_workout(name="  ")], destination)
        assert not result.success
        assert result.error_code == "VALIDATION_ERROR"
        destination.resolve_library.assert_not_called()

    def test_invalid_start_date(self, plan_workouts):
        result = export_training_plan(_make_plan(start_date="soon"), plan_workouts, _make_destination())
        assert not result.success
        assert "Invalid training plan start date" in result.errors[0]

    def test_upload_failure_aborts(self, plan_workouts):
        destination = _make_destination()
        destination.upload_workout.side_effect = ExportAPIError("Upload rejected", status_code=500)
        result = export_training_plan(_make_plan(), plan_workouts, destination)
        assert not result.success
        assert result.error_code == "API_ERROR"
        assert result.errors == ["Upload rejected"]
        assert destination.upload_workout.call_count == 1
        destination.create_training_plan.assert_not_called()

    def test_library_failure_aborts(self, plan_workouts):
        destination = _make_destination()
        destination.resolve_library.side_effect = InvalidApiKeyError()
        result = export_training_plan(_make_plan(), plan_workouts, destination)
        assert result.error_code == "INVALID_API_KEY"
        destination.find_workout_by_signature.assert_not_called()

    def test_plan_creation_failure(self, plan_workouts):
        destination = _make_destination()
        destination.create_training_plan.side_effect = ExportAPIError("Plan rejected")
        result = export_training_plan(_make_plan(), plan_workouts, destination)
        assert not result.success
        assert result.items_exported == 3


class TestPlanNotes:
    def test_note_created(self, plan_workouts):
        destination = _make_destination()
        note = PlanNote(note_id=5, title="Race week", note_date="2025-03-12", description="  ")
        export_training_plan(_make_plan(), plan_workouts, destination, notes=[note])
        destination.create_plan_note.assert_called_once_with("plan-9", {
            "week_number": 2,
            "day_of_week": 2,
            "title": "Race week",
            "description": None,
        })

    def test_note_failure_is_warning(self, plan_workouts):
        destination = _make_destination()
        destination.create_plan_note.side_effect = ExportAPIError("Note rejected")
        note = PlanNote(note_id=5, title="Race week", note_date="2025-03-12")
        result = export_training_plan(_make_plan(), plan_workouts, destination, notes=[note])
        assert result.success
        assert result.warnings[-1].field == "notes:5"
        assert "Note rejected" in result.warnings[-1].message

    def test_note_before_start_skipped(self, plan_workouts):
        destination = _make_destination()
        note = PlanNote(note_id=6, title="", note_date="2025-01-01")
        result = export_training_plan(_make_plan(), plan_workouts, destination, notes=[note])
        destination.create_plan_note.assert_not_called()
        assert result.warnings[-1].field == "notes:6"


class TestTransformBatch:
    def test_pairs_and_warnings(self, make_workout):
        pairs, warnings = transform_batch(
            [make_workout(), make_workout(workout_id=7, workout_type_id=9, name="Gym")],
            TransformConfig(),
        )
        assert [source.workout_id for source, _ in pairs] == [1234]
        assert warnings[0].field == "workouts[7]"
        assert warnings[0].severity == "warning"
