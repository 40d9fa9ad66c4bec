"""Tests for schema validation of nested-block workouts."""

from __future__ import annotations

from dataclasses import replace

from workout_converter import transform_workout
from workout_converter.nested_block.schema import validate_workouts


class TestValidateWorkouts:
    def test_valid_workout(self, make_workout):
        result = validate_workouts([transform_workout(make_workout())])
        assert result.is_valid
        assert result.warnings == []

    def test_schema_failure(self, make_workout):
        broken = replace(transform_workout(make_workout()), source_format="xml")
        result = validate_workouts([broken])
        assert not result.is_valid
        assert result.errors[0].field == "workouts[0]"
        assert result.errors[0].message.startswith("Validation failed")

    def test_blank_name(self, make_workout):
        unnamed = replace(transform_workout(make_workout()), name="   ")
        result = validate_workouts([unnamed])
        assert [e.field for e in result.errors] == ["workouts[0].name"]

    def test_scalar_warnings(self, make_workout):
        nested = replace(transform_workout(make_workout()), base_duration_min=0, base_tss=-5)
        result = validate_workouts([nested])
        assert result.is_valid
        assert [w.field for w in result.warnings] == [
            "workouts[0].base_duration_min", "workouts[0].base_tss",
        ]
        assert all(w.severity == "warning" for w in result.warnings)

    def test_indexes_follow_input(self, make_workout):
        good = transform_workout(make_workout())
        result = validate_workouts([good, replace(good, name="")])
        assert result.errors[0].field == "workouts[1].name"
