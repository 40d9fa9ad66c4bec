"""Tests for IF-based metadata inference and duration resolution."""

from __future__ import annotations

import pytest

from builders import make_block, make_repeat, make_step, make_structure
from workout_converter.models.enums import TrainingPhase, WorkoutIntensity, WorkoutType
from workout_converter.nested_block.config import TransformConfig
from workout_converter.nested_block.metadata import (
    FALLBACK_DURATION_MIN,
    infer_metadata,
    resolve_duration_minutes,
    structure_duration_minutes,
)


class TestInferMetadata:
    @pytest.mark.parametrize(
        "intensity_factor, workout_type, intensity",
        [
            (1.10, WorkoutType.VO2MAX, WorkoutIntensity.VERY_HARD),
            (1.05, WorkoutType.VO2MAX, WorkoutIntensity.VERY_HARD),
            (0.95, WorkoutType.THRESHOLD, WorkoutIntensity.HARD),
            (0.88, WorkoutType.TEMPO, WorkoutIntensity.MODERATE),
            (0.70, WorkoutType.ENDURANCE, WorkoutIntensity.EASY),
            (0.50, WorkoutType.RECOVERY, WorkoutIntensity.VERY_EASY),
            (None, WorkoutType.RECOVERY, WorkoutIntensity.VERY_EASY),
        ],
    )
    def test_breakpoints(self, intensity_factor, workout_type, intensity):
        metadata = infer_metadata(intensity_factor)
        assert metadata.type is workout_type
        assert metadata.intensity is intensity

    def test_phases(self):
        assert infer_metadata(0.88).suitable_phases == (TrainingPhase.BASE, TrainingPhase.BUILD)
        assert infer_metadata(0.75).suitable_phases == ()
        assert infer_metadata(0.3).suitable_phases == (TrainingPhase.RECOVERY,)

    def test_overrides_win(self):
        config = TransformConfig(
            default_workout_type=WorkoutType.SWEET_SPOT,
            default_suitable_phases=(TrainingPhase.BASE,),
        )
        metadata = infer_metadata(1.2, config)
        assert metadata.type is WorkoutType.SWEET_SPOT
        assert metadata.intensity is WorkoutIntensity.VERY_HARD
        assert metadata.suitable_phases == (TrainingPhase.BASE,)

    def test_empty_phase_override(self):
        config = TransformConfig(default_suitable_phases=())
        assert infer_metadata(0.9, config).suitable_phases == ()


class TestDuration:
    def test_structure_total(self, interval_structure):
        # 5m + 3 x (30s + 4m) + 5m
        assert structure_duration_minutes(interval_structure) == pytest.approx(23.5)

    def test_distance_steps_add_nothing(self):
        run = make_step("Run", 60)
        run["length"] = {"unit": "kilometer", "value": 5}
        structure = make_structure(make_block(run, make_step("Walk", 120)))
        assert structure_duration_minutes(structure) == pytest.approx(2.0)

    def test_nested_repeats_multiply(self):
        structure = make_structure(make_repeat(2, make_repeat(3, make_step("Sprint", 10))))
        assert structure_duration_minutes(structure) == pytest.approx(1.0)

    def test_planned_hours_win(self, make_workout):
        assert resolve_duration_minutes(make_workout(total_time_planned=1.25)) == pytest.approx(75)

    def test_structure_fallback(self, make_workout):
        assert resolve_duration_minutes(make_workout(total_time_planned=None)) == pytest.approx(23.5)

    def test_fixed_fallback(self, make_workout, caplog):
        workout = make_workout(total_time_planned=None, structure=None)
        assert resolve_duration_minutes(workout) == FALLBACK_DURATION_MIN
        assert "fallback duration" in caplog.text

    def test_zero_planned_uses_fallback(self, make_workout):
        assert resolve_duration_minutes(make_workout(total_time_planned=0)) == FALLBACK_DURATION_MIN
