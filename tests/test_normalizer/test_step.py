"""Tests for whole-step normalization and label elision."""

from __future__ import annotations

import pytest

from builders import make_step
from workout_converter.models.canonical import CadenceTarget, NumericRange, NumericTarget
from workout_converter.models.enums import IntensityClass, TargetKind
from workout_converter.normalizer.step import is_redundant_label, normalize_step


class TestIsRedundantLabel:
    @pytest.mark.parametrize(
        "name, intensity",
        [
            ("Warm Up", IntensityClass.WARMUP),
            ("warm-up", IntensityClass.WARMUP),
            ("Cool Down", IntensityClass.COOLDOWN),
            ("REST", IntensityClass.REST),
        ],
    )
    def test_redundant(self, name, intensity):
        assert is_redundant_label(name, intensity)

    def test_different_name_kept(self):
        assert not is_redundant_label("Easy", IntensityClass.REST)

    def test_no_intensity(self):
        assert not is_redundant_label("Warm Up", None)


class TestNormalizeStep:
    def test_full_step(self):
        step = make_step("Hard", 30, 120, 150, "active", cadenceRpm=100)
        normalized = normalize_step(step, "percentOfFtp")
        assert normalized.label == "Hard"
        assert normalized.intensity is IntensityClass.ACTIVE
        assert normalized.targets == (
            NumericTarget(TargetKind.POWER_PERCENT_FTP, NumericRange(120, 150)),
            CadenceTarget(100),
        )

    def test_redundant_label_dropped(self):
        normalized = normalize_step(make_step("Warm Up", 300, 40, 50, "warmUp"), "percentOfFtp")
        assert normalized.label is None
        assert normalized.intensity is IntensityClass.WARMUP

    def test_blank_name(self):
        assert normalize_step(make_step("  ", 60), None).label is None

    def test_unusable_duration_is_none(self):
        step = make_step("Bad", 60)
        step["length"] = {"unit": "parsec", "value": 1}
        assert normalize_step(step, "percentOfFtp") is None
