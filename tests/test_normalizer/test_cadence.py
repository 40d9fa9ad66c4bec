"""Tests for secondary cadence target detection."""

from __future__ import annotations

from workout_converter.models.canonical import CadenceTarget, NumericRange
from workout_converter.normalizer.cadence import CADENCE_RULES, extract_cadence_target


class TestExtractCadenceTarget:
    def test_nested_cadence_range(self):
        step = {"cadence": {"minRpm": 85.4, "maxRpm": 95.5}}
        assert extract_cadence_target(step) == CadenceTarget(NumericRange(85, 96))

    def test_nested_cadence_exact(self):
        assert extract_cadence_target({"cadence": {"rpm": 90}}) == CadenceTarget(90)

    def test_range_wins_over_exact(self):
        step = {"cadence": {"rpm": 90, "minRpm": 80, "maxRpm": 100}}
        assert extract_cadence_target(step) == CadenceTarget(NumericRange(80, 100))

    def test_bounds_are_ordered(self):
        step = {"cadence": {"minRpm": 100, "maxRpm": 80}}
        assert extract_cadence_target(step) == CadenceTarget(NumericRange(80, 100))

    def test_flat_alias(self):
        assert extract_cadence_target({"targetCadenceRpm": 92.6}) == CadenceTarget(93)

    def test_secondary_targets_by_type_text(self):
        step = {"secondaryTargets": [
            {"type": "heartRate", "minValue": 140},
            {"type": "cadence", "minValue": 88, "maxValue": 92},
        ]}
        assert extract_cadence_target(step) == CadenceTarget(NumericRange(88, 92))

    def test_secondary_targets_by_marker_key(self):
        step = {"secondary_targets": [{"maxRpm": 100}]}
        assert extract_cadence_target(step) == CadenceTarget(NumericRange(100, 100))

    def test_rule_order_nested_first(self):
        step = {"cadence": {"rpm": 70}, "cadenceRpm": 95}
        assert extract_cadence_target(step) == CadenceTarget(70)

    def test_non_cadence_object_ignored(self):
        assert extract_cadence_target({"cadence": {"value": 90}}) is None

    def test_nothing_found(self):
        assert extract_cadence_target({"name": "Easy"}) is None
        assert extract_cadence_target("step") is None

    def test_zero_cadence_suppressed(self):
        assert extract_cadence_target({"cadenceRpm": 0}) is None

    def test_rules_are_ordered_tuple(self):
        assert isinstance(CADENCE_RULES, tuple)
        assert len(CADENCE_RULES) == 3
