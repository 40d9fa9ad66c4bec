"""Tests for the direct source-tree text renderer."""

from __future__ import annotations

import pytest

from builders import make_block, make_repeat, make_step, make_structure
from workout_converter.line_script.legacy import (
    format_length,
    render_legacy_text,
    render_simple_step,
    target_suffix,
)


class TestTargetSuffix:
    def test_known_metrics(self):
        assert target_suffix("percentOfFtp") == "%"
        assert target_suffix("percentOfThresholdHr") == "% LTHR"

    def test_unknown_percent_metric(self):
        assert target_suffix("percentOfMaxHr") == "%"

    def test_other_metric(self):
        assert target_suffix("watts") == ""
        assert target_suffix(None) == ""


class TestFormatLength:
    def test_known_unit(self):
        assert format_length({"unit": "second", "value": 3600}) == "1h"

    @pytest.mark.parametrize(
        "length",
        [{"unit": "furlong", "value": 3}, {"unit": "second", "value": 0}, None],
    )
    def test_unusable(self, length):
        assert format_length(length) is None


class TestRenderSimpleStep:
    def test_partial_tokens(self):
        step = make_step("", 60, 70, 80)
        assert render_simple_step(step, "percentOfFtp") == ["- 1m 70-80%"]

    def test_unknown_unit_dropped(self):
        step = make_step("Gallop", 60, 70, 80)
        step["length"] = {"unit": "furlong", "value": 3}
        assert render_simple_step(step, "percentOfFtp") == []

    def test_zero_length_dropped(self):
        step = make_step("Warm Up", 0, 40, 50, intensity="warmUp")
        assert render_simple_step(step, "percentOfFtp") == []

    def test_nothing_to_render(self):
        assert render_simple_step({"length": None}, None) == []


class TestRenderLegacyText:
    def test_matches_structured_output(self, interval_structure, interval_text):
        assert render_legacy_text(interval_structure) == interval_text

    def test_repeat_between_plain_blocks(self):
        structure = make_structure(
            make_block(make_step("A", 60), make_repeat(2, make_step("B", 30)), make_step("C", 60)),
            metric="watts",
        )
        assert render_legacy_text(structure) == "- A 1m\n\n2x\n- B 30s\n\n- C 1m"

    def test_nothing_renders(self):
        assert render_legacy_text(make_structure()) is None
        assert render_legacy_text(None) is None
