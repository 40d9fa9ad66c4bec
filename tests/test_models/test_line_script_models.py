"""Tests for line-script AST invariants."""

from __future__ import annotations

import pytest

from workout_converter.models.canonical import TimeDuration
from workout_converter.models.line_script import (
    LineScriptDocument,
    LineScriptStep,
    Section,
    TextLine,
    TimedPrompt,
)


def _step(**overrides) -> LineScriptStep:
    defaults = {"duration": TimeDuration(60)}
    defaults.update(overrides)
    return LineScriptStep(**defaults)


class TestSection:
    def test_requires_items(self):
        with pytest.raises(ValueError):
            Section(items=())

    @pytest.mark.parametrize("count", [0, -1, True])
    def test_repeat_count_must_be_positive_int(self, count):
        with pytest.raises(ValueError):
            Section(items=(_step(),), repeat_count=count)

    def test_is_repeat(self):
        assert Section(items=(_step(),), repeat_count=2).is_repeat
        assert not Section(items=(_step(),)).is_repeat

    def test_mixed_items(self):
        section = Section(items=(TextLine("Main set"), _step()))
        assert len(section.items) == 2


class TestStepAndDocument:
    def test_empty_label_rejected(self):
        with pytest.raises(ValueError):
            _step(label="")

    def test_document_requires_sections(self):
        with pytest.raises(ValueError):
            LineScriptDocument(sections=())

    def test_prompt_offset_non_negative(self):
        with pytest.raises(ValueError):
            TimedPrompt(-1, "go")
        assert TimedPrompt(0, "go").message == "go"
