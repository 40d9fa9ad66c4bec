"""Tests for the export error taxonomy and plan models."""

from __future__ import annotations

import pytest

from plan_export import (
    ErrorCode,
    ExportAPIError,
    ExportError,
    ExportFailedError,
    ExportValidationError,
    InvalidApiKeyError,
    NoApiKeyError,
    PlanNote,
    TrainingPlan,
)


class TestExportErrors:
    @pytest.mark.parametrize(
        "error, code",
        [
            (NoApiKeyError(), ErrorCode.NO_API_KEY),
            (InvalidApiKeyError(), ErrorCode.INVALID_API_KEY),
            (ExportAPIError("bad gateway", 502), ErrorCode.API_ERROR),
            (ExportValidationError("bad"), ErrorCode.VALIDATION_ERROR),
            (ExportFailedError("oops"), ErrorCode.EXPORT_ERROR),
        ],
    )
    def test_codes(self, error, code):
        assert isinstance(error, ExportError)
        assert error.code is code

    def test_default_message(self):
        assert NoApiKeyError().message == "No API key configured"

    def test_status_code(self):
        error = ExportAPIError("bad gateway", 502)
        assert error.status_code == 502
        assert str(error) == "bad gateway"


class TestPlanModels:
    def test_training_plan_from_dict(self):
        plan = TrainingPlan.from_dict({
            "planId": 42, "title": "", "startDate": "2025-03-03", "weekCount": 8,
        })
        assert plan.plan_id == 42
        assert plan.week_count == 8
        assert plan.display_name == "Training Plan 42"

    def test_plan_note_from_dict(self):
        note = PlanNote.from_dict({"id": 3, "title": " ", "noteDate": "2025-03-12"})
        assert note.display_title == "Note 3"
        assert note.description is None
