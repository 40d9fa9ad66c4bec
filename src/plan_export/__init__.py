"""Export flows — all destination I/O goes through the collaborator interfaces."""

from plan_export.destination import LibraryDestination, PlanDestination
from plan_export.exceptions import (
    ErrorCode,
    ExportAPIError,
    ExportError,
    ExportFailedError,
    ExportValidationError,
    InvalidApiKeyError,
    NoApiKeyError,
)
from plan_export.library_exporter import PayloadFormat, export_libraries
from plan_export.models import PlanNote, TrainingPlan, WorkoutLibrary
from plan_export.plan_exporter import export_training_plan
from plan_export.results import ExportResult, ValidationMessage

__all__ = [
    "ErrorCode",
    "ExportAPIError",
    "ExportError",
    "ExportFailedError",
    "ExportResult",
    "ExportValidationError",
    "InvalidApiKeyError",
    "LibraryDestination",
    "NoApiKeyError",
    "PayloadFormat",
    "PlanDestination",
    "PlanNote",
    "TrainingPlan",
    "ValidationMessage",
    "WorkoutLibrary",
    "export_libraries",
    "export_training_plan",
]
