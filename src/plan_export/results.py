"""Export outcome reported back to the caller."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_converter.nested_block.schema import ValidationMessage

__all__ = ["ExportResult", "ValidationMessage"]


@dataclass
class ExportResult:
    """Outcome of one export (a plan, or one library).

    ``items_exported`` counts scheduled placements for a plan export and
    uploaded workouts for a library export.
    """

    success: bool
    name: str
    items_exported: int = 0
    warnings: list[ValidationMessage] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    error_code: str | None = None
