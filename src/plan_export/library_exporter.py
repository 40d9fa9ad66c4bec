"""Per-library workout export.

Each library is transformed, validated and uploaded in turn. A failing
library is recorded and the remaining libraries are still processed.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Sequence

from workout_converter.line_script import build_library_payload
from workout_converter.nested_block import TransformConfig, validate_workouts
from workout_converter.serialization import to_nested_block_json

from plan_export.batch import transform_batch
from plan_export.destination import LibraryDestination
from plan_export.exceptions import ErrorCode, ExportError
from plan_export.models import WorkoutLibrary
from plan_export.results import ExportResult, ValidationMessage

logger = logging.getLogger(__name__)


class PayloadFormat(str, Enum):
    LINE_SCRIPT = "line_script"
    NESTED_BLOCK = "nested_block"


def build_payloads(
    library: WorkoutLibrary,
    payload_format: PayloadFormat,
    config: TransformConfig,
) -> tuple[list[dict[str, Any]], list[ValidationMessage], list[str]]:
    """Payloads for one library, plus warnings and blocking errors."""
    if payload_format is PayloadFormat.LINE_SCRIPT:
        return [build_library_payload(workout) for workout in library.workouts], [], []

    pairs, warnings = transform_batch(library.workouts, config)
    nested = [workout for _, workout in pairs]
    validation = validate_workouts(nested)
    warnings.extend(validation.warnings)
    errors = [error.message for error in validation.errors]
    return [to_nested_block_json(workout) for workout in nested], warnings, errors


def export_library(
    library: WorkoutLibrary,
    destination: LibraryDestination,
    config: TransformConfig,
    payload_format: PayloadFormat,
) -> ExportResult:
    payloads, warnings, errors = build_payloads(library, payload_format, config)
    if errors:
        return ExportResult(
            success=False, name=library.name, warnings=warnings,
            errors=errors, error_code=ErrorCode.VALIDATION_ERROR.value,
        )
    if not payloads:
        return ExportResult(
            success=False, name=library.name, warnings=warnings,
            errors=["No supported workouts to export"], error_code=ErrorCode.EXPORT_ERROR.value,
        )

    try:
        exported = destination.upload_workouts(library.name, payloads)
    except ExportError as exc:
        logger.error("Export of library %r failed: %s", library.name, exc)
        return ExportResult(
            success=False, name=library.name, warnings=warnings,
            errors=[exc.message], error_code=exc.code.value,
        )

    logger.info("Exported %d workouts from library %r", exported, library.name)
    return ExportResult(success=True, name=library.name, items_exported=exported, warnings=warnings)


def export_libraries(
    libraries: Sequence[WorkoutLibrary],
    destination: LibraryDestination,
    config: TransformConfig | None = None,
    payload_format: PayloadFormat = PayloadFormat.NESTED_BLOCK,
) -> list[ExportResult]:
    """Export every library in order; returns one result per library."""
    config = config or TransformConfig()
    results = []
    for index, library in enumerate(libraries, start=1):
        logger.info("Exporting library %r (%d/%d)", library.name, index, len(libraries))
        results.append(export_library(library, destination, config, payload_format))

    failed = sum(1 for result in results if not result.success)
    if failed:
        logger.warning("%d of %d libraries failed to export", failed, len(results))
    return results
