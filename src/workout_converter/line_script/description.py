"""Description assembly for the line-script destination.

A description holds the workout script first, then the free-text narrative
(platform description and coach notes) under a neutral ``- - - -``
delimiter so the script stays editable on the destination. Narrative lines
that would parse as step lines are escaped with a leading backtick.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from workout_converter.line_script.builder import build_document
from workout_converter.line_script.legacy import render_legacy_text
from workout_converter.line_script.renderer import render_document
from workout_converter.line_script.sports import map_workout_type_to_sport
from workout_converter.models.enums import (
    COACH_NOTES_HEADING,
    EMPTY_DESCRIPTION_PLACEHOLDER,
    SCRIPT_DELIMITER,
)
from workout_converter.models.source import SourceWorkout
from workout_converter.normalizer.values import round_half_up

logger = logging.getLogger(__name__)

_SCRIPT_SYNTAX_LINE = re.compile(r"^[-*]", re.MULTILINE)


def escape_narrative(text: str) -> str:
    """Prefix a backtick to every line starting with ``-`` or ``*``."""
    return _SCRIPT_SYNTAX_LINE.sub(lambda m: "`" + m.group(0), text)


def render_structure_text(structure: Any) -> str | None:
    """Render a raw structure to script text, or None when nothing renders."""
    document = build_document(structure)
    if document is not None:
        rendered = render_document(document)
        return rendered or None

    if structure is not None:
        logger.debug("Structured document unavailable, using legacy renderer")
    return render_legacy_text(structure)


def build_narrative(workout: SourceWorkout) -> str | None:
    parts: list[str] = []
    if workout.description:
        parts.append(escape_narrative(workout.description))
    if workout.coach_comments:
        parts.append(f"{COACH_NOTES_HEADING}\n{escape_narrative(workout.coach_comments)}")
    return "\n\n".join(parts) or None


def build_description(workout: SourceWorkout) -> str:
    """Script first, then narrative under the delimiter.

    Falls back to whichever part exists, and to a fixed placeholder when
    neither does.
    """
    script = render_structure_text(workout.structure)
    narrative = build_narrative(workout)

    if script and narrative:
        return f"{script}\n\n{SCRIPT_DELIMITER}\n{narrative}"
    if script:
        return script
    if narrative:
        return narrative
    return EMPTY_DESCRIPTION_PLACEHOLDER


def build_library_payload(workout: SourceWorkout, folder_id: int | None = None) -> dict[str, Any]:
    """Library-template upload payload (no calendar date)."""
    payload: dict[str, Any] = {
        "category": "WORKOUT",
        "type": map_workout_type_to_sport(workout.workout_type_id).value,
        "name": workout.name,
        "description": build_description(workout),
    }
    if folder_id is not None:
        payload["folder_id"] = folder_id
    if workout.total_time_planned:
        payload["moving_time"] = round_half_up(workout.total_time_planned * 3600)
    if workout.tss_planned:
        payload["icu_training_load"] = workout.tss_planned
    return payload
