"""Line-script destination: AST builder, text renderer and descriptions."""

from workout_converter.line_script.builder import build_document, build_sections
from workout_converter.line_script.description import (
    build_description,
    build_library_payload,
    escape_narrative,
    render_structure_text,
)
from workout_converter.line_script.legacy import render_legacy_text
from workout_converter.line_script.renderer import (
    format_duration,
    format_seconds,
    format_target,
    render_document,
    render_section,
    render_step,
    trim_decimal,
)
from workout_converter.line_script.sports import map_workout_type_to_sport

__all__ = [
    "build_description",
    "build_document",
    "build_library_payload",
    "build_sections",
    "escape_narrative",
    "format_duration",
    "format_seconds",
    "format_target",
    "map_workout_type_to_sport",
    "render_document",
    "render_legacy_text",
    "render_section",
    "render_step",
    "render_structure_text",
    "trim_decimal",
]
