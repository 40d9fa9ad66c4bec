"""Direct source-tree → text renderer, used when the AST path is rejected.

Less strict than the AST builder about tokens: a step renders whatever label,
target and intensity it has. A step whose length does not map to a duration
is dropped here too.
"""

from __future__ import annotations

from typing import Any, Mapping

from workout_converter.line_script.builder import REPETITION_TYPE, intensity_metric_of
from workout_converter.line_script.renderer import (
    format_duration,
    join_blocks,
    normalize_lines,
)
from workout_converter.models.canonical import normalize_intensity_class
from workout_converter.models.enums import IntensityClass
from workout_converter.normalizer import first_numeric_range, get_repetition_count
from workout_converter.normalizer.durations import map_length_to_duration
from workout_converter.normalizer.step import step_label
from workout_converter.normalizer.values import format_range_text

METRIC_SUFFIXES: dict[str, str] = {
    "percentOfFtp": "%",
    "percentOfThresholdPace": "% Pace",
    "percentOfThresholdHr": "% LTHR",
    "percentOfThresholdHeartRate": "% LTHR",
}


def target_suffix(intensity_metric: str | None) -> str:
    if not intensity_metric:
        return ""
    if intensity_metric in METRIC_SUFFIXES:
        return METRIC_SUFFIXES[intensity_metric]
    return "%" if intensity_metric.startswith("percent") else ""


def format_length(length: Any) -> str | None:
    duration = map_length_to_duration(length)
    if duration is None:
        return None
    return format_duration(duration)


def render_simple_step(step: Mapping[str, Any], intensity_metric: str | None) -> list[str]:
    intensity = normalize_intensity_class(step.get("intensityClass"))
    tokens = ["-"]

    label = step_label(step.get("name"), intensity)
    if label:
        tokens.append(label)
    duration = format_length(step.get("length"))
    if duration is None:
        return []
    tokens.append(duration)
    bounds = first_numeric_range(step.get("targets"))
    if bounds is not None:
        tokens.append(format_range_text(*bounds, target_suffix(intensity_metric)))
    if intensity is not None and intensity is not IntensityClass.ACTIVE:
        tokens.append(f"intensity={intensity.value}")

    return [" ".join(tokens)]


def render_block(block: Mapping[str, Any], intensity_metric: str | None) -> list[str]:
    children = block["steps"]
    if not children:
        return []

    if block.get("type") == REPETITION_TYPE:
        lines: list[str] = []
        count = get_repetition_count(block.get("length"))
        if count is not None:
            lines.append(f"{count}x")
        for child in children:
            lines.extend(render_node(child, intensity_metric))
        return lines

    groups = [normalize_lines(render_node(child, intensity_metric)) for child in children]
    return join_blocks(groups).split("\n")


def render_node(node: Any, intensity_metric: str | None) -> list[str]:
    if not isinstance(node, Mapping):
        return []
    if isinstance(node.get("steps"), list):
        return render_block(node, intensity_metric)
    return render_simple_step(node, intensity_metric)


def render_legacy_text(structure: Any) -> str | None:
    """Render a raw structure straight to text; None when nothing renders."""
    if not isinstance(structure, Mapping):
        return None
    nodes = structure.get("structure")
    if not isinstance(nodes, list):
        return None

    metric = intensity_metric_of(structure)
    text = join_blocks(normalize_lines(render_node(node, metric)) for node in nodes)
    return text or None
