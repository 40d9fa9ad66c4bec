"""Nested-block AST builder.

Copies the source tree for the nested-block destination without flattening
it: each container keeps its type and its child list, transient offsets
(``begin``, ``end``, polylines) are left behind, and every target gains an
explicit type and unit. Steps whose duration is unusable and targets that
cannot be typed are dropped rather than raising; containers left with no
children are dropped with them.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from workout_converter.models.enums import (
    BlockType,
    LengthUnit,
    PrimaryIntensityMetric,
    PrimaryLengthMetric,
    StepIntensity,
)
from workout_converter.models.nested_block import (
    NestedBlock,
    NestedLength,
    NestedNode,
    NestedStep,
    NestedStructure,
    NestedTarget,
)
from workout_converter.nested_block.targets import map_target
from workout_converter.normalizer.durations import LAP_BUTTON_UNIT
from workout_converter.normalizer.values import numeric

logger = logging.getLogger(__name__)

PRIMARY_METRICS: dict[str, PrimaryIntensityMetric] = {
    "percentofftp": PrimaryIntensityMetric.PERCENT_OF_FTP,
    "percentofmaxhr": PrimaryIntensityMetric.HEART_RATE,
    "percentofthresholdhr": PrimaryIntensityMetric.HEART_RATE,
    "percentofthresholdpace": PrimaryIntensityMetric.PERCENT_OF_THRESHOLD_PACE,
    "pace": PrimaryIntensityMetric.PACE,
    "speed": PrimaryIntensityMetric.SPEED,
    "watts": PrimaryIntensityMetric.WATTS,
    "resistance": PrimaryIntensityMetric.RESISTANCE,
}

LENGTH_UNITS: dict[str, LengthUnit] = {
    "second": LengthUnit.SECOND,
    "seconds": LengthUnit.SECOND,
    "minute": LengthUnit.MINUTE,
    "minutes": LengthUnit.MINUTE,
    "hour": LengthUnit.HOUR,
    "hours": LengthUnit.HOUR,
    "meter": LengthUnit.METER,
    "meters": LengthUnit.METER,
    "kilometer": LengthUnit.KILOMETER,
    "kilometers": LengthUnit.KILOMETER,
    "mile": LengthUnit.MILE,
    "miles": LengthUnit.MILE,
    "repetition": LengthUnit.REPETITION,
}

STEP_INTENSITIES = {member.value: member for member in StepIntensity}

# Step name fragment → intensity, checked in order.
_NAME_INTENSITY_HINTS: tuple[tuple[tuple[str, ...], StepIntensity], ...] = (
    (("warm",), StepIntensity.WARM_UP),
    (("cool",), StepIntensity.COOL_DOWN),
    (("recover",), StepIntensity.RECOVERY),
    (("rest", "easy"), StepIntensity.REST),
)

_SINGLE_PASS = NestedLength(LengthUnit.REPETITION, 1)
_NO_LENGTH = NestedLength(LengthUnit.SECOND, 0)


def map_primary_intensity_metric(metric: Any) -> PrimaryIntensityMetric | None:
    if not isinstance(metric, str):
        return None
    return PRIMARY_METRICS.get(metric.strip().lower())


def map_primary_length_metric(metric: Any) -> PrimaryLengthMetric | None:
    try:
        return PrimaryLengthMetric(metric)
    except ValueError:
        return None


def map_step_intensity(intensity_class: Any, name: Any) -> StepIntensity:
    """Keep a recognised source class, else infer one from the step name."""
    if isinstance(intensity_class, str) and intensity_class.strip() in STEP_INTENSITIES:
        return STEP_INTENSITIES[intensity_class.strip()]

    label = name.lower() if isinstance(name, str) else ""
    for fragments, intensity in _NAME_INTENSITY_HINTS:
        if any(fragment in label for fragment in fragments):
            return intensity
    return StepIntensity.ACTIVE


def map_length(length: Any) -> NestedLength | None:
    """Positive-length ``{unit, value}`` in destination units, else None."""
    if not isinstance(length, Mapping):
        return None
    unit = LENGTH_UNITS.get(length.get("unit"))
    value = numeric(length.get("value"))
    if unit is None or value is None or value <= 0:
        return None
    return NestedLength(unit, value)


def build_step(step: Mapping[str, Any], intensity_metric: str | None) -> NestedStep | None:
    """Leaf step → nested step; None when its duration is unusable."""
    raw_length = step.get("length")
    open_duration = step.get("openDuration") or None

    if isinstance(raw_length, Mapping) and raw_length.get("unit") == LAP_BUTTON_UNIT:
        length = _NO_LENGTH
        open_duration = True
    else:
        length = map_length(raw_length)
        if length is None or length.unit is LengthUnit.REPETITION:
            logger.debug("Dropping step %r with unusable length %r", step.get("name"), raw_length)
            return None

    raw_targets = step.get("targets")
    targets: list[NestedTarget] = []
    if isinstance(raw_targets, (list, tuple)):
        for raw in raw_targets:
            mapped = map_target(raw, intensity_metric)
            if mapped is not None:
                targets.append(mapped)

    name = step.get("name")
    return NestedStep(
        name=name if isinstance(name, str) else "",
        intensity_class=map_step_intensity(step.get("intensityClass"), name),
        length=length,
        open_duration=True if open_duration is True else None,
        targets=tuple(targets),
    )


def build_block(block: Mapping[str, Any], intensity_metric: str | None) -> NestedBlock | None:
    """Container → nested block keeping its type; None when nothing survives."""
    children: list[NestedNode] = []
    for child in block["steps"]:
        node = build_node(child, intensity_metric)
        if node is not None:
            children.append(node)
    if not children:
        return None

    block_type = BlockType.REPETITION if block.get("type") == BlockType.REPETITION.value else BlockType.STEP
    length = map_length(block.get("length"))
    if length is None:
        length = _SINGLE_PASS if block_type is BlockType.STEP else _NO_LENGTH
    return NestedBlock(type=block_type, length=length, steps=tuple(children))


def build_node(node: Any, intensity_metric: str | None) -> NestedNode | None:
    if not isinstance(node, Mapping):
        return None
    if isinstance(node.get("steps"), list):
        return build_block(node, intensity_metric)
    return build_step(node, intensity_metric)


def build_structure(structure: Any) -> NestedStructure | None:
    """Build the nested structure; None for unsupported metrics or no content."""
    if not isinstance(structure, Mapping) or not isinstance(structure.get("structure"), list):
        return None

    raw_metric = structure.get("primaryIntensityMetric")
    primary_metric = map_primary_intensity_metric(raw_metric)
    length_metric = map_primary_length_metric(structure.get("primaryLengthMetric"))
    if primary_metric is None or length_metric is None:
        logger.debug(
            "Unsupported structure metrics: intensity=%r length=%r",
            raw_metric, structure.get("primaryLengthMetric"),
        )
        return None

    intensity_metric = raw_metric if isinstance(raw_metric, str) else None
    blocks: list[NestedBlock] = []
    for node in structure["structure"]:
        built = build_node(node, intensity_metric)
        if built is None:
            continue
        if isinstance(built, NestedStep):
            built = NestedBlock(type=BlockType.STEP, length=_SINGLE_PASS, steps=(built,))
        blocks.append(built)

    if not blocks:
        return None
    return NestedStructure(
        primary_intensity_metric=primary_metric,
        primary_length_metric=length_metric,
        structure=tuple(blocks),
    )
