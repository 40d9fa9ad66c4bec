"""Line-script AST builder — source structure tree → sectioned document.

Rewrites the source tree recursively into sections without mutating it:

* a leaf step becomes a one-step section;
* a ``repetition`` container becomes one repeat section whose items are all
  descendant steps, flattened (repeat bodies never contain sections);
* any other container passes a lone child section through unchanged, and
  otherwise buffers consecutive non-repeat child items into one section,
  flushing the buffer before every repeat section so a ``Nx`` header always
  opens a fresh section.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from workout_converter.models.enums import SportHint, TargetMode
from workout_converter.models.line_script import (
    LineScriptDocument,
    LineScriptStep,
    Section,
    SectionItem,
)
from workout_converter.normalizer import get_repetition_count, normalize_step

logger = logging.getLogger(__name__)

REPETITION_TYPE = "repetition"


def intensity_metric_of(structure: Mapping[str, Any]) -> str | None:
    metric = structure.get("primaryIntensityMetric")
    return metric if isinstance(metric, str) else None


def build_document(
    structure: Any,
    sport_hint: SportHint | None = None,
) -> LineScriptDocument | None:
    """Build a line-script document from a raw source structure.

    Args:
        structure: The raw ``{"structure": [...], "primaryIntensityMetric": ...}``
            mapping. Anything else yields None.
        sport_hint: Optional sport carried on the document.

    Returns:
        The document, or None when nothing usable was found or the result
        breaks a document invariant.
    """
    if not isinstance(structure, Mapping):
        return None
    nodes = structure.get("structure")
    if not isinstance(nodes, list):
        return None

    metric = intensity_metric_of(structure)
    try:
        sections: list[Section] = []
        for node in nodes:
            sections.extend(build_sections(node, metric))
        if not sections:
            return None
        return LineScriptDocument(sections=tuple(sections), sport_hint=sport_hint)
    except ValueError as exc:
        logger.warning("Line-script document rejected, falling back: %s", exc)
        return None


def build_sections(node: Any, intensity_metric: str | None) -> list[Section]:
    """Rewrite one source node (step or container) into sections."""
    if not isinstance(node, Mapping):
        return []
    if isinstance(node.get("steps"), list):
        return _build_container(node, intensity_metric)

    step = build_step(node, intensity_metric)
    if step is None:
        return []
    return [Section(items=(step,))]


def build_step(node: Mapping[str, Any], intensity_metric: str | None) -> LineScriptStep | None:
    """Leaf step → line-script step; None when the duration is unusable."""
    normalized = normalize_step(node, intensity_metric)
    if normalized is None:
        return None
    return LineScriptStep(
        duration=normalized.duration,
        label=normalized.label,
        target_mode=TargetMode.STEADY,
        targets=normalized.targets,
        intensity_tag=normalized.intensity,
    )


def _build_container(block: Mapping[str, Any], intensity_metric: str | None) -> list[Section]:
    children = block["steps"]
    if not children:
        return []

    if block.get("type") == REPETITION_TYPE:
        items: list[SectionItem] = []
        for child in children:
            for section in build_sections(child, intensity_metric):
                items.extend(section.items)
        if not items:
            return []
        return [Section(
            items=tuple(items),
            repeat_count=get_repetition_count(block.get("length")),
        )]

    child_sections = [build_sections(child, intensity_metric) for child in children]
    child_sections = [sections for sections in child_sections if sections]
    if len(child_sections) == 1 and len(child_sections[0]) == 1:
        return child_sections[0]

    output: list[Section] = []
    buffer: list[SectionItem] = []
    for sections in child_sections:
        if any(section.is_repeat for section in sections):
            if buffer:
                output.append(Section(items=tuple(buffer)))
                buffer = []
            output.extend(sections)
            continue
        for section in sections:
            buffer.extend(section.items)

    if buffer:
        output.append(Section(items=tuple(buffer)))
    return output
