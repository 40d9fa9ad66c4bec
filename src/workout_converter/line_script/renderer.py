"""Line-script text renderer.

Turns a ``LineScriptDocument`` into newline-separated workout-builder text::

    - 10m 50-60% intensity=warmup

    3x
    - Hard 30s 120-150%
    - Easy 4m 50-60% intensity=rest

    - 10m 50% intensity=cooldown

Sections are joined with a blank line only when one of the two neighbours
opens with a ``Nx`` repeat header; plain sections run straight on.
"""

from __future__ import annotations

import re
from typing import Iterable

from workout_converter.models.canonical import (
    AbsolutePaceTarget,
    CadenceTarget,
    DistanceDuration,
    Duration,
    FreeTextTarget,
    NumericRange,
    NumericTarget,
    PressLap,
    Target,
    TargetValue,
    TimeDuration,
    ZoneTarget,
)
from workout_converter.models.enums import (
    DistanceUnit,
    IntensityClass,
    TargetKind,
    TargetMode,
    TimeUnit,
    ZoneMetric,
)
from workout_converter.models.line_script import (
    LineScriptDocument,
    LineScriptStep,
    Section,
    SectionItem,
    TextLine,
)
from workout_converter.normalizer.values import round_half_up, trim_decimal

REPEAT_HEADER = re.compile(r"^\d+x$")

TARGET_SUFFIXES: dict[TargetKind, str] = {
    TargetKind.POWER_PERCENT_FTP: "%",
    TargetKind.POWER_WATTS: "w",
    TargetKind.PACE_PERCENT_THRESHOLD: "% Pace",
    TargetKind.HR_PERCENT_MAX: "% HR",
    TargetKind.HR_PERCENT_LTHR: "% LTHR",
    TargetKind.CADENCE_RPM: "rpm",
}

DISTANCE_SUFFIXES: dict[DistanceUnit, str] = {
    DistanceUnit.METERS: "m",
    DistanceUnit.KILOMETERS: "km",
    DistanceUnit.YARDS: "yd",
    DistanceUnit.MILES: "mi",
}

ZONE_SUFFIXES: dict[ZoneMetric, str] = {
    ZoneMetric.POWER: "",
    ZoneMetric.HEART_RATE: " HR",
    ZoneMetric.PACE: " Pace",
}

__all__ = [
    "format_duration",
    "format_seconds",
    "format_target",
    "normalize_lines",
    "render_document",
    "render_section",
    "render_step",
    "trim_decimal",
]


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


def format_seconds(seconds: float) -> str:
    """Whole hours or minutes when the rounded seconds divide evenly."""
    total = round_half_up(seconds)
    if total <= 0:
        return "0s"
    if total % 3600 == 0:
        return f"{total // 3600}h"
    if total % 60 == 0:
        return f"{total // 60}m"
    return f"{total}s"


def format_duration(duration: Duration) -> str:
    if isinstance(duration, PressLap):
        return "lap"
    if isinstance(duration, TimeDuration):
        if duration.unit is TimeUnit.SECONDS:
            return format_seconds(duration.value)
        if duration.unit is TimeUnit.MINUTES:
            return f"{trim_decimal(duration.value)}m"
        return f"{trim_decimal(duration.value)}h"
    if isinstance(duration, DistanceDuration):
        return f"{trim_decimal(duration.value)}{DISTANCE_SUFFIXES[duration.unit]}"
    raise TypeError(f"Unknown duration variant: {duration!r}")


def format_target_value(value: TargetValue, suffix: str = "") -> str:
    if isinstance(value, NumericRange):
        if value.is_point:
            return f"{trim_decimal(value.min)}{suffix}"
        return f"{trim_decimal(value.min)}-{trim_decimal(value.max)}{suffix}"
    return f"{trim_decimal(value)}{suffix}"


def format_target(target: Target) -> str:
    if isinstance(target, NumericTarget):
        return format_target_value(target.value, TARGET_SUFFIXES[target.kind])
    if isinstance(target, CadenceTarget):
        return format_target_value(target.value, TARGET_SUFFIXES[TargetKind.CADENCE_RPM])
    if isinstance(target, AbsolutePaceTarget):
        return f"{format_target_value(target.value)} Pace /{target.denominator_unit.value}"
    if isinstance(target, ZoneTarget):
        return f"{target.zone.upper()}{ZONE_SUFFIXES[target.metric]}"
    if isinstance(target, FreeTextTarget):
        return target.text
    raise TypeError(f"Unknown target variant: {target!r}")


# ---------------------------------------------------------------------------
# Lines and sections
# ---------------------------------------------------------------------------


def render_step(step: LineScriptStep) -> str:
    tokens = ["-"]
    if step.label:
        tokens.append(step.label)
    tokens.append(format_duration(step.duration))
    if step.target_mode is TargetMode.RAMP:
        tokens.append("ramp")
    tokens.extend(format_target(target) for target in step.targets)
    if step.intensity_tag is not None and step.intensity_tag is not IntensityClass.ACTIVE:
        tokens.append(f"intensity={step.intensity_tag.value}")
    return " ".join(tokens)


def render_item(item: SectionItem) -> str:
    if isinstance(item, TextLine):
        return item.text
    return render_step(item)


def render_section(section: Section) -> str:
    lines: list[str] = []
    if section.heading:
        lines.append(section.heading)
    if section.repeat_count is not None:
        lines.append(f"{section.repeat_count}x")
    lines.extend(render_item(item) for item in section.items)
    return normalize_lines(lines)


def normalize_lines(lines: Iterable[str]) -> str:
    """Right-trim lines, collapse blank runs to one, drop outer blanks."""
    compact: list[str] = []
    for line in lines:
        line = line.rstrip()
        if not line.strip():
            if compact and compact[-1] != "":
                compact.append("")
            continue
        compact.append(line)
    while compact and compact[-1] == "":
        compact.pop()
    return "\n".join(compact)


def opens_with_repeat_header(text: str) -> bool:
    for line in text.splitlines():
        if line.strip():
            return bool(REPEAT_HEADER.match(line.strip()))
    return False


def join_blocks(blocks: Iterable[str]) -> str:
    """Join rendered blocks, separating repeat-headed neighbours by a blank line."""
    output: list[str] = []
    previous: str | None = None
    for block in blocks:
        if not block:
            continue
        if previous is not None:
            separate = opens_with_repeat_header(previous) or opens_with_repeat_header(block)
            output.append("\n\n" if separate else "\n")
        output.append(block)
        previous = block
    return normalize_lines("".join(output).split("\n"))


def render_document(document: LineScriptDocument) -> str:
    """Render a whole document; pure, so equal documents give equal text."""
    return join_blocks(render_section(section) for section in document.sections)
