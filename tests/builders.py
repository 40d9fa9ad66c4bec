"""Builders for raw source workout structures used across the test suite."""

from __future__ import annotations

from typing import Any

def make_step(
    name: str,
    seconds: float,
    low: float | None = None,
    high: float | None = None,
    intensity: str = "active",
    **extra: Any,
) -> dict:
    """A raw leaf step lasting *seconds* with an optional low-high target."""
    step: dict[str, Any] = {
        "name": name,
        "length": {"unit": "second", "value": seconds},
        "targets": [],
        "intensityClass": intensity,
        "openDuration": False,
    }
    if low is not None:
        step["targets"] = [{"minValue": low, "maxValue": high if high is not None else low}]
    step.update(extra)
    return step


def make_block(*steps: dict, begin: int = 0, end: int = 0) -> dict:
    """A single-pass ``step`` container, as the source wraps plain steps."""
    return {
        "type": "step",
        "length": {"unit": "repetition", "value": 1},
        "steps": list(steps),
        "begin": begin,
        "end": end,
    }


def make_repeat(count: float, *steps: dict) -> dict:
    return {
        "type": "repetition",
        "length": {"unit": "repetition", "value": count},
        "steps": list(steps),
        "begin": 300,
        "end": 1110,
    }


def make_structure(*blocks: dict, metric: str = "percentOfFtp", length_metric: str = "duration") -> dict:
    return {
        "structure": list(blocks),
        "primaryIntensityMetric": metric,
        "primaryLengthMetric": length_metric,
        "polyline": [[0, 0], [1, 1]],
    }
