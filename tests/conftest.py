"""Shared test fixtures: source structures and workout records."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from builders import make_block, make_repeat, make_step, make_structure
from workout_converter.models.source import SourceWorkout


@pytest.fixture
def interval_structure() -> dict:
    """Warm-up, 3 x (30 s hard / 4 min easy), cool-down on % FTP."""
    return make_structure(
        make_block(make_step("Warm Up", 300, 40, 50, "warmUp"), begin=0, end=300),
        make_repeat(
            3,
            make_step("Hard", 30, 120, 150, "active"),
            make_step("Easy", 240, 50, 60, "rest"),
        ),
        make_block(make_step("Cool Down", 300, 40, 50, "coolDown"), begin=1110, end=1410),
    )


@pytest.fixture
def interval_text() -> str:
    return (
        "- 5m 40-50% intensity=warmup\n"
        "\n"
        "3x\n"
        "- Hard 30s 120-150%\n"
        "- Easy 4m 50-60% intensity=rest\n"
        "\n"
        "- 5m 40-50% intensity=cooldown"
    )


@pytest.fixture
def make_workout(interval_structure) -> Callable[..., SourceWorkout]:
    """Factory for SourceWorkout records; keyword overrides win."""

    def _make(**overrides: Any) -> SourceWorkout:
        defaults: dict[str, Any] = {
            "workout_id": 1234,
            "name": "VO2 Intervals",
            "workout_type_id": 2,
            "description": "Short hard efforts.",
            "coach_comments": "Stay seated.",
            "total_time_planned": 0.5,
            "tss_planned": 40.0,
            "if_planned": 0.88,
            "structure": interval_structure,
        }
        defaults.update(overrides)
        return SourceWorkout(**defaults)

    return _make
