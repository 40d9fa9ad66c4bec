"""Convert source workout records to destination formats.

Usage:
    python -m converter_cli.convert workout.json                   # line-script description
    python -m converter_cli.convert workout.json --format nested   # nested-block JSON
    python -m converter_cli.convert workout.json --format payload  # library upload payload
    python -m converter_cli.convert workout.json --signature       # structural signature only

The input file holds one source record or a list of them.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from workout_converter.exceptions import UnsupportedWorkoutError
from workout_converter.line_script import build_description, build_library_payload
from workout_converter.models.enums import TrainingPhase, WorkoutIntensity, WorkoutType
from workout_converter.models.source import SourceWorkout
from workout_converter.nested_block import TransformConfig, transform_workout
from workout_converter.serialization import to_nested_block_json_string

from converter_cli.config import (
    DEFAULT_INTENSITY,
    DEFAULT_PHASES,
    DEFAULT_WORKOUT_TYPE,
    LOG_LEVEL,
    OUTPUT_DIR,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

FORMATS = ("text", "nested", "payload")
_EXTENSIONS = {"text": "txt", "nested": "json", "payload": "json"}


def build_transform_config() -> TransformConfig:
    """TransformConfig from the CONVERTER_DEFAULT_* environment variables.

    Raises:
        ValueError: An override names an unknown type, intensity or phase.
    """
    return TransformConfig(
        default_workout_type=WorkoutType(DEFAULT_WORKOUT_TYPE) if DEFAULT_WORKOUT_TYPE else None,
        default_intensity=WorkoutIntensity(DEFAULT_INTENSITY) if DEFAULT_INTENSITY else None,
        default_suitable_phases=(
            tuple(TrainingPhase(phase) for phase in DEFAULT_PHASES) if DEFAULT_PHASES else None
        ),
    )


def load_workouts(path: Path) -> list[SourceWorkout]:
    """Load one record or a list of records from a JSON file."""
    with open(path) as f:
        raw = json.load(f)
    records = raw if isinstance(raw, list) else [raw]
    return [SourceWorkout.from_dict(record) for record in records if isinstance(record, dict)]


def convert_workout(workout: SourceWorkout, fmt: str, config: TransformConfig) -> str:
    """Render one workout in *fmt*; nested output may raise UnsupportedWorkoutError."""
    if fmt == "text":
        return build_description(workout)
    if fmt == "payload":
        return json.dumps(build_library_payload(workout), indent=2)
    return to_nested_block_json_string(transform_workout(workout, config))


def _save(workout: SourceWorkout, fmt: str, text: str) -> Path:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    path = OUTPUT_DIR / f"workout_{workout.workout_id}.{_EXTENSIONS[fmt]}"
    path.write_text(text + "\n")
    return path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Structured workout converter")
    parser.add_argument("input", type=Path, help="Source workout JSON file")
    parser.add_argument("--format", choices=FORMATS, default="text", help="Output format")
    parser.add_argument("--signature", action="store_true", help="Print structural signatures only")
    parser.add_argument("--save", action="store_true", help="Write outputs to CONVERTER_OUTPUT_DIR")
    args = parser.parse_args(argv)

    try:
        config = build_transform_config()
    except ValueError as exc:
        parser.error(f"invalid CONVERTER_DEFAULT_* setting: {exc}")

    try:
        workouts = load_workouts(args.input)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read %s: %s", args.input, exc)
        return 1

    failures = 0
    for workout in workouts:
        try:
            if args.signature:
                text = transform_workout(workout, config).signature
            else:
                text = convert_workout(workout, args.format, config)
        except UnsupportedWorkoutError as exc:
            logger.error("Cannot convert %r: %s", workout.name, exc)
            failures += 1
            continue

        if args.save:
            logger.info("Wrote %s", _save(workout, args.format, text))
        else:
            print(text)

    logger.info("Converted %d of %d workouts", len(workouts) - failures, len(workouts))
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
