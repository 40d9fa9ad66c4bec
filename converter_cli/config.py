"""Environment-variable-based configuration for the converter CLI."""

from __future__ import annotations

import os
from pathlib import Path

LOG_LEVEL: str = os.environ.get("CONVERTER_LOG_LEVEL", "INFO").upper()
OUTPUT_DIR: Path = Path(os.environ.get("CONVERTER_OUTPUT_DIR", "exports")).expanduser()

# Metadata overrides for nested-block output; empty means infer from IF.
DEFAULT_WORKOUT_TYPE: str = os.environ.get("CONVERTER_DEFAULT_WORKOUT_TYPE", "")
DEFAULT_INTENSITY: str = os.environ.get("CONVERTER_DEFAULT_INTENSITY", "")
DEFAULT_PHASES: tuple[str, ...] = tuple(
    phase.strip()
    for phase in os.environ.get("CONVERTER_DEFAULT_PHASES", "").split(",")
    if phase.strip()
)
