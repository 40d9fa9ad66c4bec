"""Small numeric helpers shared by the normalizers."""

from __future__ import annotations

import math
from typing import Any


def numeric(value: Any) -> float | None:
    """Return *value* if it is a finite real number, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if math.isfinite(value) else None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives (2.5 → 3)."""
    return math.floor(value + 0.5)


def trim_decimal(value: float) -> str:
    """Shortest text for a number: ``5.0`` → ``"5"``, ``2.5`` → ``"2.5"``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_range_text(low: float, high: float, suffix: str = "") -> str:
    """``"low-high<suffix>"``, collapsing to one number when the bounds match."""
    if low == high:
        return f"{trim_decimal(low)}{suffix}"
    return f"{trim_decimal(low)}-{trim_decimal(high)}{suffix}"
