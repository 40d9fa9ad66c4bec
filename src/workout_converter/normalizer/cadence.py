"""Secondary cadence (RPM) target detection.

Source records spell cadence in several ways, none of them guaranteed. The
detection is a heuristic expressed as an ordered tuple of rules in
``CADENCE_RULES``; the first rule that yields a target wins. New source
field spellings are supported by appending a rule.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from workout_converter.models.canonical import CadenceTarget, NumericRange
from workout_converter.normalizer.values import numeric, round_half_up

FLAT_CADENCE_KEYS = ("cadenceRpm", "cadenceTargetRpm", "targetCadenceRpm")
SECONDARY_TARGET_KEYS = ("secondaryTargets", "secondary_targets")

# Keys whose mere presence marks an object as cadence-shaped.
_CADENCE_MARKER_KEYS = ("cadenceRpm", "minRpm", "maxRpm", "rpm")
# Text fields searched for "cadence" / "rpm".
_CADENCE_TEXT_FIELDS = ("type", "metric", "unit", "name")


def _first_numeric(record: Mapping[str, Any], *keys: str) -> float | None:
    for key in keys:
        value = numeric(record.get(key))
        if value is not None:
            return value
    return None


def _looks_like_cadence(record: Mapping[str, Any]) -> bool:
    text = " ".join(
        record[f] for f in _CADENCE_TEXT_FIELDS if isinstance(record.get(f), str)
    ).lower()
    if "cadence" in text or "rpm" in text:
        return True
    return any(key in record for key in _CADENCE_MARKER_KEYS)


def cadence_from_object(value: Any) -> CadenceTarget | None:
    """Read a cadence target out of one cadence-shaped object.

    A min/max pair wins over an exact value. Bounds round to integers and
    are ordered ``min <= max``.
    """
    if not isinstance(value, Mapping) or not _looks_like_cadence(value):
        return None

    exact = _first_numeric(value, "rpm", "cadenceRpm", "value")
    low = _first_numeric(value, "minRpm", "min", "minValue")
    high = _first_numeric(value, "maxRpm", "max", "maxValue")

    try:
        if low is not None or high is not None:
            low = low if low is not None else high
            high = high if high is not None else low
            return CadenceTarget(NumericRange(
                round_half_up(min(low, high)),
                round_half_up(max(low, high)),
            ))
        if exact is not None:
            return CadenceTarget(round_half_up(exact))
    except ValueError:
        return None
    return None


# ---------------------------------------------------------------------------
# Rules, in priority order
# ---------------------------------------------------------------------------


def _from_nested_cadence(step: Mapping[str, Any]) -> CadenceTarget | None:
    return cadence_from_object(step.get("cadence"))


def _from_flat_aliases(step: Mapping[str, Any]) -> CadenceTarget | None:
    for key in FLAT_CADENCE_KEYS:
        value = numeric(step.get(key))
        if value is not None:
            try:
                return CadenceTarget(round_half_up(value))
            except ValueError:
                return None
    return None


def _from_secondary_targets(step: Mapping[str, Any]) -> CadenceTarget | None:
    for key in SECONDARY_TARGET_KEYS:
        entries = step.get(key)
        if not isinstance(entries, (list, tuple)):
            continue
        for entry in entries:
            found = cadence_from_object(entry)
            if found is not None:
                return found
    return None


CadenceRule = Callable[[Mapping[str, Any]], Optional[CadenceTarget]]

CADENCE_RULES: tuple[CadenceRule, ...] = (
    _from_nested_cadence,
    _from_flat_aliases,
    _from_secondary_targets,
)


def extract_cadence_target(step: Any) -> CadenceTarget | None:
    """Return the step's cadence target from the first matching rule."""
    if not isinstance(step, Mapping):
        return None
    for rule in CADENCE_RULES:
        found = rule(step)
        if found is not None:
            return found
    return None
