"""Source workout type id → line-script sport name."""

from __future__ import annotations

from workout_converter.models.enums import SportHint

# Scoped to the line-script destination; the nested-block destination keeps
# its own table in ``nested_block.transformer``.
SOURCE_TYPE_TO_SPORT: dict[int, SportHint] = {
    1: SportHint.SWIM,
    2: SportHint.RIDE,
    3: SportHint.RUN,
    4: SportHint.OTHER,            # Brick
    5: SportHint.OTHER,            # Crosstrain
    6: SportHint.OTHER,            # Race, sport unknown
    7: SportHint.OTHER,            # Day off
    8: SportHint.RIDE,             # Mountain bike
    9: SportHint.WEIGHT_TRAINING,
    10: SportHint.OTHER,           # Custom
    11: SportHint.NORDIC_SKI,
    12: SportHint.ROWING,
    13: SportHint.WALK,
    29: SportHint.WEIGHT_TRAINING,  # Duplicate strength type
    100: SportHint.OTHER,
}


def map_workout_type_to_sport(workout_type_id: int) -> SportHint:
    return SOURCE_TYPE_TO_SPORT.get(workout_type_id, SportHint.OTHER)
