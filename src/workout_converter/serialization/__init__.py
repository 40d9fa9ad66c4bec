"""Serialization module — export nested-block workouts as JSON."""

from workout_converter.serialization.nested_block import (
    structure_to_json,
    to_nested_block_json,
    to_nested_block_json_string,
)

__all__ = ["structure_to_json", "to_nested_block_json", "to_nested_block_json_string"]
