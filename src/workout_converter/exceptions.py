"""Exceptions raised by the workout converter engine."""

from __future__ import annotations


class UnsupportedWorkoutError(ValueError):
    """A workout cannot be expressed in the nested-block destination.

    Raised for an unsupported sport, intensity metric or length metric, or a
    structure that leaves nothing to export.
    """

    def __init__(self, message: str, workout_id: int | None = None) -> None:
        super().__init__(message)
        self.workout_id = workout_id
