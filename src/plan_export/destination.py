"""Collaborator interfaces consumed by the export flows.

Implementations own the network, authentication and persistence; the flows
only call these methods, one at a time. Every method signals failure by
raising an ``ExportError`` subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence


class PlanDestination(ABC):
    """Destination for a multi-week training-plan export."""

    @abstractmethod
    def resolve_library(self, name: str, source_id: str) -> Mapping[str, Any]:
        """Return the shared workout library (``{"id", "name"}``), creating it if needed."""
        ...

    @abstractmethod
    def find_workout_by_signature(self, library_id: str, signature: str) -> str | None:
        """Key of an existing workout carrying *signature*, or None."""
        ...

    @abstractmethod
    def upload_workout(self, library_id: str, payload: Mapping[str, Any]) -> str:
        """Upload one workout and return its destination key."""
        ...

    @abstractmethod
    def create_training_plan(self, payload: Mapping[str, Any]) -> str:
        """Create the plan and return its id."""
        ...

    @abstractmethod
    def create_plan_note(self, plan_id: str, payload: Mapping[str, Any]) -> None:
        ...


class LibraryDestination(ABC):
    """Destination for per-library workout uploads."""

    @abstractmethod
    def upload_workouts(self, library_name: str, payloads: Sequence[Mapping[str, Any]]) -> int:
        """Upload a batch into *library_name*; returns the number accepted."""
        ...
