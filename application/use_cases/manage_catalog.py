"""
Exercise catalog use case.

The catalog starts from the built-in library. Users may add entries (names
are unique case-insensitively) and remove entries by exact name.
"""

import logging
from typing import List, Optional

from application.exceptions import NotFoundError
from application.use_cases.base import ActionResult, TrackerService
from domain import catalog
from domain.models import CatalogExercise

logger = logging.getLogger(__name__)

ALL_MUSCLE_GROUPS = "All"


class ExerciseCatalogService(TrackerService):
    """Use case for browsing and editing the exercise library."""

    def list(self) -> List[CatalogExercise]:
        return list(self._state.exercises)

    def find(self, name: str) -> Optional[CatalogExercise]:
        return catalog.find(self._state.exercises, name)

    def filter(self, query: str = "", muscle_group: Optional[str] = None) -> List[CatalogExercise]:
        """Case-insensitive name search, optionally restricted to one muscle group."""
        needle = (query or "").strip().lower()
        results = []
        for entry in self._state.exercises:
            if muscle_group and muscle_group != ALL_MUSCLE_GROUPS and entry.muscle_group != muscle_group:
                continue
            if needle and needle not in entry.name.lower():
                continue
            results.append(entry)
        return results

    def muscle_groups(self) -> List[str]:
        return catalog.muscle_groups(self._state.exercises)

    def custom_entries(self) -> List[CatalogExercise]:
        return catalog.custom_entries(self._state.exercises)

    def add(self, entry: CatalogExercise) -> ActionResult:
        if not entry.name:
            return ActionResult.rejected("Exercise name is required")
        if catalog.find(self._state.exercises, entry.name) is not None:
            return ActionResult.rejected(f'Exercise "{entry.name}" already exists')

        self._state.exercises.append(entry)
        self._persistence.save_exercises(self._state.exercises)
        self._pusher.push("create_custom_exercise", entry)

        logger.info(f"Exercise added to catalog: {entry.name}")
        return ActionResult.ok(entry)

    def remove(self, name: str, confirmed: bool = False) -> ActionResult:
        entry = next((e for e in self._state.exercises if e.name == name), None)
        if entry is None:
            raise NotFoundError(f'Exercise "{name}" not found')
        if not confirmed:
            return ActionResult.needs_confirmation(f'Delete "{name}" from your exercise library?')

        self._state.exercises.remove(entry)
        self._persistence.save_exercises(self._state.exercises)
        self._pusher.push("delete_custom_exercise", entry.name)

        logger.info(f"Exercise removed from catalog: {entry.name}")
        return ActionResult.ok(entry)
