"""
Local persistence adapter.

Serializes the tracker collections to the local key-value store under fixed
keys. Every save is a full-collection overwrite. Every load falls back to an
empty or default value when the stored JSON is missing or malformed; within a
readable collection only the invalid entries are dropped.
"""

import json
import logging
from typing import Any, List, Optional, Type

from pydantic import TypeAdapter, ValidationError

from application.ports import KeyValueStore
from domain.catalog import default_exercises
from domain.models import (
    ActiveWorkout,
    CamelModel,
    CatalogExercise,
    UserProfile,
    WorkoutLog,
    WorkoutTemplate,
)

logger = logging.getLogger(__name__)

TEMPLATES_KEY = "dreamshape_templates"
WORKOUTS_KEY = "dreamshape_workouts"
EXERCISES_KEY = "dreamshape_exercises"
PROFILE_KEY = "dreamshape_profile"
ACTIVE_WORKOUT_KEY = "dreamshape_active_workout"
MIGRATION_KEY_PREFIX = "migration_completed_"

_templates_adapter = TypeAdapter(List[WorkoutTemplate])
_workouts_adapter = TypeAdapter(List[WorkoutLog])
_exercises_adapter = TypeAdapter(List[CatalogExercise])


def migration_key(user_id: str) -> str:
    return f"{MIGRATION_KEY_PREFIX}{user_id}"


class LocalPersistence:
    """
    Typed access to the local store.

    Usage:
        >>> persistence = LocalPersistence(JsonFileStore("~/.dreamshape/store.json"))
        >>> templates = persistence.load_templates()
        >>> persistence.save_templates(templates + [new_template])
    """

    def __init__(self, store: KeyValueStore):
        """
        Args:
            store: Key-value store (injected)
        """
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    # =========================================================================
    # Parsing helpers
    # =========================================================================

    def _load(self, key: str, model: Type[CamelModel], default: Any) -> Any:
        """
        Load a stored collection, dropping only the entries that fail validation.

        Unparseable JSON or a non-list value falls back to ``default``.
        """
        raw = self._store.get(key)
        if raw is None:
            return default
        try:
            items = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Discarding malformed local data under '{key}': {e}")
            return default
        if not isinstance(items, list):
            logger.warning(f"Discarding local data under '{key}': expected a list")
            return default

        entries = []
        for index, item in enumerate(items):
            try:
                entries.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Dropping invalid entry {index} under '{key}': {e}")
        return entries

    def _dump(self, key: str, adapter: TypeAdapter, value: Any) -> None:
        self._store.set(key, adapter.dump_json(value, by_alias=True, exclude_none=True).decode("utf-8"))

    # =========================================================================
    # Collections
    # =========================================================================

    def load_templates(self) -> List[WorkoutTemplate]:
        return self._load(TEMPLATES_KEY, WorkoutTemplate, [])

    def save_templates(self, templates: List[WorkoutTemplate]) -> None:
        self._dump(TEMPLATES_KEY, _templates_adapter, templates)

    def load_workout_logs(self) -> List[WorkoutLog]:
        return self._load(WORKOUTS_KEY, WorkoutLog, [])

    def save_workout_logs(self, logs: List[WorkoutLog]) -> None:
        self._dump(WORKOUTS_KEY, _workouts_adapter, logs)

    def load_exercises(self) -> List[CatalogExercise]:
        """Stored catalog, or the built-in library when nothing valid is stored."""
        exercises = self._load(EXERCISES_KEY, CatalogExercise, None)
        if exercises is None:
            return default_exercises()
        return exercises

    def save_exercises(self, exercises: List[CatalogExercise]) -> None:
        self._dump(EXERCISES_KEY, _exercises_adapter, exercises)

    # =========================================================================
    # Single values
    # =========================================================================

    def load_profile(self) -> Optional[UserProfile]:
        raw = self._store.get(PROFILE_KEY)
        if raw is None:
            return None
        try:
            return UserProfile.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding malformed local profile: {e}")
            return None

    def save_profile(self, profile: UserProfile) -> None:
        self._store.set(PROFILE_KEY, profile.model_dump_json(by_alias=True, exclude_none=True))

    def load_active_workout(self) -> Optional[ActiveWorkout]:
        raw = self._store.get(ACTIVE_WORKOUT_KEY)
        if raw is None:
            return None
        try:
            return ActiveWorkout.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding malformed active workout: {e}")
            return None

    def save_active_workout(self, workout: Optional[ActiveWorkout]) -> None:
        """Persist the in-progress session, or clear it when None."""
        if workout is None:
            self._store.remove(ACTIVE_WORKOUT_KEY)
        else:
            self._store.set(ACTIVE_WORKOUT_KEY, workout.model_dump_json(by_alias=True, exclude_none=True))

    # =========================================================================
    # Migration markers
    # =========================================================================

    def is_migrated(self, user_id: str) -> bool:
        return self._store.get(migration_key(user_id)) == "true"

    def mark_migrated(self, user_id: str) -> None:
        self._store.set(migration_key(user_id), "true")
