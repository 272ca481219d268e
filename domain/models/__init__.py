"""
Domain models for the DreamShape workout tracker.

This package contains pure domain models that are independent of
infrastructure concerns (local store, Supabase, HTTP).

These models represent the core concepts:
- CatalogExercise: An entry in the exercise library
- WorkoutTemplate: A named, ordered list of TemplateExercise copies
- ActiveWorkout: The single in-progress session with ExerciseLog entries
- WorkoutLog: The immutable record written when a session finishes
- UserProfile: Display information for the account

Usage:
    >>> from domain.models import WorkoutTemplate, TemplateExercise

    >>> template = WorkoutTemplate(
    ...     name="Push Day",
    ...     exercises=[TemplateExercise(name="Bench Press (Barbell)")],
    ... )

    >>> # Serialize with camelCase keys, as persisted
    >>> data = template.to_json_dict()

    >>> # Deserialize from either spelling
    >>> template = WorkoutTemplate.model_validate(data)
"""

from domain.models.base import CamelModel, new_id
from domain.models.exercise import CatalogExercise, TemplateExercise
from domain.models.profile import DEFAULT_PROFILE_NAME, ProfileRole, UserProfile
from domain.models.template import WorkoutTemplate
from domain.models.workout import (
    ActiveWorkout,
    ActivityType,
    ExerciseLog,
    SetType,
    WorkoutLog,
    WorkoutSet,
)

__all__ = [
    "CamelModel",
    "new_id",
    "CatalogExercise",
    "TemplateExercise",
    "WorkoutTemplate",
    "SetType",
    "ActivityType",
    "WorkoutSet",
    "ExerciseLog",
    "ActiveWorkout",
    "WorkoutLog",
    "DEFAULT_PROFILE_NAME",
    "ProfileRole",
    "UserProfile",
]
