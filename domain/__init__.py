"""
Domain layer for the DreamShape workout tracker.

This package contains pure domain models, the built-in exercise library and
history statistics. Nothing here touches the local store, Supabase or HTTP.
"""

from domain.models import (
    ActiveWorkout,
    CatalogExercise,
    ExerciseLog,
    TemplateExercise,
    UserProfile,
    WorkoutLog,
    WorkoutSet,
    WorkoutTemplate,
)

__all__ = [
    "ActiveWorkout",
    "CatalogExercise",
    "ExerciseLog",
    "TemplateExercise",
    "UserProfile",
    "WorkoutLog",
    "WorkoutSet",
    "WorkoutTemplate",
]
