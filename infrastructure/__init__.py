"""
Infrastructure Layer for the DreamShape workout tracker.

This package contains concrete implementations of the application ports:
- local/: the JSON file key-value store
- db/: Supabase repositories and the Supabase Auth gateway
"""

from infrastructure.local import JsonFileStore
from infrastructure.db import (
    SupabaseTemplateRepository,
    SupabaseWorkoutLogRepository,
    SupabaseCustomExerciseRepository,
    SupabaseProfileRepository,
    SupabaseAuthGateway,
)

__all__ = [
    "JsonFileStore",
    "SupabaseTemplateRepository",
    "SupabaseWorkoutLogRepository",
    "SupabaseCustomExerciseRepository",
    "SupabaseProfileRepository",
    "SupabaseAuthGateway",
]
