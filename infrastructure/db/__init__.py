"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the remote ports
defined in application.ports. Repositories take an injected client so they
can be exercised with a mocked client in tests.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseTemplateRepository,
        SupabaseWorkoutLogRepository,
        SupabaseCustomExerciseRepository,
        SupabaseProfileRepository,
        SupabaseAuthGateway,
    )

    client = create_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)

    template_repo = SupabaseTemplateRepository(client)
    workout_repo = SupabaseWorkoutLogRepository(client)
    exercise_repo = SupabaseCustomExerciseRepository(client)
    profile_repo = SupabaseProfileRepository(client)
    auth = SupabaseAuthGateway(create_client(SUPABASE_URL, SUPABASE_ANON_KEY))
"""

from infrastructure.db.template_repository import SupabaseTemplateRepository
from infrastructure.db.workout_repository import SupabaseWorkoutLogRepository
from infrastructure.db.exercises_repository import SupabaseCustomExerciseRepository
from infrastructure.db.profile_repository import SupabaseProfileRepository
from infrastructure.db.auth_gateway import SupabaseAuthGateway

__all__ = [
    # Templates
    "SupabaseTemplateRepository",

    # Workout history
    "SupabaseWorkoutLogRepository",

    # Custom catalog entries
    "SupabaseCustomExerciseRepository",

    # Profiles
    "SupabaseProfileRepository",

    # Auth
    "SupabaseAuthGateway",
]
