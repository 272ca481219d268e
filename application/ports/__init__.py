"""
Repository Interfaces (Ports) for the DreamShape workout tracker.

This package defines abstract interfaces that decouple application logic from
infrastructure (local file store, Supabase, auth provider). Implementations
are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import KeyValueStore, TemplateRepository

    class SyncService:
        def __init__(self, store: KeyValueStore, templates: TemplateRepository):
            ...
"""

# Local persistence
from application.ports.local_store import KeyValueStore

# Remote persistence
from application.ports.template_repository import TemplateRepository
from application.ports.workout_repository import WorkoutLogRepository
from application.ports.exercises_repository import CustomExerciseRepository
from application.ports.profile_repository import ProfileRepository

# Authentication
from application.ports.auth_gateway import AuthGateway, AuthSession, SignUpResult

__all__ = [
    # Local
    "KeyValueStore",
    # Remote
    "TemplateRepository",
    "WorkoutLogRepository",
    "CustomExerciseRepository",
    "ProfileRepository",
    # Auth
    "AuthGateway",
    "AuthSession",
    "SignUpResult",
]
