"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No file system, database or network is
required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Deterministic clock, tickers and a synchronous push executor

Usage:
    from tests.fakes import FakeTemplateRepository, create_remote_repositories

    repos = create_remote_repositories()
    repos.templates.seed("user-1", [template])
"""
from domain.models import UserProfile

from application.use_cases.sync_data import RemoteRepositories

from tests.fakes.local_store import FakeKeyValueStore
from tests.fakes.template_repository import FakeTemplateRepository
from tests.fakes.workout_repository import FakeWorkoutLogRepository
from tests.fakes.exercises_repository import FakeCustomExerciseRepository
from tests.fakes.profile_repository import FakeProfileRepository
from tests.fakes.auth_gateway import FakeAuthGateway
from tests.fakes.runtime import FakeClock, ImmediateExecutor, ManualTicker, ManualTickerFactory


# =============================================================================
# Factory Functions
# =============================================================================


def create_remote_repositories() -> RemoteRepositories:
    """RemoteRepositories backed entirely by in-memory fakes."""
    return RemoteRepositories(
        templates=FakeTemplateRepository(),
        workouts=FakeWorkoutLogRepository(),
        exercises=FakeCustomExerciseRepository(),
        profiles=FakeProfileRepository(),
    )


def create_account(
    gateway: FakeAuthGateway,
    repos: RemoteRepositories,
    *,
    email: str = "athlete@example.com",
    password: str = "secret",
    user_id: str = "user-1",
    name: str = "Remote Athlete",
) -> str:
    """Register an account and the profile row the database would create."""
    gateway.seed(email, password, user_id=user_id)
    repos.profiles.seed(user_id, UserProfile(name=name, member_since="2024-01-01"))
    return user_id


__all__ = [
    # Local
    "FakeKeyValueStore",
    # Remote
    "FakeTemplateRepository",
    "FakeWorkoutLogRepository",
    "FakeCustomExerciseRepository",
    "FakeProfileRepository",
    "FakeAuthGateway",
    # Runtime
    "FakeClock",
    "ManualTicker",
    "ManualTickerFactory",
    "ImmediateExecutor",
    # Factories
    "create_remote_repositories",
    "create_account",
]
