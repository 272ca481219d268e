"""
FastAPI Dependency Providers for the DreamShape API.

Architecture:
- Settings and Supabase clients are cached per-process (lru_cache)
- The WorkoutTracker is a per-process singleton: one process is one
  browsing context with one local store
- Routers receive the tracker through get_tracker and hold tracker.lock
  around every call (see api.errors.tracker_call)

Usage in routers:
    from api.deps import get_tracker

    @router.get("/templates")
    def list_templates(tracker: WorkoutTracker = Depends(get_tracker)):
        with tracker_call(tracker):
            return tracker.templates.list()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_tracker] = lambda: tracker_with_fakes
"""

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, create_client

from application.local_persistence import LocalPersistence
from application.remote_pusher import RemotePusher
from application.tracker import WorkoutTracker
from application.use_cases.authenticate import AuthService
from application.use_cases.sync_data import RemoteRepositories

# Concrete implementations
from infrastructure import (
    JsonFileStore,
    SupabaseAuthGateway,
    SupabaseCustomExerciseRepository,
    SupabaseProfileRepository,
    SupabaseTemplateRepository,
    SupabaseWorkoutLogRepository,
)

# Settings
from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Providers
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns None if credentials are not configured, which disables remote
    sync entirely.
    """
    settings = _get_settings()

    if not settings.remote_enabled:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


@lru_cache
def get_supabase_auth_client() -> Optional[Client]:
    """Separate client for auth flows so sessions never touch the data client."""
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_auth_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_auth_key)


def build_remote_repositories(client: Client) -> RemoteRepositories:
    return RemoteRepositories(
        templates=SupabaseTemplateRepository(client),
        workouts=SupabaseWorkoutLogRepository(client),
        exercises=SupabaseCustomExerciseRepository(client),
        profiles=SupabaseProfileRepository(client),
    )


# =============================================================================
# Tracker Provider
# =============================================================================


def build_tracker(
    settings: Settings,
    client: Optional[Client] = None,
    auth_client: Optional[Client] = None,
) -> WorkoutTracker:
    """
    Create and load a WorkoutTracker from settings.

    Args:
        settings: Application settings
        client: Supabase data client; remote sync is disabled when None
        auth_client: Supabase client used for sign-up/sign-in

    Returns:
        A tracker populated from the local store
    """
    persistence = LocalPersistence(JsonFileStore(settings.local_store_path))
    remote_repos = build_remote_repositories(client) if client is not None else None
    auth = None
    if auth_client is not None:
        auth = AuthService(
            SupabaseAuthGateway(auth_client),
            invite_code=settings.signup_invite_code,
            creator_emails=settings.creator_emails_list,
        )

    tracker = WorkoutTracker(
        persistence,
        pusher=RemotePusher(max_workers=settings.remote_push_workers),
        remote_repos=remote_repos,
        auth=auth,
        default_rest_seconds=settings.default_rest_seconds,
    )
    tracker.load()
    if remote_repos is None:
        logger.info("Supabase not configured, running local-only")
    return tracker


@lru_cache
def get_tracker() -> WorkoutTracker:
    """Get the process-wide WorkoutTracker (created on first use)."""
    return build_tracker(_get_settings(), get_supabase_client(), get_supabase_auth_client())
