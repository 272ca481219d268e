"""
API package for the DreamShape workout tracker.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Mapping of tracker outcomes to HTTP errors
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_auth_client,
    get_tracker,
    build_tracker,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_auth_client",
    # Tracker
    "get_tracker",
    "build_tracker",
]
