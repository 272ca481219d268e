"""
Router package for the DreamShape API.

This package contains all API routers organized by domain:
- health: Liveness and readiness endpoints
- templates: Workout template CRUD
- exercises: Exercise library search and custom entries
- workout: The active workout session
- history: Completed workout logs
- stats: Dashboard statistics
- profile: Profile and lifetime summary
- auth: Sign-up, sign-in and sign-out
- sync: Remote sync status and manual re-sync
- exports: JSON backup download
"""

from api.routers.health import router as health_router
from api.routers.templates import router as templates_router
from api.routers.exercises import router as exercises_router
from api.routers.workout import router as workout_router
from api.routers.history import router as history_router
from api.routers.stats import router as stats_router
from api.routers.profile import router as profile_router
from api.routers.auth import router as auth_router
from api.routers.sync import router as sync_router
from api.routers.exports import router as exports_router

__all__ = [
    "health_router",
    "templates_router",
    "exercises_router",
    "workout_router",
    "history_router",
    "stats_router",
    "profile_router",
    "auth_router",
    "sync_router",
    "exports_router",
]
