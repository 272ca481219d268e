"""
Health check router.

This router provides the liveness endpoint for monitoring.
"""

from fastapi import APIRouter, Depends

from api.deps import get_tracker
from application.tracker import WorkoutTracker

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/health/ready")
def ready(tracker: WorkoutTracker = Depends(get_tracker)):
    """Readiness: the tracker is loaded; reports whether remote sync is available."""
    return {"status": "ok", "remote_enabled": tracker.remote_enabled}
