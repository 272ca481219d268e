"""
Sync router.

Reports the remote sync indicator and lets a signed-in user re-run the
sign-in sync (migration check plus full pull).
"""
from fastapi import APIRouter, Depends

from api.deps import get_tracker
from api.errors import tracker_call
from application.tracker import WorkoutTracker

router = APIRouter(
    prefix="/sync",
    tags=["Sync"],
)


@router.get("/status")
def get_sync_status(tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        return {
            "signed_in": tracker.state.is_signed_in,
            "remote_enabled": tracker.remote_enabled,
            **tracker.state.sync.as_dict(),
        }


@router.post("/run")
def run_sync(tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        applied = tracker.resync()
        return {"applied": applied, **tracker.state.sync.as_dict()}
