"""
Profile router.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.deps import get_tracker
from api.errors import tracker_call, unwrap
from application.tracker import WorkoutTracker

router = APIRouter(
    prefix="/profile",
    tags=["Profile"],
)


class ProfileUpdateRequest(BaseModel):
    name: str = Field(..., description="Display name (must not be blank)")


@router.get("")
def get_profile(tracker: WorkoutTracker = Depends(get_tracker)):
    """Profile plus lifetime totals and goal progress."""
    with tracker_call(tracker):
        return {
            "profile": tracker.profile.get(),
            "summary": tracker.history.profile_summary(),
        }


@router.put("")
def update_profile(request: ProfileUpdateRequest, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        return {"profile": unwrap(tracker.profile.update(request.name))}
