"""
History router.

Endpoints for browsing, selecting and deleting completed workout logs.
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from api.deps import get_tracker
from api.errors import tracker_call, unwrap
from application.tracker import WorkoutTracker
from domain.models import WorkoutLog

router = APIRouter(
    prefix="/history",
    tags=["History"],
)


@router.get("")
def list_history(tracker: WorkoutTracker = Depends(get_tracker)) -> List[WorkoutLog]:
    """All workout logs, newest first."""
    with tracker_call(tracker):
        return tracker.history.list()


@router.get("/selected")
def get_selected(tracker: WorkoutTracker = Depends(get_tracker)):
    """The log shown in the detail view (``workout`` is null in the list view)."""
    with tracker_call(tracker):
        return {"workout": tracker.history.selected}


@router.delete("/selected")
def clear_selection(tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        tracker.history.select(None)
        return {"workout": None}


@router.get("/{log_id}")
def get_workout_log(log_id: str, tracker: WorkoutTracker = Depends(get_tracker)) -> WorkoutLog:
    with tracker_call(tracker):
        return tracker.history.get(log_id)


@router.post("/{log_id}/select")
def select_workout_log(log_id: str, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        return {"workout": tracker.history.select(log_id)}


@router.delete("/{log_id}")
def delete_workout_log(
    log_id: str,
    confirm: bool = Query(False, description="Confirm the deletion"),
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        log = unwrap(tracker.history.delete(log_id, confirmed=confirm))
        return {"deleted": log.id}
