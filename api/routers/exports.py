"""
Export router.

Downloads a JSON backup of workout history and profile.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import get_tracker
from api.errors import tracker_call
from application.tracker import WorkoutTracker

router = APIRouter(
    tags=["Export"],
)


@router.get("/export")
def export_backup(tracker: WorkoutTracker = Depends(get_tracker)):
    """
    Backup as a JSON attachment named dreamshape-backup-YYYY-MM-DD.json.

    Payload: ``{"workouts": [...], "profile": {...}, "exportedAt": iso}``
    """
    with tracker_call(tracker):
        export = tracker.export()
    return JSONResponse(
        content=export.payload,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
