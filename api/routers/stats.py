"""
Statistics router.

Dashboard aggregates derived from workout history: totals, weekly
frequency and volume, the activity heatmap, current streak and best
personal records.
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_tracker
from api.errors import tracker_call
from application.tracker import WorkoutTracker

router = APIRouter(
    prefix="/stats",
    tags=["Stats"],
)


@router.get("")
def get_stats(
    today: Optional[date] = Query(None, description="Reference day (defaults to today)"),
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        return tracker.history.stats(today)
