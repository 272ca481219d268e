"""
Exercises router for the exercise library.

This router provides endpoints for:
- Searching the catalog by name and muscle group
- Adding and removing custom entries
- Per-exercise progression and personal record
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from api.deps import get_tracker
from api.errors import tracker_call, unwrap
from application.tracker import WorkoutTracker
from domain.models import CatalogExercise

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.get("")
def list_exercises(
    q: str = Query("", description="Case-insensitive name search"),
    muscle_group: Optional[str] = Query(None, description='Muscle group filter ("All" for any)'),
    tracker: WorkoutTracker = Depends(get_tracker),
) -> List[CatalogExercise]:
    with tracker_call(tracker):
        return tracker.catalog.filter(q, muscle_group)


@router.get("/muscle-groups")
def list_muscle_groups(tracker: WorkoutTracker = Depends(get_tracker)) -> List[str]:
    with tracker_call(tracker):
        return tracker.catalog.muscle_groups()


@router.get("/custom")
def list_custom_exercises(tracker: WorkoutTracker = Depends(get_tracker)) -> List[CatalogExercise]:
    with tracker_call(tracker):
        return tracker.catalog.custom_entries()


@router.post("", status_code=201)
def add_exercise(entry: CatalogExercise, tracker: WorkoutTracker = Depends(get_tracker)) -> CatalogExercise:
    with tracker_call(tracker):
        return unwrap(tracker.catalog.add(entry))


@router.delete("/{name}")
def remove_exercise(
    name: str = Path(..., description="Exact exercise name"),
    confirm: bool = Query(False, description="Confirm the removal"),
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        entry = unwrap(tracker.catalog.remove(name, confirmed=confirm))
        return {"deleted": entry.name}


@router.get("/{name}/history")
def exercise_history(name: str, tracker: WorkoutTracker = Depends(get_tracker)):
    """Progression across sessions (oldest first) and the all-time heaviest set."""
    with tracker_call(tracker):
        return {
            "exercise_name": name,
            "personal_record": tracker.history.personal_record(name),
            "sessions": tracker.history.exercise_history(name),
        }
