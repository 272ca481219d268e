"""
Active workout router.

Endpoints for the single in-progress session: starting, editing sets and
exercises, rest timers, finishing and cancelling. Exercises and sets are
addressed by their position in the session.
"""
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from api.deps import get_tracker
from api.errors import tracker_call, unwrap
from application.tracker import WorkoutTracker
from application.use_cases.workout_session import FinishOption
from domain.models import CatalogExercise


router = APIRouter(
    prefix="/workout",
    tags=["Workout"],
)


# =============================================================================
# Request Models
# =============================================================================


class StartWorkoutRequest(BaseModel):
    """Start from a template, or an empty workout when template_id is omitted."""
    template_id: Optional[str] = None


class SetUpdateRequest(BaseModel):
    field: Literal["weight", "reps"]
    value: float


class ReorderRequest(BaseModel):
    from_index: int = Field(..., ge=0)
    to_index: int = Field(..., ge=0)


class RestDurationRequest(BaseModel):
    seconds: Optional[int] = Field(None, description="One of 60, 90, 120, 180, 240, 300; None reverts to the default")


class DefaultRestRequest(BaseModel):
    seconds: int = Field(..., description="One of 60, 90, 120, 180, 240, 300")


class NotesRequest(BaseModel):
    notes: Optional[str] = None


class FinishRequest(BaseModel):
    option: FinishOption = FinishOption.JUST_FINISH
    new_template_name: Optional[str] = None
    confirm_overwrite: bool = False


# =============================================================================
# Helpers
# =============================================================================


def _snapshot(tracker: WorkoutTracker) -> dict:
    session = tracker.session
    rest = tracker.state.rest_timer
    return {
        "workout": session.active.model_copy(deep=True) if session.active is not None else None,
        "elapsed_seconds": session.elapsed_seconds(),
        "rest": {
            "exercise_id": rest.exercise_id,
            "duration": rest.duration,
            "remaining": session.rest_remaining(),
        }
        if rest is not None
        else None,
        "default_rest_seconds": tracker.state.default_rest_seconds,
    }


# =============================================================================
# Session lifecycle
# =============================================================================


@router.get("/active")
def get_active_workout(tracker: WorkoutTracker = Depends(get_tracker)):
    """Current session (``workout`` is null when none is active) with its timers."""
    with tracker_call(tracker):
        return _snapshot(tracker)


@router.post("/active", status_code=201)
def start_workout(request: StartWorkoutRequest, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        if request.template_id:
            tracker.session.start_from_template(request.template_id)
        else:
            tracker.session.start_empty()
        return _snapshot(tracker)


@router.delete("/active")
def cancel_workout(
    confirm: bool = Query(False, description="Confirm discarding the session"),
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        unwrap(tracker.session.cancel(confirmed=confirm))
        return {"cancelled": True}


@router.get("/active/changes")
def get_changes(tracker: WorkoutTracker = Depends(get_tracker)):
    """Exercises added/removed versus the source template."""
    with tracker_call(tracker):
        changes = tracker.session.changes()
        return {"added": changes.added, "removed": changes.removed, "has_changes": changes.has_changes}


@router.post("/active/finish")
def finish_workout(request: FinishRequest, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        result = tracker.session.finish(
            request.option,
            new_template_name=request.new_template_name,
            confirm_overwrite=request.confirm_overwrite,
        )
        log = unwrap(result)
        return {"workout": log, "template": result.template}


# =============================================================================
# Sets
# =============================================================================


@router.patch("/active/exercises/{exercise_index}/sets/{set_index}")
def update_set(
    exercise_index: int,
    set_index: int,
    request: SetUpdateRequest,
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        return tracker.session.update_set(exercise_index, set_index, request.field, request.value).model_copy()


@router.post("/active/exercises/{exercise_index}/sets/{set_index}/toggle")
def toggle_set_completed(exercise_index: int, set_index: int, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        tracker.session.toggle_set_completed(exercise_index, set_index)
        return _snapshot(tracker)


@router.post("/active/exercises/{exercise_index}/sets/{set_index}/toggle-type")
def toggle_set_type(exercise_index: int, set_index: int, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        return tracker.session.toggle_set_type(exercise_index, set_index).model_copy()


@router.post("/active/exercises/{exercise_index}/sets", status_code=201)
def add_set(exercise_index: int, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        return tracker.session.add_set(exercise_index).model_copy()


@router.delete("/active/exercises/{exercise_index}/sets/{set_index}")
def remove_set(exercise_index: int, set_index: int, tracker: WorkoutTracker = Depends(get_tracker)):
    """Removing the only set of an exercise is ignored (``removed`` is false)."""
    with tracker_call(tracker):
        return {"removed": tracker.session.remove_set(exercise_index, set_index)}


# =============================================================================
# Exercises
# =============================================================================


@router.post("/active/exercises", status_code=201)
def add_exercise(entry: CatalogExercise, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        known = tracker.catalog.find(entry.name)
        return tracker.session.add_exercise(known or entry).model_copy(deep=True)


@router.delete("/active/exercises/{exercise_index}")
def remove_exercise(
    exercise_index: int,
    confirm: bool = Query(False, description="Confirm removing an exercise with completed sets"),
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        exercise = unwrap(tracker.session.remove_exercise(exercise_index, confirmed=confirm))
        return {"removed": exercise.exercise_name}


@router.post("/active/exercises/reorder")
def reorder_exercises(request: ReorderRequest, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        exercises = tracker.session.reorder_exercises(request.from_index, request.to_index)
        return [ex.exercise_name for ex in exercises]


@router.put("/active/exercises/{exercise_index}/rest")
def set_rest_duration(
    exercise_index: int,
    request: RestDurationRequest,
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        return tracker.session.set_rest_duration(exercise_index, request.seconds).model_copy(deep=True)


@router.put("/active/exercises/{exercise_index}/notes")
def set_exercise_notes(
    exercise_index: int,
    request: NotesRequest,
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        tracker.session.set_exercise_notes(exercise_index, request.notes)
        return _snapshot(tracker)


@router.put("/active/notes")
def set_workout_notes(request: NotesRequest, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        tracker.session.set_workout_notes(request.notes)
        return _snapshot(tracker)


# =============================================================================
# Rest timer
# =============================================================================


@router.put("/rest-default")
def set_default_rest(request: DefaultRestRequest, tracker: WorkoutTracker = Depends(get_tracker)):
    """Default rest countdown for exercises without an override (no active session needed)."""
    with tracker_call(tracker):
        tracker.session.set_default_rest(request.seconds)
        return {"default_rest_seconds": tracker.state.default_rest_seconds}


@router.post("/active/rest/skip")
def skip_rest(tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        tracker.session.skip_rest()
        return _snapshot(tracker)
