"""
Templates router.

Endpoints for listing and editing workout templates. Deleting requires
``confirm=true``; without it the endpoint answers 409 with
``requires_confirmation``.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from api.deps import get_tracker
from api.errors import tracker_call, unwrap
from application.tracker import WorkoutTracker
from domain.models import TemplateExercise, WorkoutTemplate

router = APIRouter(
    prefix="/templates",
    tags=["Templates"],
)


# =============================================================================
# Request Models
# =============================================================================


class TemplateRequest(BaseModel):
    """Body for creating or replacing a template."""
    name: str = Field(..., description="Template name (must not be blank)")
    exercises: List[TemplateExercise] = Field(default_factory=list)
    notes: Optional[str] = None


# =============================================================================
# Endpoints
# =============================================================================


@router.get("")
def list_templates(tracker: WorkoutTracker = Depends(get_tracker)) -> List[WorkoutTemplate]:
    with tracker_call(tracker):
        return tracker.templates.list()


@router.get("/{template_id}")
def get_template(template_id: str, tracker: WorkoutTracker = Depends(get_tracker)) -> WorkoutTemplate:
    with tracker_call(tracker):
        return tracker.templates.get(template_id)


@router.post("", status_code=201)
def create_template(request: TemplateRequest, tracker: WorkoutTracker = Depends(get_tracker)) -> WorkoutTemplate:
    with tracker_call(tracker):
        return unwrap(tracker.templates.create(request.name, request.exercises, request.notes))


@router.put("/{template_id}")
def update_template(
    template_id: str,
    request: TemplateRequest,
    tracker: WorkoutTracker = Depends(get_tracker),
) -> WorkoutTemplate:
    with tracker_call(tracker):
        return unwrap(
            tracker.templates.update(template_id, request.name, request.exercises, request.notes)
        )


@router.delete("/{template_id}")
def delete_template(
    template_id: str,
    confirm: bool = Query(False, description="Confirm the deletion"),
    tracker: WorkoutTracker = Depends(get_tracker),
):
    with tracker_call(tracker):
        template = unwrap(tracker.templates.delete(template_id, confirmed=confirm))
        return {"deleted": template.id}
