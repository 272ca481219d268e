"""
WorkoutTemplate aggregate: a named, reusable, ordered list of exercises.
"""

from typing import List, Optional

from pydantic import Field

from domain.models.base import CamelModel, new_id
from domain.models.exercise import TemplateExercise


class WorkoutTemplate(CamelModel):
    """
    Named list of exercises without performance data.

    Templates are edited in place or replaced. Workout logs keep a copy of the
    template name, never a reference, so deleting a template cascades nothing.
    """

    id: str = Field(default_factory=new_id)
    name: str
    exercises: List[TemplateExercise] = Field(default_factory=list)
    notes: Optional[str] = None

    @property
    def exercise_names(self) -> List[str]:
        return [ex.name for ex in self.exercises]
