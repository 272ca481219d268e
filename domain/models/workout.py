"""
Workout session models: sets, exercise logs, the active workout and the
immutable workout log written to history when a session finishes.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from domain.models.base import CamelModel, new_id


class SetType(str, Enum):
    """Classification of a set. A set without a type counts as working."""

    WARMUP = "warmup"
    WORKING = "working"


class ActivityType(str, Enum):
    """Kind of activity recorded in a workout log (used for streaks)."""

    WORKOUT = "workout"
    CARDIO = "cardio"
    STRETCHING = "stretching"
    RECOVERY = "recovery"


class WorkoutSet(CamelModel):
    """One recorded attempt (weight x reps) within an exercise."""

    id: str = Field(default_factory=new_id)
    weight: float = 0
    reps: int = Field(default=0, ge=0)
    completed: bool = False
    type: Optional[SetType] = None

    @property
    def is_warmup(self) -> bool:
        return self.type == SetType.WARMUP

    @property
    def volume(self) -> float:
        return self.weight * self.reps


class ExerciseLog(CamelModel):
    """Ordered sets performed for one exercise in a session."""

    exercise_id: str = Field(default_factory=new_id)
    exercise_name: str
    sets: List[WorkoutSet] = Field(default_factory=list)
    rest_duration: Optional[int] = Field(default=None, ge=0, description="Rest override in seconds")
    notes: Optional[str] = None

    @property
    def has_completed_sets(self) -> bool:
        return any(s.completed for s in self.sets)

    @property
    def max_weight(self) -> float:
        return max((s.weight for s in self.sets), default=0)

    @property
    def volume(self) -> float:
        return sum(s.volume for s in self.sets)


class ActiveWorkout(CamelModel):
    """
    The single in-progress session.

    ``start_time`` is a wall-clock timestamp in epoch milliseconds.
    ``original_template_id`` is None when the session was started empty.
    """

    template_name: str
    original_template_id: Optional[str] = None
    exercises: List[ExerciseLog] = Field(default_factory=list)
    start_time: int
    notes: Optional[str] = None


class WorkoutLog(CamelModel):
    """Immutable historical record of a completed session."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    template_name: str
    date: str = Field(..., description="ISO-8601 timestamp of completion")
    exercises: List[ExerciseLog] = Field(default_factory=list)
    duration: int = Field(default=0, ge=0, description="Duration in seconds")
    activity_type: Optional[ActivityType] = None
    notes: Optional[str] = None

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        try:
            datetime.fromisoformat(v[:-1] + "+00:00" if v.endswith("Z") else v)
        except ValueError:
            raise ValueError(f"Invalid ISO-8601 date: '{v}'")
        return v

    def find_exercise(self, exercise_name: str) -> Optional[ExerciseLog]:
        """Return the first exercise log with exactly this name."""
        return next((ex for ex in self.exercises if ex.exercise_name == exercise_name), None)

    @property
    def volume(self) -> float:
        return sum(ex.volume for ex in self.exercises)
