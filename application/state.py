"""
Tracker state holder.

One TrackerState instance is owned by the WorkoutTracker controller and
shared by reference with every use case service. Nothing else keeps global
session state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from application.timers import DEFAULT_REST_SECONDS, RestTimer
from domain.models import (
    ActiveWorkout,
    CatalogExercise,
    UserProfile,
    WorkoutLog,
    WorkoutTemplate,
)


class SyncState(str, Enum):
    """Status shown by the sync indicator."""

    IDLE = "idle"
    SYNCING = "syncing"
    SYNCED = "synced"
    ERROR = "error"


@dataclass
class SyncStatus:
    """
    Transient remote sync status.

    Attributes:
        state: Current state of the indicator
        last_synced_at: UTC ISO timestamp of the last completed sign-in sync
        last_error: Message of the most recent remote failure
    """

    state: SyncState = SyncState.IDLE
    last_synced_at: Optional[str] = None
    last_error: Optional[str] = None

    def mark_error(self, message: str) -> None:
        self.state = SyncState.ERROR
        self.last_error = message

    def as_dict(self) -> dict:
        return {
            "state": self.state.value,
            "last_synced_at": self.last_synced_at,
            "last_error": self.last_error,
        }


@dataclass
class TrackerState:
    """In-memory collections and the single active session."""

    templates: List[WorkoutTemplate] = field(default_factory=list)
    workout_logs: List[WorkoutLog] = field(default_factory=list)  # newest first
    exercises: List[CatalogExercise] = field(default_factory=list)
    profile: UserProfile = field(default_factory=UserProfile)

    active_workout: Optional[ActiveWorkout] = None
    elapsed_seconds: int = 0
    rest_timer: Optional[RestTimer] = None
    default_rest_seconds: int = DEFAULT_REST_SECONDS

    selected_log_id: Optional[str] = None
    user_id: Optional[str] = None
    sync: SyncStatus = field(default_factory=SyncStatus)

    @property
    def is_signed_in(self) -> bool:
        return self.user_id is not None

    def find_template(self, template_id: str) -> Optional[WorkoutTemplate]:
        return next((t for t in self.templates if t.id == template_id), None)

    def find_log(self, log_id: str) -> Optional[WorkoutLog]:
        return next((log for log in self.workout_logs if log.id == log_id), None)
