"""
Workout history use case: browsing, deleting and statistics.
"""

import logging
from datetime import date
from typing import List, Optional

from application.exceptions import NotFoundError
from application.use_cases.base import ActionResult, TrackerService
from domain.models import WorkoutLog
from domain.services import history as history_stats

logger = logging.getLogger(__name__)


class HistoryService(TrackerService):
    """Use case for the workout log collection (newest first)."""

    def list(self) -> List[WorkoutLog]:
        return list(self._state.workout_logs)

    def get(self, log_id: str) -> WorkoutLog:
        log = self._state.find_log(log_id)
        if log is None:
            raise NotFoundError(f"Workout {log_id} not found")
        return log

    @property
    def selected(self) -> Optional[WorkoutLog]:
        if self._state.selected_log_id is None:
            return None
        return self._state.find_log(self._state.selected_log_id)

    def select(self, log_id: Optional[str]) -> Optional[WorkoutLog]:
        """Select a log for the detail view; None clears the selection."""
        if log_id is None:
            self._state.selected_log_id = None
            return None
        log = self.get(log_id)
        self._state.selected_log_id = log.id
        return log

    def delete(self, log_id: str, confirmed: bool = False) -> ActionResult:
        log = self.get(log_id)
        if not confirmed:
            return ActionResult.needs_confirmation("Delete this workout from your history?")

        self._state.workout_logs.remove(log)
        if self._state.selected_log_id == log.id:
            self._state.selected_log_id = None
        self._persistence.save_workout_logs(self._state.workout_logs)
        self._pusher.push("delete_workout", log.id)

        logger.info(f"Workout deleted: {log.template_name} ({log.id})")
        return ActionResult.ok(log)

    # =========================================================================
    # Statistics
    # =========================================================================

    def stats(self, today: Optional[date] = None) -> history_stats.WorkoutStats:
        return history_stats.workout_stats(self._state.workout_logs, today)

    def personal_record(self, exercise_name: str) -> float:
        return history_stats.personal_record(self._state.workout_logs, exercise_name)

    def exercise_history(self, exercise_name: str) -> List[history_stats.ExerciseHistoryPoint]:
        return history_stats.exercise_history(self._state.workout_logs, exercise_name)

    def profile_summary(self, today: Optional[date] = None) -> history_stats.ProfileSummary:
        return history_stats.profile_summary(self._state.workout_logs, today)
