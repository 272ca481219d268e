"""
Workout Log Repository Interface (Port).

This module defines the abstract interface for remote persistence of
completed workout logs. Logs are immutable, so there is no update.
"""
from typing import List, Protocol

from domain.models import WorkoutLog


class WorkoutLogRepository(Protocol):
    """
    Abstract interface for remote workout log storage.

    Write methods return False on failure instead of raising.
    """

    def list_for_user(self, user_id: str) -> List[WorkoutLog]:
        """
        Get all workout logs for a user.

        Returns:
            Logs ordered by date, most recent first

        Raises:
            RemoteUnavailableError: If the query fails
        """
        ...

    def create(self, user_id: str, workout: WorkoutLog) -> bool:
        """
        Insert a workout log row, keeping the log's own id.

        Returns:
            True if the row was inserted
        """
        ...

    def delete(self, user_id: str, workout_id: str) -> bool:
        """
        Delete a workout log.

        Returns:
            True if a row was deleted
        """
        ...
