"""
Supabase implementation of WorkoutLogRepository.

Workout logs are immutable once written, so the repository only inserts,
lists and deletes.
"""
import logging
from typing import List

from supabase import Client

from application.exceptions import RemoteUnavailableError
from domain.converters import db_row_to_workout, workout_to_db_row
from domain.models import WorkoutLog
from infrastructure.db.errors import log_write_error

logger = logging.getLogger(__name__)


class SupabaseWorkoutLogRepository:
    """
    Supabase implementation of WorkoutLogRepository protocol.

    All Supabase query logic for workout logs is encapsulated here.
    """

    def __init__(self, client: Client):
        self._client = client

    def list_for_user(self, user_id: str) -> List[WorkoutLog]:
        """Get all workout logs for a user, most recent first."""
        try:
            result = (
                self._client.table("workouts")
                .select("*")
                .eq("user_id", user_id)
                .order("date", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to load workouts for user {user_id}: {e}")
            raise RemoteUnavailableError(f"Failed to load workouts: {e}") from e
        return [db_row_to_workout(row) for row in result.data or []]

    def create(self, user_id: str, workout: WorkoutLog) -> bool:
        try:
            result = self._client.table("workouts").insert(workout_to_db_row(workout, user_id)).execute()
            if result.data:
                logger.info(f"Workout {workout.id} saved for user {user_id}")
                return True
            return False
        except Exception as e:
            log_write_error(logger, f"create workout {workout.id}", e)
            return False

    def delete(self, user_id: str, workout_id: str) -> bool:
        try:
            result = (
                self._client.table("workouts")
                .delete()
                .eq("id", workout_id)
                .eq("user_id", user_id)
                .execute()
            )
            return bool(result.data)
        except Exception as e:
            log_write_error(logger, f"delete workout {workout_id}", e)
            return False
