"""
Supabase implementation of CustomExerciseRepository.

Only user-created catalog entries are stored, keyed by (user_id, name).
"""
import logging
from typing import List

from supabase import Client

from application.exceptions import RemoteUnavailableError
from domain.converters import custom_exercise_to_db_row, db_row_to_custom_exercise
from domain.models import CatalogExercise
from infrastructure.db.errors import is_duplicate_error, log_write_error

logger = logging.getLogger(__name__)


class SupabaseCustomExerciseRepository:
    """Supabase implementation of CustomExerciseRepository protocol."""

    def __init__(self, client: Client):
        self._client = client

    def list_for_user(self, user_id: str) -> List[CatalogExercise]:
        try:
            result = (
                self._client.table("custom_exercises")
                .select("*")
                .eq("user_id", user_id)
                .order("name")
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to load custom exercises for user {user_id}: {e}")
            raise RemoteUnavailableError(f"Failed to load custom exercises: {e}") from e
        return [db_row_to_custom_exercise(row) for row in result.data or []]

    def create(self, user_id: str, entry: CatalogExercise) -> bool:
        try:
            result = (
                self._client.table("custom_exercises")
                .insert(custom_exercise_to_db_row(entry, user_id))
                .execute()
            )
            return bool(result.data)
        except Exception as e:
            if is_duplicate_error(e):
                logger.info(f"Custom exercise '{entry.name}' already stored for user {user_id}")
                return True
            log_write_error(logger, f"create custom exercise '{entry.name}'", e)
            return False

    def delete(self, user_id: str, name: str) -> bool:
        try:
            result = (
                self._client.table("custom_exercises")
                .delete()
                .eq("user_id", user_id)
                .eq("name", name)
                .execute()
            )
            return bool(result.data)
        except Exception as e:
            log_write_error(logger, f"delete custom exercise '{name}'", e)
            return False
