"""
Custom Exercise Repository Interface (Port).

Only user-created catalog entries are stored remotely; the built-in library
ships with the application.
"""
from typing import List, Protocol

from domain.models import CatalogExercise


class CustomExerciseRepository(Protocol):
    """Abstract interface for remote custom exercise storage."""

    def list_for_user(self, user_id: str) -> List[CatalogExercise]:
        """
        Get the user's custom exercises.

        Returns:
            Entries ordered by name

        Raises:
            RemoteUnavailableError: If the query fails
        """
        ...

    def create(self, user_id: str, entry: CatalogExercise) -> bool:
        """
        Insert a custom exercise.

        A duplicate name for the same user means the entry is already
        stored; it is reported as success.

        Returns:
            True if the row was inserted or already existed
        """
        ...

    def delete(self, user_id: str, name: str) -> bool:
        """
        Delete a custom exercise by exact name.

        Returns:
            True if a row was deleted
        """
        ...
