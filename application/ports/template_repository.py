"""
Template Repository Interface (Port).

This module defines the abstract interface for remote template persistence.
Every call is scoped to the authenticated user's id.
"""
from typing import List, Protocol

from domain.models import WorkoutTemplate


class TemplateRepository(Protocol):
    """
    Abstract interface for remote workout template storage.

    Write methods never raise: they return False on failure so callers can
    treat remote writes as best-effort. Read methods raise
    RemoteUnavailableError when the backend cannot be reached.
    """

    def list_for_user(self, user_id: str) -> List[WorkoutTemplate]:
        """
        Get all templates for a user.

        Returns:
            Templates ordered by creation time, newest first

        Raises:
            RemoteUnavailableError: If the query fails
        """
        ...

    def create(self, user_id: str, template: WorkoutTemplate) -> bool:
        """
        Insert a template row, keeping the template's own id.

        Returns:
            True if the row was inserted
        """
        ...

    def update(self, user_id: str, template: WorkoutTemplate) -> bool:
        """
        Overwrite name, exercises and notes of an existing template.

        Returns:
            True if a row was updated
        """
        ...

    def delete(self, user_id: str, template_id: str) -> bool:
        """
        Delete a template.

        Returns:
            True if a row was deleted
        """
        ...
