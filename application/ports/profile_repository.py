"""
Profile Repository Interface (Port).

Profile rows are keyed by the auth user id and created by the backend when
the account signs up; the client only reads and renames them.
"""
from typing import Optional, Protocol

from domain.models import UserProfile


class ProfileRepository(Protocol):
    """Abstract interface for remote user profile storage."""

    def get(self, user_id: str) -> Optional[UserProfile]:
        """
        Get the profile for a user.

        Returns:
            The profile, or None if no row exists

        Raises:
            RemoteUnavailableError: If the query fails
        """
        ...

    def update(self, user_id: str, profile: UserProfile) -> bool:
        """
        Update the profile's display name.

        Returns:
            True if a row was updated
        """
        ...
