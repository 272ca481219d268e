"""
Supabase implementation of ProfileRepository.
"""
import logging
from typing import Optional

from supabase import Client

from application.exceptions import RemoteUnavailableError
from domain.converters import db_row_to_profile
from domain.models import UserProfile
from infrastructure.db.errors import log_write_error

logger = logging.getLogger(__name__)


class SupabaseProfileRepository:
    """
    Supabase implementation of ProfileRepository protocol.

    Rows are created by a database trigger on sign-up, so there is no create.
    """

    def __init__(self, client: Client):
        self._client = client

    def get(self, user_id: str) -> Optional[UserProfile]:
        try:
            result = self._client.table("profiles").select("*").eq("id", user_id).limit(1).execute()
        except Exception as e:
            logger.error(f"Failed to load profile {user_id}: {e}")
            raise RemoteUnavailableError(f"Failed to load profile: {e}") from e
        if not result.data:
            return None
        return db_row_to_profile(result.data[0])

    def update(self, user_id: str, profile: UserProfile) -> bool:
        try:
            result = (
                self._client.table("profiles")
                .update({"name": profile.name})
                .eq("id", user_id)
                .execute()
            )
            return bool(result.data)
        except Exception as e:
            log_write_error(logger, f"update profile {user_id}", e)
            return False
