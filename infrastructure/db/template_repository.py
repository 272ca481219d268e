"""
Supabase implementation of TemplateRepository.

Templates are stored one row per template in the ``templates`` table with
their exercises in a jsonb column.
"""
import logging
from typing import List

from supabase import Client

from application.exceptions import RemoteUnavailableError
from domain.converters import db_row_to_template, template_to_db_row
from domain.models import WorkoutTemplate
from infrastructure.db.errors import log_write_error

logger = logging.getLogger(__name__)


class SupabaseTemplateRepository:
    """
    Supabase implementation of TemplateRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_for_user(self, user_id: str) -> List[WorkoutTemplate]:
        try:
            result = (
                self._client.table("templates")
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to load templates for user {user_id}: {e}")
            raise RemoteUnavailableError(f"Failed to load templates: {e}") from e
        return [db_row_to_template(row) for row in result.data or []]

    def create(self, user_id: str, template: WorkoutTemplate) -> bool:
        try:
            result = self._client.table("templates").insert(template_to_db_row(template, user_id)).execute()
            if result.data:
                logger.info(f"Template {template.id} saved for user {user_id}")
                return True
            return False
        except Exception as e:
            log_write_error(logger, f"create template {template.id}", e)
            return False

    def update(self, user_id: str, template: WorkoutTemplate) -> bool:
        row = template_to_db_row(template, user_id)
        data = {"name": row["name"], "exercises": row["exercises"], "notes": row["notes"]}
        try:
            result = (
                self._client.table("templates")
                .update(data)
                .eq("id", template.id)
                .eq("user_id", user_id)
                .execute()
            )
            return bool(result.data)
        except Exception as e:
            log_write_error(logger, f"update template {template.id}", e)
            return False

    def delete(self, user_id: str, template_id: str) -> bool:
        try:
            result = (
                self._client.table("templates")
                .delete()
                .eq("id", template_id)
                .eq("user_id", user_id)
                .execute()
            )
            return bool(result.data)
        except Exception as e:
            log_write_error(logger, f"delete template {template_id}", e)
            return False
