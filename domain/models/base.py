"""
Shared pydantic base for domain models.

Persisted JSON (local store, exports, Supabase jsonb columns) uses camelCase
keys, so every model serializes by alias and accepts either spelling on input.
"""

import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate a new string identifier for templates, sets and logs."""
    return uuid.uuid4().hex


class CamelModel(BaseModel):
    """Base model with camelCase aliases and name-or-alias population."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_json_dict(self) -> dict:
        """Dump to a JSON-compatible dict using camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
