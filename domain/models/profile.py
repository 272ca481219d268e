"""
User profile model.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field

from domain.models.base import CamelModel


DEFAULT_PROFILE_NAME = "Athlete"


class ProfileRole(str, Enum):
    CREATOR = "creator"
    MEMBER = "member"


class UserProfile(CamelModel):
    """Display information for the account (or the local browsing context)."""

    name: str = DEFAULT_PROFILE_NAME
    member_since: str = Field(default_factory=lambda: date.today().isoformat())
    role: Optional[ProfileRole] = None
