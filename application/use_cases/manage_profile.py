"""
Profile use case.
"""

import logging
from typing import Optional

from application.use_cases.base import ActionResult, TrackerService
from domain.models import ProfileRole, UserProfile

logger = logging.getLogger(__name__)


class ProfileService(TrackerService):
    """Reads and edits the display profile."""

    def get(self) -> UserProfile:
        return self._state.profile

    def update(self, name: str, role: Optional[ProfileRole] = None) -> ActionResult:
        if not name or not name.strip():
            return ActionResult.rejected("Name is required")

        current = self._state.profile
        profile = UserProfile(
            name=name.strip(),
            member_since=current.member_since,
            role=role if role is not None else current.role,
        )
        self._state.profile = profile
        self._persistence.save_profile(profile)
        self._pusher.push("update_profile", profile)

        logger.info(f"Profile updated: {profile.name}")
        return ActionResult.ok(profile)
