"""
Fake Profile Repository for testing.
"""
from typing import Dict, Optional

from application.exceptions import RemoteUnavailableError
from domain.models import UserProfile


class FakeProfileRepository:
    """In-memory fake implementation of ProfileRepository."""

    def __init__(self):
        self._profiles: Dict[str, UserProfile] = {}
        self.fail_reads = False
        self.fail_writes = False

    def reset(self) -> None:
        self._profiles.clear()
        self.fail_reads = False
        self.fail_writes = False

    def seed(self, user_id: str, profile: UserProfile) -> None:
        self._profiles[user_id] = profile

    def get_all(self) -> Dict[str, UserProfile]:
        return dict(self._profiles)

    # =========================================================================
    # ProfileRepository Protocol Methods
    # =========================================================================

    def get(self, user_id: str) -> Optional[UserProfile]:
        if self.fail_reads:
            raise RemoteUnavailableError("profiles unavailable")
        return self._profiles.get(user_id)

    def update(self, user_id: str, profile: UserProfile) -> bool:
        if self.fail_writes or user_id not in self._profiles:
            return False
        current = self._profiles[user_id]
        self._profiles[user_id] = current.model_copy(update={"name": profile.name})
        return True
