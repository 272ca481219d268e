"""
Shared pieces for tracker use cases.

Every mutating use case follows the same order: mutate the shared state,
write the affected collection to the local store, then hand the matching
remote call to the pusher (a no-op when nobody is signed in).
"""

from dataclasses import dataclass
from typing import Any, Optional

from application.local_persistence import LocalPersistence
from application.remote_pusher import RemotePusher
from application.state import TrackerState


@dataclass
class ActionResult:
    """
    Result of a user action.

    Validation failures and missing confirmations are reported here instead
    of being raised; the state is unchanged whenever ``success`` is False.
    """

    success: bool
    value: Any = None
    error: Optional[str] = None
    requires_confirmation: bool = False

    @classmethod
    def ok(cls, value: Any = None) -> "ActionResult":
        return cls(success=True, value=value)

    @classmethod
    def rejected(cls, error: str) -> "ActionResult":
        return cls(success=False, error=error)

    @classmethod
    def needs_confirmation(cls, message: str) -> "ActionResult":
        return cls(success=False, error=message, requires_confirmation=True)


class TrackerService:
    """Base for services that share the tracker state, store and pusher."""

    def __init__(
        self,
        state: TrackerState,
        persistence: LocalPersistence,
        pusher: RemotePusher,
    ) -> None:
        self._state = state
        self._persistence = persistence
        self._pusher = pusher
