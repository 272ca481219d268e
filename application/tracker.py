"""
WorkoutTracker controller.

Owns the single TrackerState, the lock that serializes access to it, the
local persistence adapter and the remote pusher, and wires the use case
services around them. HTTP handlers and the CLI talk to this object only.
"""

import logging
import threading
from datetime import datetime
from typing import Optional

from application.exceptions import AuthenticationError, RemoteUnavailableError
from application.local_persistence import LocalPersistence
from application.ports import AuthSession
from application.remote_pusher import RemotePusher
from application.state import SyncStatus, TrackerState
from application.timers import (
    DEFAULT_REST_SECONDS,
    Clock,
    TickerFactory,
    system_clock,
    thread_ticker_factory,
)
from application.use_cases.authenticate import AuthService
from application.use_cases.base import ActionResult
from application.use_cases.export_data import ExportResult, build_export
from application.use_cases.history import HistoryService
from application.use_cases.manage_catalog import ExerciseCatalogService
from application.use_cases.manage_profile import ProfileService
from application.use_cases.manage_templates import TemplateService
from application.use_cases.sync_data import RemoteRepositories, SyncService
from application.use_cases.workout_session import WorkoutSessionService
from domain.models import UserProfile
from domain.services.history import newest_first

logger = logging.getLogger(__name__)


class WorkoutTracker:
    """
    Single controller over the tracker state.

    Callers hold ``tracker.lock`` around every read or mutation.

    Usage:
        >>> tracker = WorkoutTracker(LocalPersistence(store))
        >>> tracker.load()
        >>> with tracker.lock:
        ...     tracker.session.start_empty()
    """

    def __init__(
        self,
        persistence: LocalPersistence,
        pusher: Optional[RemotePusher] = None,
        remote_repos: Optional[RemoteRepositories] = None,
        auth: Optional[AuthService] = None,
        clock: Clock = system_clock,
        ticker_factory: TickerFactory = thread_ticker_factory,
        default_rest_seconds: int = DEFAULT_REST_SECONDS,
    ):
        self.lock = threading.RLock()
        self.state = TrackerState(default_rest_seconds=default_rest_seconds)
        self.persistence = persistence
        self.pusher = pusher or RemotePusher()
        self._remote_repos = remote_repos
        self._auth = auth

        self.templates = TemplateService(self.state, persistence, self.pusher)
        self.catalog = ExerciseCatalogService(self.state, persistence, self.pusher)
        self.session = WorkoutSessionService(
            self.state,
            persistence,
            self.pusher,
            templates=self.templates,
            clock=clock,
            ticker_factory=ticker_factory,
            lock=self.lock,
        )
        self.history = HistoryService(self.state, persistence, self.pusher)
        self.profile = ProfileService(self.state, persistence, self.pusher)

    @property
    def remote_enabled(self) -> bool:
        return self._remote_repos is not None

    def load(self) -> None:
        """Populate state from the local store and resume an unfinished session."""
        state = self.state
        state.templates = self.persistence.load_templates()
        state.workout_logs = newest_first(self.persistence.load_workout_logs())
        state.exercises = self.persistence.load_exercises()

        profile = self.persistence.load_profile()
        if profile is None:
            profile = UserProfile()
            self.persistence.save_profile(profile)
        state.profile = profile

        active = self.persistence.load_active_workout()
        if active is not None:
            self.session.resume(active)

        logger.info(
            f"Loaded {len(state.templates)} template(s), {len(state.workout_logs)} workout(s), "
            f"{len(state.exercises)} exercise(s) from local store"
        )

    # =========================================================================
    # Account
    # =========================================================================

    def sign_up(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
        invite_code: Optional[str] = None,
    ) -> ActionResult:
        return self._require_auth().sign_up(email, password, name, invite_code)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Authenticate, bind the remote session and run the sign-in sync."""
        session = self._require_auth().sign_in(email, password)
        self.start_remote_session(session.user_id)
        return session

    def start_remote_session(self, user_id: str) -> bool:
        """
        Bind remote writes to ``user_id`` and run migration plus pull.

        Returns:
            True if remote data was applied to local state
        """
        if self._remote_repos is None:
            raise RemoteUnavailableError("Remote backend is not configured")
        sync = SyncService(user_id, self._remote_repos, self.persistence, self.state.sync)
        self.state.user_id = user_id
        self.pusher.bind(sync)
        return sync.sync_on_sign_in(self.state)

    def resync(self) -> bool:
        """Re-run the sign-in sync for the current user."""
        sync = self.pusher.session
        if sync is None:
            raise AuthenticationError("Not signed in")
        return sync.sync_on_sign_in(self.state)

    def sign_out(self) -> None:
        """Drop the remote session. Local data stays."""
        if self._auth is not None and self.state.is_signed_in:
            self._auth.sign_out()
        self.pusher.unbind()
        self.state.user_id = None
        self.state.sync = SyncStatus()

    def _require_auth(self) -> AuthService:
        if self._auth is None:
            raise RemoteUnavailableError("Remote backend is not configured")
        return self._auth

    # =========================================================================
    # Export / lifecycle
    # =========================================================================

    def export(self, now: Optional[datetime] = None) -> ExportResult:
        return build_export(self.state, now)

    def close(self) -> None:
        self.session.shutdown()
        self.pusher.shutdown()
