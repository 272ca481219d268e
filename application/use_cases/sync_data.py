"""
Sync orchestrator between the local store and Supabase.

Runs once per sign-in:
1. Push every local template, workout log and custom exercise to remote via
   individual create calls (guarded by a per-user "already migrated" marker)
2. Pull the full remote data set and overwrite local state with it
3. Record the time of the completed sync

After sign-in, every mutation calls one of the push helpers below through
the RemotePusher. Push helpers are best-effort: a failure is logged and shown
on the sync status, never retried, queued or rolled back locally.

Known gap: the pull in step 2 overwrites local state wholesale, so changes
made on another device between a migration and a later local mutation can be
dropped. There is no versioning or conflict resolution.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError

from application.exceptions import RemoteUnavailableError
from application.local_persistence import LocalPersistence
from application.ports import (
    CustomExerciseRepository,
    ProfileRepository,
    TemplateRepository,
    WorkoutLogRepository,
)
from application.state import SyncState, SyncStatus, TrackerState
from domain import catalog
from domain.models import CatalogExercise, UserProfile, WorkoutLog, WorkoutTemplate

logger = logging.getLogger(__name__)


@dataclass
class RemoteRepositories:
    """Bundle of remote repositories for one Supabase project."""

    templates: TemplateRepository
    workouts: WorkoutLogRepository
    exercises: CustomExerciseRepository
    profiles: ProfileRepository


@dataclass
class MigrationResult:
    """Result of the one-time local -> remote migration."""

    migrated: bool
    pushed: int = 0
    failed: int = 0


@dataclass
class RemoteSnapshot:
    """Data pulled from remote (or the local fallback when the pull failed)."""

    profile: Optional[UserProfile]
    templates: List[WorkoutTemplate] = field(default_factory=list)
    workouts: List[WorkoutLog] = field(default_factory=list)
    exercises: List[CatalogExercise] = field(default_factory=list)
    from_remote: bool = True


class SyncService:
    """
    Local <-> remote synchronization for one signed-in user.

    Usage:
        >>> sync = SyncService(user_id, repos, persistence, state.sync)
        >>> sync.sync_on_sign_in(state)
        >>> sync.create_template(template)  # best-effort push
    """

    def __init__(
        self,
        user_id: str,
        repos: RemoteRepositories,
        persistence: LocalPersistence,
        status: SyncStatus,
    ):
        self.user_id = user_id
        self._repos = repos
        self._persistence = persistence
        self._status = status
        self._migration_lock = threading.Lock()

    # =========================================================================
    # Initial migration (local -> remote)
    # =========================================================================

    def migrate_local_data(self) -> MigrationResult:
        """
        Push local data to remote once per user.

        A call while another migration is in progress, or after the marker
        is set, does nothing.
        """
        if not self._migration_lock.acquire(blocking=False):
            logger.info("Migration already in progress")
            return MigrationResult(migrated=False)

        try:
            if self._persistence.is_migrated(self.user_id):
                logger.info(f"Migration already completed for user {self.user_id}")
                return MigrationResult(migrated=False)

            logger.info(f"Starting data migration for user {self.user_id}")
            result = MigrationResult(migrated=True)

            def record(ok: bool) -> None:
                if ok:
                    result.pushed += 1
                else:
                    result.failed += 1

            local_profile = self._persistence.load_profile()
            if local_profile is not None:
                record(self.update_profile(local_profile))

            for template in self._persistence.load_templates():
                record(self.create_template(template))

            for workout in self._persistence.load_workout_logs():
                record(self.create_workout(workout))

            for entry in catalog.custom_entries(self._persistence.load_exercises()):
                record(self.create_custom_exercise(entry))

            self._persistence.mark_migrated(self.user_id)
            if result.failed:
                logger.warning(
                    f"Migration completed with {result.failed} failed push(es) for user {self.user_id}"
                )
            else:
                logger.info(f"Migration completed: {result.pushed} record(s) pushed")
            return result
        finally:
            self._migration_lock.release()

    # =========================================================================
    # Pull (remote -> local)
    # =========================================================================

    def load_all_data(self) -> RemoteSnapshot:
        """
        Pull profile, templates, workouts and custom exercises.

        Falls back to the local store contents if any read fails or a pulled
        row does not validate.
        """
        try:
            logger.info(f"Loading data from Supabase for user {self.user_id}")
            snapshot = RemoteSnapshot(
                profile=self._repos.profiles.get(self.user_id),
                templates=self._repos.templates.list_for_user(self.user_id),
                workouts=self._repos.workouts.list_for_user(self.user_id),
                exercises=self._repos.exercises.list_for_user(self.user_id),
            )
            logger.info(
                f"Loaded {len(snapshot.templates)} template(s), "
                f"{len(snapshot.workouts)} workout(s), "
                f"{len(snapshot.exercises)} custom exercise(s)"
            )
            return snapshot
        except (RemoteUnavailableError, ValidationError) as e:
            logger.error(f"Failed to load remote data, using local store: {e}")
            self._status.mark_error(str(e))
            return RemoteSnapshot(
                profile=self._persistence.load_profile(),
                templates=self._persistence.load_templates(),
                workouts=self._persistence.load_workout_logs(),
                exercises=catalog.custom_entries(self._persistence.load_exercises()),
                from_remote=False,
            )

    def sync_on_sign_in(self, state: TrackerState) -> bool:
        """
        Migrate, pull and overwrite ``state`` and the local store.

        Returns:
            True if remote data was applied, False if local data was kept
        """
        self._status.state = SyncState.SYNCING
        try:
            self.migrate_local_data()
        except Exception as e:
            logger.exception(f"Migration failed for user {self.user_id}: {e}")
            self._status.mark_error(f"Migration failed: {e}")
            return False

        snapshot = self.load_all_data()

        state.templates = snapshot.templates
        state.workout_logs = snapshot.workouts
        state.exercises = catalog.merge(catalog.default_exercises(), snapshot.exercises)
        if snapshot.profile is not None:
            state.profile = snapshot.profile

        self._persistence.save_templates(state.templates)
        self._persistence.save_workout_logs(state.workout_logs)
        self._persistence.save_exercises(state.exercises)
        self._persistence.save_profile(state.profile)

        if not snapshot.from_remote:
            return False

        self._status.state = SyncState.SYNCED
        self._status.last_synced_at = datetime.now(timezone.utc).isoformat()
        self._status.last_error = None
        logger.info(f"Sync completed for user {self.user_id}")
        return True

    # =========================================================================
    # Best-effort push helpers
    # =========================================================================

    def _run(self, description: str, call, *args) -> bool:
        try:
            ok = call(self.user_id, *args)
        except Exception as e:
            logger.error(f"Failed to {description}: {e}")
            self._status.mark_error(f"Failed to {description}")
            return False
        if not ok:
            logger.error(f"Failed to {description}")
            self._status.mark_error(f"Failed to {description}")
        return bool(ok)

    def update_profile(self, profile: UserProfile) -> bool:
        return self._run("update profile", self._repos.profiles.update, profile)

    def create_template(self, template: WorkoutTemplate) -> bool:
        return self._run(f"create template {template.id}", self._repos.templates.create, template)

    def update_template(self, template: WorkoutTemplate) -> bool:
        return self._run(f"update template {template.id}", self._repos.templates.update, template)

    def delete_template(self, template_id: str) -> bool:
        return self._run(f"delete template {template_id}", self._repos.templates.delete, template_id)

    def create_workout(self, workout: WorkoutLog) -> bool:
        return self._run(f"create workout {workout.id}", self._repos.workouts.create, workout)

    def delete_workout(self, workout_id: str) -> bool:
        return self._run(f"delete workout {workout_id}", self._repos.workouts.delete, workout_id)

    def create_custom_exercise(self, entry: CatalogExercise) -> bool:
        return self._run(f"create custom exercise '{entry.name}'", self._repos.exercises.create, entry)

    def delete_custom_exercise(self, name: str) -> bool:
        return self._run(f"delete custom exercise '{name}'", self._repos.exercises.delete, name)
