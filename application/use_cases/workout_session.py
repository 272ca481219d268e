"""
Active workout session use case.

At most one session is active. A session is started from a template (each
exercise pre-filled from the most recent log of that template) or empty, is
edited set by set, and ends either by finishing (a WorkoutLog is appended to
history, optionally updating or creating a template) or by cancelling.

Completing a set starts a rest countdown for its exercise. The elapsed clock
and the rest countdown are driven by tickers that are cancelled whenever the
session or the countdown is cleared.

The active session is written to the local store after every edit so it
survives a restart; it is never pushed to remote.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from application.exceptions import NoActiveWorkoutError, NotFoundError, WorkoutAlreadyActiveError
from application.local_persistence import LocalPersistence
from application.remote_pusher import RemotePusher
from application.state import TrackerState
from application.timers import (
    REST_CHOICES,
    TICK_INTERVAL_SECONDS,
    Clock,
    RestTimer,
    Ticker,
    TickerFactory,
    system_clock,
    thread_ticker_factory,
)
from application.use_cases.base import ActionResult, TrackerService
from application.use_cases.manage_templates import TemplateService
from domain import catalog
from domain.models import (
    ActiveWorkout,
    ActivityType,
    CatalogExercise,
    ExerciseLog,
    SetType,
    TemplateExercise,
    WorkoutLog,
    WorkoutSet,
    WorkoutTemplate,
)
from domain.services.history import find_last_exercise, find_last_template_exercise

logger = logging.getLogger(__name__)

EMPTY_WORKOUT_NAME = "Empty Workout"
SET_FIELDS = ("weight", "reps")


def _check_rest_choice(seconds: int) -> None:
    if seconds not in REST_CHOICES:
        choices = ", ".join(str(c) for c in REST_CHOICES)
        raise ValueError(f"Rest duration must be one of {choices} seconds, got {seconds}")


class FinishOption(str, Enum):
    """What to do with the source template when a session finishes."""

    UPDATE_TEMPLATE = "update_template"
    SAVE_AS_NEW = "save_as_new"
    JUST_FINISH = "just_finish"


@dataclass
class ExerciseChanges:
    """Exercise names added to or removed from the session versus its template."""

    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed)


@dataclass
class FinishResult(ActionResult):
    """ActionResult whose value is the new WorkoutLog, plus the saved template if any."""

    template: Optional[WorkoutTemplate] = None


class WorkoutSessionService(TrackerService):
    """
    Use case for the single active workout.

    Usage:
        >>> session.start_from_template(template_id)
        >>> session.update_set(0, 0, "weight", 100)
        >>> session.toggle_set_completed(0, 0)
        >>> result = session.finish(FinishOption.JUST_FINISH)
    """

    def __init__(
        self,
        state: TrackerState,
        persistence: LocalPersistence,
        pusher: RemotePusher,
        templates: TemplateService,
        clock: Clock = system_clock,
        ticker_factory: TickerFactory = thread_ticker_factory,
        lock: Optional[threading.RLock] = None,
    ) -> None:
        super().__init__(state, persistence, pusher)
        self._templates = templates
        self._clock = clock
        self._ticker_factory = ticker_factory
        self._lock = lock or threading.RLock()
        self._elapsed_ticker: Optional[Ticker] = None
        self._rest_ticker: Optional[Ticker] = None

    @property
    def active(self) -> Optional[ActiveWorkout]:
        return self._state.active_workout

    # =========================================================================
    # Start / resume
    # =========================================================================

    def start_from_template(self, template_id: str) -> ActiveWorkout:
        """
        Start a session from a template.

        Each exercise is pre-filled with the sets from the most recent log of
        the same template; exercises without history get one empty set.
        """
        self._ensure_idle()
        template = self._state.find_template(template_id)
        if template is None:
            raise NotFoundError(f"Template {template_id} not found")

        exercises = []
        for template_exercise in template.exercises:
            previous = find_last_template_exercise(
                self._state.workout_logs, template.name, template_exercise.name
            )
            exercises.append(
                self._prefilled_log(template_exercise.name, previous, exercise_id=template_exercise.id)
            )

        workout = ActiveWorkout(
            template_name=template.name,
            original_template_id=template.id,
            exercises=exercises,
            start_time=self._now_ms(),
        )
        self._begin(workout)
        logger.info(f"Workout started from template: {template.name}")
        return workout

    def start_empty(self) -> ActiveWorkout:
        self._ensure_idle()
        workout = ActiveWorkout(template_name=EMPTY_WORKOUT_NAME, start_time=self._now_ms())
        self._begin(workout)
        logger.info("Empty workout started")
        return workout

    def resume(self, workout: ActiveWorkout) -> None:
        """Restore a session read back from the local store after a restart."""
        self._state.active_workout = workout
        self._state.elapsed_seconds = self.elapsed_seconds()
        self._start_elapsed_ticker()
        logger.info(f"Resumed active workout: {workout.template_name}")

    # =========================================================================
    # Set editing
    # =========================================================================

    def update_set(self, exercise_index: int, set_index: int, field_name: str, value: float) -> WorkoutSet:
        if field_name not in SET_FIELDS:
            raise ValueError(f"Unknown set field: {field_name}")
        workout_set = self._set(exercise_index, set_index)
        if field_name == "reps":
            if value != int(value):
                raise ValueError(f"Reps must be a whole number, got {value}")
            workout_set.reps = int(value)
        else:
            workout_set.weight = value
        self._save()
        return workout_set

    def toggle_set_completed(self, exercise_index: int, set_index: int) -> WorkoutSet:
        """Flip completion; a set that becomes completed starts the exercise's rest countdown."""
        exercise = self._exercise(exercise_index)
        workout_set = self._set(exercise_index, set_index)
        workout_set.completed = not workout_set.completed
        if workout_set.completed:
            duration = exercise.rest_duration or self._state.default_rest_seconds
            self._start_rest(exercise.exercise_id, duration)
        self._save()
        return workout_set

    def toggle_set_type(self, exercise_index: int, set_index: int) -> WorkoutSet:
        workout_set = self._set(exercise_index, set_index)
        workout_set.type = SetType.WORKING if workout_set.is_warmup else SetType.WARMUP
        self._save()
        return workout_set

    def add_set(self, exercise_index: int) -> WorkoutSet:
        """Append a set copying weight, reps and type of the last set."""
        exercise = self._exercise(exercise_index)
        if exercise.sets:
            last = exercise.sets[-1]
            new_set = WorkoutSet(weight=last.weight, reps=last.reps, type=last.type)
        else:
            new_set = WorkoutSet()
        exercise.sets.append(new_set)
        self._save()
        return new_set

    def remove_set(self, exercise_index: int, set_index: int) -> bool:
        """Remove a set. Removing the only remaining set is a no-op and returns False."""
        exercise = self._exercise(exercise_index)
        self._set(exercise_index, set_index)
        if len(exercise.sets) <= 1:
            return False
        exercise.sets.pop(set_index)
        self._save()
        return True

    # =========================================================================
    # Exercise editing
    # =========================================================================

    def add_exercise(self, entry: CatalogExercise) -> ExerciseLog:
        """Append an exercise pre-filled from its most recent log in any template."""
        workout = self._require_active()
        previous = find_last_exercise(self._state.workout_logs, entry.name)
        exercise = self._prefilled_log(entry.name, previous)
        workout.exercises.append(exercise)
        self._save()
        return exercise

    def remove_exercise(self, exercise_index: int, confirmed: bool = False) -> ActionResult:
        exercise = self._exercise(exercise_index)
        if exercise.has_completed_sets and not confirmed:
            return ActionResult.needs_confirmation(
                f'"{exercise.exercise_name}" has completed sets. Remove it anyway?'
            )

        self._require_active().exercises.pop(exercise_index)
        rest = self._state.rest_timer
        if rest is not None and rest.exercise_id == exercise.exercise_id:
            self._clear_rest()
        self._save()
        return ActionResult.ok(exercise)

    def reorder_exercises(self, from_index: int, to_index: int) -> List[ExerciseLog]:
        workout = self._require_active()
        self._exercise(from_index)
        self._exercise(to_index)
        exercise = workout.exercises.pop(from_index)
        workout.exercises.insert(to_index, exercise)
        self._save()
        return workout.exercises

    def set_rest_duration(self, exercise_index: int, seconds: Optional[int]) -> ExerciseLog:
        """Override the rest duration for one exercise; None reverts to the default."""
        exercise = self._exercise(exercise_index)
        if seconds is not None:
            _check_rest_choice(seconds)
        exercise.rest_duration = seconds
        self._save()
        return exercise

    def set_default_rest(self, seconds: int) -> None:
        _check_rest_choice(seconds)
        self._state.default_rest_seconds = seconds

    def set_workout_notes(self, notes: Optional[str]) -> None:
        self._require_active().notes = (notes or "").strip() or None
        self._save()

    def set_exercise_notes(self, exercise_index: int, notes: Optional[str]) -> None:
        self._exercise(exercise_index).notes = (notes or "").strip() or None
        self._save()

    # =========================================================================
    # Timers
    # =========================================================================

    def elapsed_seconds(self) -> int:
        workout = self._state.active_workout
        if workout is None:
            return 0
        return max(0, int(self._clock() - workout.start_time / 1000))

    def rest_remaining(self) -> Optional[int]:
        rest = self._state.rest_timer
        if rest is None:
            return None
        return rest.remaining(self._clock())

    def skip_rest(self) -> None:
        self._clear_rest()

    def _start_elapsed_ticker(self) -> None:
        self._cancel(self._elapsed_ticker)
        self._elapsed_ticker = self._ticker_factory(TICK_INTERVAL_SECONDS, self._on_elapsed_tick)
        self._elapsed_ticker.start()

    def _on_elapsed_tick(self) -> None:
        with self._lock:
            if self._state.active_workout is not None:
                self._state.elapsed_seconds = self.elapsed_seconds()

    def _start_rest(self, exercise_id: str, duration: int) -> None:
        self._cancel(self._rest_ticker)
        self._state.rest_timer = RestTimer(exercise_id=exercise_id, duration=duration, started_at=self._clock())
        self._rest_ticker = self._ticker_factory(TICK_INTERVAL_SECONDS, self._on_rest_tick)
        self._rest_ticker.start()

    def _on_rest_tick(self) -> None:
        with self._lock:
            rest = self._state.rest_timer
            if rest is not None and rest.is_finished(self._clock()):
                logger.info("Rest finished")
                self._clear_rest()

    def _clear_rest(self) -> None:
        self._cancel(self._rest_ticker)
        self._rest_ticker = None
        self._state.rest_timer = None

    @staticmethod
    def _cancel(ticker: Optional[Ticker]) -> None:
        if ticker is not None:
            ticker.cancel()

    # =========================================================================
    # Finish / cancel
    # =========================================================================

    def changes(self) -> ExerciseChanges:
        """Compare the session's exercise names with its source template."""
        workout = self._require_active()
        template = self._source_template(workout)
        if template is None:
            return ExerciseChanges()

        session_names = [ex.exercise_name for ex in workout.exercises]
        template_names = template.exercise_names
        return ExerciseChanges(
            added=[name for name in session_names if name not in template_names],
            removed=[name for name in template_names if name not in session_names],
        )

    def finish(
        self,
        option: FinishOption = FinishOption.JUST_FINISH,
        new_template_name: Optional[str] = None,
        confirm_overwrite: bool = False,
    ) -> FinishResult:
        """
        End the session and append it to history.

        Args:
            option: Whether to update the source template, save the session
                as a new template, or leave templates untouched
            new_template_name: Template name for SAVE_AS_NEW
            confirm_overwrite: Replace an existing template with the same name

        Returns:
            FinishResult. When the template step is rejected or needs
            confirmation nothing is changed and the session stays active.
        """
        workout = self._require_active()
        saved_template = None

        if option == FinishOption.UPDATE_TEMPLATE:
            template = self._source_template(workout)
            if template is None:
                return FinishResult(success=False, error="This workout has no template to update")
            result = self._templates.update(
                template.id, template.name, self._template_exercises(workout, template), template.notes
            )
            if not result.success:
                return FinishResult(success=False, error=result.error)
            saved_template = result.value

        elif option == FinishOption.SAVE_AS_NEW:
            name = (new_template_name or "").strip()
            if not name:
                return FinishResult(success=False, error="Template name is required")
            existing = self._templates.find_by_name(name)
            if existing is not None and not confirm_overwrite:
                return FinishResult(
                    success=False,
                    error=f'A template named "{existing.name}" already exists. Overwrite it?',
                    requires_confirmation=True,
                )
            exercises = self._template_exercises(workout, existing)
            if existing is not None:
                result = self._templates.update(existing.id, existing.name, exercises, existing.notes)
            else:
                result = self._templates.create(name, exercises)
            if not result.success:
                return FinishResult(success=False, error=result.error)
            saved_template = result.value

        now = self._clock()
        log = WorkoutLog(
            template_name=workout.template_name,
            date=datetime.fromtimestamp(now, tz=timezone.utc).isoformat(),
            exercises=[ex.model_copy(deep=True) for ex in workout.exercises],
            duration=max(0, int(now - workout.start_time / 1000)),
            activity_type=ActivityType.WORKOUT,
            notes=workout.notes,
        )
        self._state.workout_logs.insert(0, log)
        self._persistence.save_workout_logs(self._state.workout_logs)
        self._pusher.push("create_workout", log)
        self._end()

        logger.info(f"Workout finished: {log.template_name} ({log.duration}s)")
        return FinishResult(success=True, value=log, template=saved_template)

    def cancel(self, confirmed: bool = False) -> ActionResult:
        workout = self._require_active()
        if not confirmed:
            return ActionResult.needs_confirmation("Cancel this workout? Progress will be lost.")
        self._end()
        logger.info(f"Workout cancelled: {workout.template_name}")
        return ActionResult.ok()

    def shutdown(self) -> None:
        """Stop tickers without touching the session (used on application exit)."""
        self._cancel(self._elapsed_ticker)
        self._cancel(self._rest_ticker)
        self._elapsed_ticker = None
        self._rest_ticker = None

    # =========================================================================
    # Helpers
    # =========================================================================

    def _begin(self, workout: ActiveWorkout) -> None:
        self._state.active_workout = workout
        self._state.elapsed_seconds = 0
        self._clear_rest()
        self._start_elapsed_ticker()
        self._save()

    def _end(self) -> None:
        self._cancel(self._elapsed_ticker)
        self._elapsed_ticker = None
        self._clear_rest()
        self._state.active_workout = None
        self._state.elapsed_seconds = 0
        self._persistence.save_active_workout(None)

    def _save(self) -> None:
        self._persistence.save_active_workout(self._state.active_workout)

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _ensure_idle(self) -> None:
        if self._state.active_workout is not None:
            raise WorkoutAlreadyActiveError("A workout is already in progress")

    def _require_active(self) -> ActiveWorkout:
        workout = self._state.active_workout
        if workout is None:
            raise NoActiveWorkoutError("No workout in progress")
        return workout

    def _exercise(self, exercise_index: int) -> ExerciseLog:
        exercises = self._require_active().exercises
        if not 0 <= exercise_index < len(exercises):
            raise NotFoundError(f"Exercise index {exercise_index} out of range")
        return exercises[exercise_index]

    def _set(self, exercise_index: int, set_index: int) -> WorkoutSet:
        sets = self._exercise(exercise_index).sets
        if not 0 <= set_index < len(sets):
            raise NotFoundError(f"Set index {set_index} out of range")
        return sets[set_index]

    def _source_template(self, workout: ActiveWorkout) -> Optional[WorkoutTemplate]:
        if not workout.original_template_id:
            return None
        return self._state.find_template(workout.original_template_id)

    @staticmethod
    def _prefilled_log(
        name: str,
        previous: Optional[ExerciseLog],
        exercise_id: Optional[str] = None,
    ) -> ExerciseLog:
        if previous is not None and previous.sets:
            sets = [WorkoutSet(weight=s.weight, reps=s.reps, type=s.type) for s in previous.sets]
        else:
            sets = [WorkoutSet()]
        exercise = ExerciseLog(exercise_name=name, sets=sets)
        if exercise_id:
            exercise.exercise_id = exercise_id
        return exercise

    def _template_exercises(
        self,
        workout: ActiveWorkout,
        base: Optional[WorkoutTemplate],
    ) -> List[TemplateExercise]:
        """
        Template exercises in session order.

        Equipment, muscle group and notes come from the matching exercise of
        ``base`` when present, then from the catalog.
        """
        known = {ex.name: ex for ex in base.exercises} if base is not None else {}
        result = []
        for exercise in workout.exercises:
            existing = known.get(exercise.exercise_name)
            if existing is not None:
                result.append(existing.model_copy())
                continue
            entry = catalog.find(self._state.exercises, exercise.exercise_name)
            if entry is not None:
                result.append(TemplateExercise.from_catalog(entry))
            else:
                result.append(TemplateExercise(name=exercise.exercise_name))
        return result
