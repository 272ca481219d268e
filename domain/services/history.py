"""
History queries and derived statistics over workout logs.

All functions are pure: they take the workout log collection (in any order)
and a reference day, and never mutate their inputs.

This module provides:
- Pre-fill lookups used when starting a session or adding an exercise
- Personal records (maximum weight per exercise name)
- Weekly frequency/volume buckets, the activity heatmap and the day streak
- Per-exercise progression and the profile summary figures
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from domain.models import ExerciseLog, WorkoutLog


WEEKS_IN_CHARTS = 8
HEATMAP_DAYS = 84
WEEKLY_WORKOUT_GOAL = 4
CONSISTENCY_WINDOW_DAYS = 30
CONSISTENCY_TARGET = 12
VOLUME_GOAL = 50_000


# =============================================================================
# Result DTOs
# =============================================================================


@dataclass
class PersonalRecord:
    """Maximum weight ever logged for an exercise name."""
    exercise_name: str
    weight: float


@dataclass
class WeeklyBucket:
    """Workout count and volume for one 7-day window."""
    label: str  # "This" for the current window, "-N" for N windows back
    start: str  # ISO date, inclusive
    end: str  # ISO date, inclusive
    workouts: int = 0
    volume: float = 0.0


@dataclass
class HeatmapDay:
    date: str
    count: int  # 1 if any log on that day, else 0


@dataclass
class WorkoutStats:
    """Aggregate statistics shown on the dashboard."""
    total_workouts: int
    average_per_week: float
    current_streak: int
    best_records: List[PersonalRecord] = field(default_factory=list)
    weekly: List[WeeklyBucket] = field(default_factory=list)
    heatmap: List[HeatmapDay] = field(default_factory=list)


@dataclass
class ExerciseHistoryPoint:
    date: str
    template_name: str
    max_weight: float
    volume: float
    sets: int


@dataclass
class ProfileSummary:
    total_workouts: int
    total_volume: float
    total_hours: int
    favorite_exercise: str
    weekly_goal_progress: float  # percent, capped at 100
    consistency_score: float  # percent, capped at 100
    volume_progress: float  # percent, capped at 100


# =============================================================================
# Date helpers
# =============================================================================


def parse_log_datetime(value: str) -> datetime:
    """
    Parse a log's ISO-8601 date.

    Aware timestamps are converted to local time; naive ones are taken as
    local already.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def log_day(log: WorkoutLog) -> date:
    return parse_log_datetime(log.date).date()


def newest_first(logs: Iterable[WorkoutLog]) -> List[WorkoutLog]:
    """Logs sorted by date, most recent first. Ties keep their input order."""
    return sorted(logs, key=lambda log: parse_log_datetime(log.date), reverse=True)


def _active_days(logs: Iterable[WorkoutLog]) -> set:
    return {log_day(log) for log in logs}


# =============================================================================
# Pre-fill lookups
# =============================================================================


def find_last_template_exercise(
    logs: Sequence[WorkoutLog],
    template_name: str,
    exercise_name: str,
) -> Optional[ExerciseLog]:
    """
    Exercise entry from the most recent log of ``template_name``.

    Only the most recent matching log is consulted; if it does not contain
    the exercise, None is returned.
    """
    last = next((log for log in newest_first(logs) if log.template_name == template_name), None)
    if last is None:
        return None
    return last.find_exercise(exercise_name)


def find_last_exercise(logs: Sequence[WorkoutLog], exercise_name: str) -> Optional[ExerciseLog]:
    """Exercise entry from the most recent log (any template) that contains it."""
    for log in newest_first(logs):
        entry = log.find_exercise(exercise_name)
        if entry is not None:
            return entry
    return None


# =============================================================================
# Personal records
# =============================================================================


def personal_record(logs: Iterable[WorkoutLog], exercise_name: str) -> float:
    """Maximum set weight across all logs for this exercise name, 0 if none."""
    best = 0.0
    for log in logs:
        for entry in log.exercises:
            if entry.exercise_name != exercise_name:
                continue
            for s in entry.sets:
                if s.weight > best:
                    best = s.weight
    return best


def all_personal_records(logs: Iterable[WorkoutLog]) -> Dict[str, float]:
    records: Dict[str, float] = {}
    for log in logs:
        for entry in log.exercises:
            for s in entry.sets:
                if s.weight > records.get(entry.exercise_name, 0):
                    records[entry.exercise_name] = s.weight
    return records


def best_personal_records(logs: Iterable[WorkoutLog], limit: int = 3) -> List[PersonalRecord]:
    records = all_personal_records(logs)
    ranked = sorted(records.items(), key=lambda item: item[1], reverse=True)[:limit]
    return [PersonalRecord(exercise_name=name, weight=weight) for name, weight in ranked]


# =============================================================================
# Aggregates
# =============================================================================


def average_per_week(logs: Sequence[WorkoutLog], today: date) -> float:
    """Workouts per whole week since the oldest log (at least one week)."""
    if not logs:
        return 0.0
    oldest = min(log_day(log) for log in logs)
    weeks = max(1, (today - oldest).days // 7)
    return round(len(logs) / weeks, 1)


def weekly_buckets(
    logs: Sequence[WorkoutLog],
    today: date,
    weeks: int = WEEKS_IN_CHARTS,
) -> List[WeeklyBucket]:
    """
    Frequency and volume per 7-day window, oldest window first.

    Window 0 ("This") ends on ``today`` inclusive. Volume is the sum of
    weight x reps over every set, completed or not.
    """
    buckets: List[WeeklyBucket] = []
    for i in range(weeks - 1, -1, -1):
        end = today - timedelta(days=i * 7)
        start = end - timedelta(days=6)
        bucket = WeeklyBucket(
            label="This" if i == 0 else f"-{i}",
            start=start.isoformat(),
            end=end.isoformat(),
        )
        for log in logs:
            if start <= log_day(log) <= end:
                bucket.workouts += 1
                bucket.volume += log.volume
        buckets.append(bucket)
    return buckets


def activity_heatmap(logs: Iterable[WorkoutLog], today: date, days: int = HEATMAP_DAYS) -> List[HeatmapDay]:
    """One entry per day over the trailing window, oldest first."""
    active = _active_days(logs)
    result = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        result.append(HeatmapDay(date=day.isoformat(), count=1 if day in active else 0))
    return result


def current_streak(logs: Iterable[WorkoutLog], today: date) -> int:
    """
    Consecutive active days counted back from ``today``.

    A day without activity ends the streak, except ``today`` itself, which
    is still in progress: a streak that reached yesterday is kept alive
    rather than dropping to 0 until the first log of the day. With logs on
    D, D-1 and D-3 the streak on D is 2, and it is still 2 on D+1.
    """
    active = _active_days(logs)
    if not active:
        return 0

    day = today
    if day not in active:
        day -= timedelta(days=1)

    streak = 0
    while day in active:
        streak += 1
        day -= timedelta(days=1)
    return streak


def workout_stats(logs: Sequence[WorkoutLog], today: Optional[date] = None) -> WorkoutStats:
    """Dashboard statistics for the given reference day (default: today)."""
    today = today or date.today()
    return WorkoutStats(
        total_workouts=len(logs),
        average_per_week=average_per_week(logs, today),
        current_streak=current_streak(logs, today),
        best_records=best_personal_records(logs),
        weekly=weekly_buckets(logs, today),
        heatmap=activity_heatmap(logs, today),
    )


def exercise_history(logs: Sequence[WorkoutLog], exercise_name: str) -> List[ExerciseHistoryPoint]:
    """Per-session progression for one exercise, oldest first."""
    points = []
    for log in reversed(newest_first(logs)):
        entry = log.find_exercise(exercise_name)
        if entry is None:
            continue
        points.append(
            ExerciseHistoryPoint(
                date=log.date,
                template_name=log.template_name,
                max_weight=entry.max_weight,
                volume=entry.volume,
                sets=len(entry.sets),
            )
        )
    return points


def profile_summary(logs: Sequence[WorkoutLog], today: Optional[date] = None) -> ProfileSummary:
    """Lifetime totals and goal progress shown on the profile page."""
    today = today or date.today()

    total_volume = sum(log.volume for log in logs)
    total_hours = sum(log.duration for log in logs) // 3600

    counts = Counter(entry.exercise_name for log in logs for entry in log.exercises)
    favorite = counts.most_common(1)[0][0] if counts else "None"

    # Weeks start on Sunday
    week_start = today - timedelta(days=(today.weekday() + 1) % 7)
    this_week = sum(1 for log in logs if log_day(log) >= week_start)

    window_start = today - timedelta(days=CONSISTENCY_WINDOW_DAYS)
    recent = sum(1 for log in logs if log_day(log) >= window_start)

    return ProfileSummary(
        total_workouts=len(logs),
        total_volume=total_volume,
        total_hours=total_hours,
        favorite_exercise=favorite,
        weekly_goal_progress=min(this_week / WEEKLY_WORKOUT_GOAL * 100, 100.0),
        consistency_score=min(recent / CONSISTENCY_TARGET * 100, 100.0) if logs else 0.0,
        volume_progress=min(total_volume / VOLUME_GOAL * 100, 100.0),
    )
