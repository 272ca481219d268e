"""
Unit tests for HistoryService and ProfileService.
"""

from datetime import date

import pytest

from application.exceptions import NotFoundError
from domain.models import ProfileRole

pytestmark = pytest.mark.unit


@pytest.fixture
def logged(tracker, push_day):
    """Two finished Push Day sessions, newest first in history."""
    logs = []
    for weight in (60, 65):
        tracker.session.start_from_template(push_day.id)
        tracker.session.update_set(0, 0, "weight", weight)
        tracker.session.update_set(0, 0, "reps", 5)
        tracker.session.toggle_set_completed(0, 0)
        logs.append(tracker.session.finish().value)
    return logs


class TestHistory:
    def test_list_is_newest_first(self, tracker, logged):
        assert [log.id for log in tracker.history.list()] == [logged[1].id, logged[0].id]

    def test_get_unknown_raises(self, tracker):
        with pytest.raises(NotFoundError):
            tracker.history.get("missing")

    def test_select_and_clear(self, tracker, logged):
        assert tracker.history.selected is None
        tracker.history.select(logged[0].id)
        assert tracker.history.selected == logged[0]
        assert tracker.history.select(None) is None
        assert tracker.history.selected is None

    def test_delete_needs_confirmation(self, tracker, logged, persistence):
        result = tracker.history.delete(logged[0].id)
        assert result.requires_confirmation is True
        assert len(tracker.history.list()) == 2

        tracker.history.delete(logged[0].id, confirmed=True)
        assert [log.id for log in persistence.load_workout_logs()] == [logged[1].id]

    def test_deleting_selected_log_clears_selection(self, tracker, logged):
        tracker.history.select(logged[1].id)
        tracker.history.delete(logged[1].id, confirmed=True)
        assert tracker.state.selected_log_id is None

    def test_personal_record(self, tracker, logged):
        assert tracker.history.personal_record("Bench Press (Barbell)") == 65
        assert tracker.history.personal_record("Squat (Barbell)") == 0

    def test_exercise_history(self, tracker, logged):
        points = tracker.history.exercise_history("Bench Press (Barbell)")
        assert [p.max_weight for p in points] == [60, 65]

    def test_stats(self, tracker, logged, clock):
        today = date.fromtimestamp(clock.now)
        stats = tracker.history.stats(today)
        assert stats.total_workouts == 2
        assert stats.current_streak == 1
        assert stats.best_records[0].exercise_name == "Bench Press (Barbell)"

    def test_profile_summary(self, tracker, logged, clock):
        summary = tracker.history.profile_summary(date.fromtimestamp(clock.now))
        assert summary.total_workouts == 2
        assert summary.total_volume == 60 * 5 + 65 * 5
        assert summary.favorite_exercise == "Bench Press (Barbell)"


class TestProfile:
    def test_default_profile_created_on_load(self, tracker, persistence):
        assert tracker.profile.get().name == "Athlete"
        assert persistence.load_profile() is not None

    def test_update_name_keeps_member_since(self, tracker, persistence):
        member_since = tracker.profile.get().member_since

        result = tracker.profile.update("  Sam ")

        assert result.success
        assert tracker.profile.get().name == "Sam"
        assert tracker.profile.get().member_since == member_since
        assert persistence.load_profile().name == "Sam"

    def test_update_role(self, tracker):
        tracker.profile.update("Sam", role=ProfileRole.CREATOR)
        tracker.profile.update("Sam B")
        assert tracker.profile.get().role == ProfileRole.CREATOR

    def test_blank_name_is_rejected(self, tracker):
        assert tracker.profile.update(" ").success is False
        assert tracker.profile.get().name == "Athlete"
