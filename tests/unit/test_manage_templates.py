"""
Unit tests for TemplateService.
"""

import pytest

from application.exceptions import NotFoundError
from domain.models import TemplateExercise

pytestmark = pytest.mark.unit


def exercises(*names):
    return [TemplateExercise(name=name) for name in names]


class TestCreate:
    def test_create_persists_and_returns_template(self, tracker, persistence):
        result = tracker.templates.create("  Push Day ", exercises("Bench Press (Barbell)"), notes="heavy")

        assert result.success
        template = result.value
        assert template.name == "Push Day"
        assert template.notes == "heavy"
        assert tracker.templates.list() == [template]
        assert persistence.load_templates() == [template]

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_is_rejected(self, tracker, name):
        result = tracker.templates.create(name, exercises("Plank"))
        assert result.success is False
        assert result.error == "Template name is required"
        assert tracker.templates.list() == []

    def test_empty_exercise_list_is_rejected(self, tracker):
        result = tracker.templates.create("Nothing", [])
        assert result.success is False
        assert tracker.templates.list() == []


class TestUpdate:
    def test_update_replaces_fields_and_keeps_id(self, tracker, push_day):
        result = tracker.templates.update(push_day.id, "Push Day B", exercises("Dips (Chest)"))

        assert result.success
        updated = tracker.templates.get(push_day.id)
        assert updated.name == "Push Day B"
        assert updated.exercise_names == ["Dips (Chest)"]
        assert len(tracker.templates.list()) == 1

    def test_update_unknown_template_is_rejected(self, tracker):
        result = tracker.templates.update("missing", "X", exercises("Plank"))
        assert result.success is False

    def test_update_validates(self, tracker, push_day):
        assert tracker.templates.update(push_day.id, " ", exercises("Plank")).success is False
        assert tracker.templates.update(push_day.id, "Push Day", []).success is False
        assert tracker.templates.get(push_day.id).name == "Push Day"


class TestDeleteAndLookup:
    def test_delete_needs_confirmation(self, tracker, push_day):
        result = tracker.templates.delete(push_day.id)
        assert result.requires_confirmation is True
        assert tracker.templates.list() == [push_day]

        assert tracker.templates.delete(push_day.id, confirmed=True).success
        assert tracker.templates.list() == []

    def test_delete_unknown_raises(self, tracker):
        with pytest.raises(NotFoundError):
            tracker.templates.delete("missing", confirmed=True)

    def test_delete_keeps_history(self, tracker, push_day):
        tracker.session.start_from_template(push_day.id)
        log = tracker.session.finish().value

        tracker.templates.delete(push_day.id, confirmed=True)

        assert tracker.history.get(log.id).template_name == "Push Day"

    def test_get_unknown_raises(self, tracker):
        with pytest.raises(NotFoundError):
            tracker.templates.get("missing")

    def test_find_by_name_ignores_case(self, tracker, push_day):
        assert tracker.templates.find_by_name("PUSH DAY ") == push_day
        assert tracker.templates.find_by_name("Pull Day") is None
