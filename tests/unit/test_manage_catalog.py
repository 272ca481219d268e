"""
Unit tests for ExerciseCatalogService.
"""

import pytest

from application.exceptions import NotFoundError
from domain.models import CatalogExercise

pytestmark = pytest.mark.unit


class TestBrowse:
    def test_starts_from_library(self, tracker):
        assert len(tracker.catalog.list()) == 51
        assert tracker.catalog.custom_entries() == []

    def test_filter_by_query(self, tracker):
        names = [e.name for e in tracker.catalog.filter("bench press")]
        assert "Bench Press (Barbell)" in names
        assert "Close Grip Bench Press" in names
        assert all("bench press" in n.lower() for n in names)

    def test_filter_by_muscle_group(self, tracker):
        core = tracker.catalog.filter(muscle_group="Core")
        assert len(core) == 5
        assert len(tracker.catalog.filter(muscle_group="All")) == 51

    def test_filter_combined(self, tracker):
        results = tracker.catalog.filter("dips", muscle_group="Arms")
        assert [e.name for e in results] == ["Dips (Triceps)"]

    def test_muscle_groups(self, tracker):
        assert tracker.catalog.muscle_groups() == ["Chest", "Back", "Shoulders", "Arms", "Legs", "Core"]


class TestAdd:
    def test_add_custom_exercise(self, tracker, persistence):
        entry = CatalogExercise(name="Zercher Squat", muscle_group="Legs", equipment="Barbell")

        result = tracker.catalog.add(entry)

        assert result.success
        assert tracker.catalog.find("zercher squat") == entry
        assert tracker.catalog.custom_entries() == [entry]
        assert persistence.load_exercises()[-1] == entry

    def test_duplicate_name_is_rejected_case_insensitively(self, tracker):
        result = tracker.catalog.add(CatalogExercise(name="bench press (barbell)"))
        assert result.success is False
        assert len(tracker.catalog.list()) == 51

    def test_blank_name_is_rejected(self, tracker):
        assert tracker.catalog.add(CatalogExercise(name="   ")).success is False


class TestRemove:
    def test_remove_needs_confirmation(self, tracker):
        result = tracker.catalog.remove("Plank")
        assert result.requires_confirmation is True
        assert tracker.catalog.find("Plank") is not None

        assert tracker.catalog.remove("Plank", confirmed=True).success
        assert tracker.catalog.find("Plank") is None

    def test_remove_matches_exact_name(self, tracker):
        with pytest.raises(NotFoundError):
            tracker.catalog.remove("plank", confirmed=True)
