"""
Unit tests for domain/catalog.py (built-in exercise library).
"""

import pytest

from domain import catalog
from domain.models import CatalogExercise


@pytest.mark.unit
class TestDefaultExercises:
    def test_library_has_51_entries(self):
        assert len(catalog.default_exercises()) == 51

    def test_library_covers_six_muscle_groups(self):
        groups = catalog.muscle_groups(catalog.default_exercises())
        assert groups == ["Chest", "Back", "Shoulders", "Arms", "Legs", "Core"]

    def test_library_names_are_unique_case_insensitively(self):
        keys = [entry.key for entry in catalog.default_exercises()]
        assert len(keys) == len(set(keys))

    def test_returns_fresh_copies(self):
        first = catalog.default_exercises()
        first.clear()
        assert len(catalog.default_exercises()) == 51

    def test_is_default_ignores_case(self):
        assert catalog.is_default("bench press (barbell)")
        assert not catalog.is_default("Zercher Squat")


@pytest.mark.unit
class TestCatalogHelpers:
    def test_find_is_case_insensitive(self):
        entry = catalog.find(catalog.default_exercises(), "  SQUAT (barbell) ")
        assert entry is not None
        assert entry.name == "Squat (Barbell)"

    def test_find_returns_none_when_absent(self):
        assert catalog.find(catalog.default_exercises(), "Zercher Squat") is None

    def test_merge_appends_only_new_names(self):
        base = [CatalogExercise(name="Plank", muscle_group="Core")]
        extra = [
            CatalogExercise(name="PLANK", muscle_group="Other"),
            CatalogExercise(name="Zercher Squat", muscle_group="Legs"),
        ]
        merged = catalog.merge(base, extra)
        assert [e.name for e in merged] == ["Plank", "Zercher Squat"]
        assert merged[0].muscle_group == "Core"

    def test_custom_entries_excludes_library(self):
        entries = catalog.default_exercises() + [CatalogExercise(name="Zercher Squat", muscle_group="Legs")]
        assert [e.name for e in catalog.custom_entries(entries)] == ["Zercher Squat"]
