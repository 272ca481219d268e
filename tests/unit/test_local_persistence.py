"""
Unit tests for LocalPersistence.

Tests cover:
- Fixed storage keys and camelCase JSON
- Fallback to defaults on missing or malformed data
- Active workout save/clear
- Migration markers
"""

import json

import pytest

from application.local_persistence import (
    ACTIVE_WORKOUT_KEY,
    EXERCISES_KEY,
    PROFILE_KEY,
    TEMPLATES_KEY,
    WORKOUTS_KEY,
    LocalPersistence,
)
from domain.models import ActiveWorkout, CatalogExercise, ExerciseLog, TemplateExercise, WorkoutTemplate

pytestmark = pytest.mark.unit


class TestKeys:
    def test_storage_keys(self):
        assert TEMPLATES_KEY == "dreamshape_templates"
        assert WORKOUTS_KEY == "dreamshape_workouts"
        assert EXERCISES_KEY == "dreamshape_exercises"
        assert PROFILE_KEY == "dreamshape_profile"
        assert ACTIVE_WORKOUT_KEY == "dreamshape_active_workout"

    def test_templates_are_stored_as_camel_case_json(self, persistence, store):
        template = WorkoutTemplate(
            name="Push Day",
            exercises=[TemplateExercise(name="Bench Press (Barbell)", muscle_group="Chest")],
        )
        persistence.save_templates([template])

        stored = json.loads(store.get(TEMPLATES_KEY))
        assert stored[0]["name"] == "Push Day"
        assert stored[0]["exercises"][0]["muscleGroup"] == "Chest"

    def test_templates_round_trip(self, persistence):
        template = WorkoutTemplate(name="Push Day", exercises=[TemplateExercise(name="Push-ups")])
        persistence.save_templates([template])
        assert persistence.load_templates() == [template]


class TestFallbacks:
    def test_missing_collections_are_empty(self, persistence):
        assert persistence.load_templates() == []
        assert persistence.load_workout_logs() == []
        assert persistence.load_profile() is None
        assert persistence.load_active_workout() is None

    def test_missing_exercises_fall_back_to_library(self, persistence):
        assert len(persistence.load_exercises()) == 51

    def test_malformed_templates_fall_back_to_empty(self, persistence, store):
        store.set(TEMPLATES_KEY, "{not json")
        assert persistence.load_templates() == []

    def test_wrong_shape_falls_back(self, persistence, store):
        store.set(WORKOUTS_KEY, json.dumps({"unexpected": True}))
        assert persistence.load_workout_logs() == []

    def test_invalid_entries_are_dropped_individually(self, persistence, store):
        store.set(
            WORKOUTS_KEY,
            json.dumps(
                [
                    {"templateName": "Push Day", "date": "2024-05-01T10:00:00+00:00"},
                    {"templateName": "No Date", "date": "not a date"},
                    {"date": "2024-05-02T10:00:00+00:00"},
                ]
            ),
        )
        assert [log.template_name for log in persistence.load_workout_logs()] == ["Push Day"]

    def test_invalid_catalog_entry_keeps_the_rest(self, persistence, store):
        store.set(EXERCISES_KEY, json.dumps([{"name": "Zercher Squat"}, {"name": 5}, "junk"]))
        assert [e.name for e in persistence.load_exercises()] == ["Zercher Squat"]

    def test_malformed_exercises_fall_back_to_library(self, persistence, store):
        store.set(EXERCISES_KEY, "[{]")
        assert len(persistence.load_exercises()) == 51

    def test_stored_exercises_are_used_as_is(self, persistence):
        persistence.save_exercises([CatalogExercise(name="Zercher Squat", muscle_group="Legs")])
        assert [e.name for e in persistence.load_exercises()] == ["Zercher Squat"]

    def test_malformed_profile_is_none(self, persistence, store):
        store.set(PROFILE_KEY, "nope")
        assert persistence.load_profile() is None

    def test_malformed_active_workout_is_none(self, persistence, store):
        store.set(ACTIVE_WORKOUT_KEY, json.dumps({"templateName": "Push Day"}))
        assert persistence.load_active_workout() is None


class TestActiveWorkout:
    def test_save_and_clear(self, persistence, store):
        workout = ActiveWorkout(
            template_name="Push Day",
            start_time=1_700_000_000_000,
            exercises=[ExerciseLog(exercise_name="Bench Press (Barbell)")],
        )
        persistence.save_active_workout(workout)
        assert persistence.load_active_workout() == workout

        persistence.save_active_workout(None)
        assert ACTIVE_WORKOUT_KEY not in store.keys()


class TestMigrationMarker:
    def test_marker(self, store):
        persistence = LocalPersistence(store)
        assert persistence.is_migrated("user-1") is False

        persistence.mark_migrated("user-1")

        assert persistence.is_migrated("user-1") is True
        assert store.get("migration_completed_user-1") == "true"
        assert persistence.is_migrated("user-2") is False
