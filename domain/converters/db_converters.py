"""
Converters: Supabase row format <-> domain models.

Provides bidirectional conversion between Supabase table rows and the
domain models. Nested collections (template exercises, exercise logs) are
stored in jsonb columns using the same camelCase shape as the local store.

Database schema:
- profiles: id (auth user id), name, member_since, role
- templates: id, user_id, name, exercises (jsonb), notes, created_at
- workouts: id, user_id, template_name, date, duration, exercises (jsonb),
  activity_type
- custom_exercises: user_id, name, muscle_group, equipment
"""

from typing import Any, Dict

from domain.models import (
    ActivityType,
    CatalogExercise,
    UserProfile,
    WorkoutLog,
    WorkoutTemplate,
)


def template_to_db_row(template: WorkoutTemplate, user_id: str) -> Dict[str, Any]:
    """
    Convert a template to a row for the templates table.

    Examples:
        >>> row = template_to_db_row(template, user_id="user-123")
        >>> row["exercises"][0]["muscleGroup"]
        'Chest'
    """
    data = template.to_json_dict()
    return {
        "id": template.id,
        "user_id": user_id,
        "name": template.name,
        "exercises": data.get("exercises", []),
        "notes": template.notes,
    }


def db_row_to_template(row: Dict[str, Any]) -> WorkoutTemplate:
    """Convert a templates row to a domain WorkoutTemplate."""
    return WorkoutTemplate.model_validate(
        {
            "id": row["id"],
            "name": row["name"],
            "exercises": row.get("exercises") or [],
            "notes": row.get("notes"),
        }
    )


def workout_to_db_row(workout: WorkoutLog, user_id: str) -> Dict[str, Any]:
    """Convert a workout log to a row for the workouts table."""
    data = workout.to_json_dict()
    activity = workout.activity_type or ActivityType.WORKOUT
    return {
        "id": workout.id,
        "user_id": user_id,
        "template_name": workout.template_name,
        "date": workout.date,
        "duration": workout.duration,
        "exercises": data.get("exercises", []),
        "activity_type": activity.value,
    }


def db_row_to_workout(row: Dict[str, Any]) -> WorkoutLog:
    """Convert a workouts row to a domain WorkoutLog."""
    return WorkoutLog.model_validate(
        {
            "id": row["id"],
            "template_name": row["template_name"],
            "date": row["date"],
            "duration": row.get("duration") or 0,
            "exercises": row.get("exercises") or [],
            "activity_type": row.get("activity_type"),
        }
    )


def custom_exercise_to_db_row(entry: CatalogExercise, user_id: str) -> Dict[str, Any]:
    return {
        "user_id": user_id,
        "name": entry.name,
        "muscle_group": entry.muscle_group,
        "equipment": entry.equipment,
    }


def db_row_to_custom_exercise(row: Dict[str, Any]) -> CatalogExercise:
    return CatalogExercise(
        name=row["name"],
        muscle_group=row.get("muscle_group") or "Other",
        equipment=row.get("equipment") or "Other",
    )


def db_row_to_profile(row: Dict[str, Any]) -> UserProfile:
    """Convert a profiles row to a domain UserProfile."""
    data: Dict[str, Any] = {"name": row.get("name") or "User"}
    if row.get("member_since"):
        data["member_since"] = str(row["member_since"])[:10]
    if row.get("role"):
        data["role"] = row["role"]
    return UserProfile.model_validate(data)
