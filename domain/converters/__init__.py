"""
Domain converters between Supabase rows and domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import template_to_db_row, db_row_to_template

    >>> row = template_to_db_row(template, user_id="user-123")
    >>> template = db_row_to_template(row)
"""

from domain.converters.db_converters import (
    custom_exercise_to_db_row,
    db_row_to_custom_exercise,
    db_row_to_profile,
    db_row_to_template,
    db_row_to_workout,
    template_to_db_row,
    workout_to_db_row,
)

__all__ = [
    "template_to_db_row",
    "db_row_to_template",
    "workout_to_db_row",
    "db_row_to_workout",
    "custom_exercise_to_db_row",
    "db_row_to_custom_exercise",
    "db_row_to_profile",
]
