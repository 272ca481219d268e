"""
Exercise catalog entries and template exercises.

A CatalogExercise is an entry in the per-account exercise library. A
TemplateExercise is an independent copy embedded in a WorkoutTemplate; editing
or removing the catalog entry never touches templates that already use it.
"""

from typing import Optional

from pydantic import Field, field_validator

from domain.models.base import CamelModel, new_id


class CatalogExercise(CamelModel):
    """
    Entry in the exercise library.

    Examples:
        >>> entry = CatalogExercise(name="Squat (Barbell)", muscle_group="Legs", equipment="Barbell")
        >>> entry.to_json_dict()
        {'name': 'Squat (Barbell)', 'muscleGroup': 'Legs', 'equipment': 'Barbell'}
    """

    name: str = Field(..., description="Display name, unique case-insensitively")
    muscle_group: str = Field(default="Other", description="Primary muscle group")
    equipment: str = Field(default="Other", description="Equipment category")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    @property
    def key(self) -> str:
        """Case-insensitive identity used for de-duplication."""
        return self.name.lower()


class TemplateExercise(CamelModel):
    """Exercise embedded in a workout template."""

    id: str = Field(default_factory=new_id)
    name: str
    equipment: str = "Other"
    muscle_group: str = "Other"
    notes: Optional[str] = None

    @classmethod
    def from_catalog(cls, entry: CatalogExercise, notes: Optional[str] = None) -> "TemplateExercise":
        """Copy a catalog entry into a new template exercise."""
        return cls(
            name=entry.name,
            equipment=entry.equipment,
            muscle_group=entry.muscle_group,
            notes=notes,
        )
