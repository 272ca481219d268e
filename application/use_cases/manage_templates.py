"""
Template management use case.

Create, update and delete workout templates. Names must not be blank and a
template needs at least one exercise. Deleting asks for confirmation and
cascades nothing: workout logs keep their own copy of the template name.
"""

import logging
from typing import List, Optional

from application.exceptions import NotFoundError
from application.use_cases.base import ActionResult, TrackerService
from domain.models import TemplateExercise, WorkoutTemplate

logger = logging.getLogger(__name__)


class TemplateService(TrackerService):
    """
    Use case for maintaining the template collection.

    Usage:
        >>> result = templates.create("Push Day", [TemplateExercise(name="Bench Press (Barbell)")])
        >>> if result.success:
        ...     print(result.value.id)
    """

    def list(self) -> List[WorkoutTemplate]:
        return list(self._state.templates)

    def get(self, template_id: str) -> WorkoutTemplate:
        template = self._state.find_template(template_id)
        if template is None:
            raise NotFoundError(f"Template {template_id} not found")
        return template

    def find_by_name(self, name: str) -> Optional[WorkoutTemplate]:
        """Case-insensitive lookup by template name."""
        key = name.strip().lower()
        return next((t for t in self._state.templates if t.name.strip().lower() == key), None)

    def create(
        self,
        name: str,
        exercises: List[TemplateExercise],
        notes: Optional[str] = None,
    ) -> ActionResult:
        error = self._validate(name, exercises)
        if error:
            return ActionResult.rejected(error)

        template = WorkoutTemplate(name=name.strip(), exercises=list(exercises), notes=notes or None)
        self._state.templates.append(template)
        self._persistence.save_templates(self._state.templates)
        self._pusher.push("create_template", template)

        logger.info(f"Template created: {template.name} ({template.id})")
        return ActionResult.ok(template)

    def update(
        self,
        template_id: str,
        name: str,
        exercises: List[TemplateExercise],
        notes: Optional[str] = None,
    ) -> ActionResult:
        current = self._state.find_template(template_id)
        if current is None:
            return ActionResult.rejected(f"Template {template_id} not found")
        error = self._validate(name, exercises)
        if error:
            return ActionResult.rejected(error)

        updated = WorkoutTemplate(
            id=current.id,
            name=name.strip(),
            exercises=list(exercises),
            notes=notes or None,
        )
        index = self._state.templates.index(current)
        self._state.templates[index] = updated
        self._persistence.save_templates(self._state.templates)
        self._pusher.push("update_template", updated)

        logger.info(f"Template updated: {updated.name} ({updated.id})")
        return ActionResult.ok(updated)

    def delete(self, template_id: str, confirmed: bool = False) -> ActionResult:
        template = self.get(template_id)
        if not confirmed:
            return ActionResult.needs_confirmation(f'Delete template "{template.name}"?')

        self._state.templates.remove(template)
        self._persistence.save_templates(self._state.templates)
        self._pusher.push("delete_template", template.id)

        logger.info(f"Template deleted: {template.name} ({template.id})")
        return ActionResult.ok(template)

    @staticmethod
    def _validate(name: str, exercises: List[TemplateExercise]) -> Optional[str]:
        if not name or not name.strip():
            return "Template name is required"
        if not exercises:
            return "Template must contain at least one exercise"
        return None
