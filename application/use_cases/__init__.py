"""
Application Use Cases for the DreamShape workout tracker.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters. Every service shares the one
TrackerState owned by the WorkoutTracker controller.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Validation failures come back as ActionResult, not exceptions

Usage:
    from application.use_cases import TemplateService, WorkoutSessionService

    templates = TemplateService(state, persistence, pusher)
    result = templates.create("Push Day", exercises)

    session = WorkoutSessionService(state, persistence, pusher, templates=templates)
    session.start_from_template(result.value.id)
    session.finish(FinishOption.JUST_FINISH)
"""

from application.use_cases.base import ActionResult, TrackerService
from application.use_cases.manage_templates import TemplateService
from application.use_cases.manage_catalog import ExerciseCatalogService
from application.use_cases.workout_session import (
    EMPTY_WORKOUT_NAME,
    ExerciseChanges,
    FinishOption,
    FinishResult,
    WorkoutSessionService,
)
from application.use_cases.history import HistoryService
from application.use_cases.manage_profile import ProfileService
from application.use_cases.authenticate import AuthService
from application.use_cases.export_data import ExportResult, build_export, export_filename
from application.use_cases.sync_data import (
    MigrationResult,
    RemoteRepositories,
    RemoteSnapshot,
    SyncService,
)

__all__ = [
    # Shared
    "ActionResult",
    "TrackerService",
    # Templates and catalog
    "TemplateService",
    "ExerciseCatalogService",
    # Active workout
    "WorkoutSessionService",
    "FinishOption",
    "FinishResult",
    "ExerciseChanges",
    "EMPTY_WORKOUT_NAME",
    # History and profile
    "HistoryService",
    "ProfileService",
    # Account
    "AuthService",
    # Export
    "ExportResult",
    "build_export",
    "export_filename",
    # Sync
    "SyncService",
    "RemoteRepositories",
    "RemoteSnapshot",
    "MigrationResult",
]
