"""
Backup export use case.

Produces the JSON backup payload ``{workouts, profile, exportedAt}`` and its
download filename ``dreamshape-backup-YYYY-MM-DD.json``. Workouts and profile
use the same camelCase shape as the local store, so a backup can be read
back with the same models.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from application.state import TrackerState

EXPORT_FILENAME_PREFIX = "dreamshape-backup-"


@dataclass
class ExportResult:
    filename: str
    payload: Dict[str, Any]


def export_filename(now: datetime) -> str:
    return f"{EXPORT_FILENAME_PREFIX}{now.date().isoformat()}.json"


def build_export(state: TrackerState, now: Optional[datetime] = None) -> ExportResult:
    """Snapshot workout history and profile for download."""
    now = now or datetime.now(timezone.utc)
    payload = {
        "workouts": [log.to_json_dict() for log in state.workout_logs],
        "profile": state.profile.to_json_dict(),
        "exportedAt": now.isoformat(),
    }
    return ExportResult(filename=export_filename(now), payload=payload)
