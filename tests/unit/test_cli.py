"""
Unit tests for backend/cli.py
"""

import json
from unittest.mock import patch

import pytest

from application.local_persistence import LocalPersistence
from backend.cli import build_parser, main
from domain.models import ExerciseLog, WorkoutLog, WorkoutSet
from infrastructure.local import JsonFileStore

pytestmark = pytest.mark.unit


@pytest.fixture
def store_path(tmp_path, monkeypatch):
    for var in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY", "SUPABASE_ANON_KEY"):
        monkeypatch.delenv(var, raising=False)
    path = tmp_path / "store.json"
    LocalPersistence(JsonFileStore(path)).save_workout_logs(
        [
            WorkoutLog(
                template_name="Push Day",
                date="2024-05-14T18:00:00",
                duration=3600,
                exercises=[
                    ExerciseLog(
                        exercise_name="Bench Press (Barbell)",
                        sets=[WorkoutSet(weight=80, reps=5, completed=True)],
                    )
                ],
            )
        ]
    )
    return path


class TestParser:
    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_export_options(self):
        args = build_parser().parse_args(["--store", "s.json", "export", "-o", "-"])
        assert args.store == "s.json"
        assert args.output == "-"


class TestExport:
    def test_export_to_file(self, store_path, tmp_path):
        output = tmp_path / "backup.json"

        assert main(["--store", str(store_path), "export", "-o", str(output)]) == 0

        payload = json.loads(output.read_text())
        assert set(payload) == {"workouts", "profile", "exportedAt"}
        assert payload["workouts"][0]["templateName"] == "Push Day"

    def test_export_to_stdout(self, store_path, capsys):
        assert main(["--store", str(store_path), "export", "-o", "-"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert len(payload["workouts"]) == 1


class TestStats:
    def test_text_output(self, store_path, capsys):
        assert main(["--store", str(store_path), "stats", "--today", "2024-05-15"]) == 0
        out = capsys.readouterr().out
        assert "Total workouts:    1" in out
        assert "Current streak:    1 day(s)" in out
        assert "Bench Press (Barbell): 80" in out

    def test_json_output(self, store_path, capsys):
        assert main(["--store", str(store_path), "stats", "--today", "2024-05-15", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["stats"]["total_workouts"] == 1
        assert data["summary"]["favorite_exercise"] == "Bench Press (Barbell)"

    def test_bad_date_returns_error(self, store_path, capsys):
        assert main(["--store", str(store_path), "stats", "--today", "yesterday"]) == 1
        assert "Error" in capsys.readouterr().err


class TestServe:
    def test_runs_uvicorn_with_options(self):
        with patch("backend.cli.uvicorn.run") as mock_run:
            assert main(["serve", "--port", "9000"]) == 0
        mock_run.assert_called_once_with("backend.main:app", host="127.0.0.1", port=9000, reload=False)
