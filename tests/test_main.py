# tests/test_main.py

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from task_tracker.cli import main as cli_main
from task_tracker.config import get_settings
from task_tracker.tasks.task_service import TaskService


@pytest.fixture()
def db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "database" / "task.json"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TASK_TRACKER_DB_PATH", str(path))
    monkeypatch.setenv("TASK_TRACKER_LOG_TO_FILE", "0")
    monkeypatch.setenv("TASK_TRACKER_COLOR", "0")
    # keep pytest's own log capture handlers in place
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()


def test_end_to_end_scenario(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main.main(["add", "buy", "milk"]) == 0
    (record,) = json.loads(db.read_text("utf-8"))
    assert record["status"] == "todo"
    assert record["updated_at"] is None
    assert f"Task added (ID: {record['id']})" in capsys.readouterr().out

    assert cli_main.main(["mark-done", record["id"]]) == 0
    (record,) = json.loads(db.read_text("utf-8"))
    assert record["status"] == "done"
    assert record["description"] == "buy milk"
    assert isinstance(record["updated_at"], int)

    capsys.readouterr()
    assert cli_main.main(["list", "done"]) == 0
    out = capsys.readouterr().out
    assert "📋 Task List done" in out
    assert record["id"] in out

    assert cli_main.main(["delete", record["id"]]) == 0
    assert json.loads(db.read_text("utf-8")) == []

    capsys.readouterr()
    assert cli_main.main(["list", "all"]) == 0
    assert "No tasks found." in capsys.readouterr().out


def test_file_is_indented_with_two_spaces(db: Path) -> None:
    cli_main.main(["add", "x"])
    assert db.read_text("utf-8").splitlines()[1].startswith('  {')


def test_exit_codes(db: Path) -> None:
    assert cli_main.main(["frobnicate"]) == 1
    assert cli_main.main([]) == 1
    assert cli_main.main(["delete"]) == 1
    assert cli_main.main(["list", "someday"]) == 1
    assert cli_main.main(["delete", "missing-id"]) == 0


def test_corrupt_storage_exits_with_storage_code(db: Path) -> None:
    db.parent.mkdir(parents=True)
    db.write_text("not json", "utf-8")

    assert cli_main.main(["add", "x"]) == 2
    assert db.read_text("utf-8") == "not json"


def test_undecodable_storage_exits_with_storage_code(
    db: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    db.parent.mkdir(parents=True)
    db.write_bytes(b"\xff\xfe[]")

    assert cli_main.main(["list"]) == 2
    assert "Failed to list tasks" in capsys.readouterr().out


class _BrokenRepo:
    def load(self):
        raise RuntimeError("boom")

    def save(self, tasks):
        raise AssertionError("save must not be reached")


def test_unexpected_error_is_logged_and_raised(
    db: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(
        cli_main, "create_service", lambda settings=None: TaskService(_BrokenRepo())
    )

    with caplog.at_level(logging.ERROR, logger="task_tracker"):
        with pytest.raises(RuntimeError, match="boom"):
            cli_main.main(["list"])

    (record,) = [r for r in caplog.records if r.name == "task_tracker.cli.main"]
    assert "Unhandled error" in record.getMessage()
    assert record.exc_info is not None
