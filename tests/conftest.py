# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.core import colors
from task_tracker.tasks.task_service import TaskService
from task_tracker.tasks.task_store import JsonTaskStore

from .fakes import FakeClock, InMemoryTaskRepo, SequentialIds


@pytest.fixture(autouse=True)
def plain_output():
    """Tests compare plain text unless they turn colors on themselves."""
    previous = colors.is_enabled()
    colors.set_enabled(False)
    yield
    colors.set_enabled(previous)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def repo() -> InMemoryTaskRepo:
    return InMemoryTaskRepo()


@pytest.fixture()
def service(repo: InMemoryTaskRepo, clock: FakeClock) -> TaskService:
    return TaskService(repo, clock=clock, id_factory=SequentialIds())


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "database" / "task.json"


@pytest.fixture()
def store(db_path: Path) -> JsonTaskStore:
    return JsonTaskStore(db_path)
