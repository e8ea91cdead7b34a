# tests/fakes.py

from __future__ import annotations

import copy
from collections.abc import Sequence

from task_tracker.tasks.task_models import Task
from task_tracker.tasks.task_store import TaskStorageError


class InMemoryTaskRepo:
    """
    TaskRepo kept in a list.

    Stores deep copies so a service can't mutate "persisted" state without
    calling save(), same as with the JSON file.
    """

    def __init__(self, tasks: Sequence[Task] | None = None) -> None:
        self.tasks: list[Task] = copy.deepcopy(list(tasks or []))
        self.saves = 0

    def load(self) -> list[Task]:
        return copy.deepcopy(self.tasks)

    def save(self, tasks: Sequence[Task]) -> None:
        self.tasks = copy.deepcopy(list(tasks))
        self.saves += 1


class FailingTaskRepo:
    """TaskRepo whose load and/or save always raise TaskStorageError."""

    def __init__(self, *, fail_load: bool = True, fail_save: bool = True) -> None:
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.saves = 0

    def load(self) -> list[Task]:
        if self.fail_load:
            raise TaskStorageError("disk on fire")
        return []

    def save(self, tasks: Sequence[Task]) -> None:
        if self.fail_save:
            raise TaskStorageError("disk full")
        self.saves += 1


class FakeClock:
    """Deterministic epoch-ms clock: each call advances by `step`."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


class SequentialIds:
    def __init__(self, prefix: str = "task") -> None:
        self.prefix = prefix
        self.n = 0

    def __call__(self) -> str:
        self.n += 1
        return f"{self.prefix}-{self.n}"
