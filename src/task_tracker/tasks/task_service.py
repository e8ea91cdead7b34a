# src/task_tracker/tasks/task_service.py

"""
Task operations on top of a TaskRepo.

Every call is a full cycle: load the collection, find the task by exact id,
mutate in memory, save everything back. Results are returned as Result
values; storage failures surface as TaskError.IO_FAILURE and are never
turned into an empty collection.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable

from ..core.ports import TaskRepo
from .task_models import Result, Task, TaskError, TaskStatus
from .task_store import TaskStorageError

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
IdFactory = Callable[[], str]

ALL = "all"


def now_ms() -> int:
    return int(time.time() * 1000)


def _new_id() -> str:
    return str(uuid.uuid4())


def _find_index(tasks: list[Task], task_id: str) -> int:
    for i, task in enumerate(tasks):
        if task.id == task_id:
            return i
    return -1


class TaskService:
    def __init__(
        self,
        repo: TaskRepo,
        *,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
    ) -> None:
        self._repo = repo
        self._clock = clock or now_ms
        self._new_id = id_factory or _new_id

    # ---- helpers ----

    def _load(self) -> list[Task]:
        return self._repo.load()

    def _io_failure(self, action: str, exc: TaskStorageError) -> Result:
        logger.exception("Failed to %s: %s", action, exc)
        return Result.failure(TaskError.IO_FAILURE, str(exc))

    @staticmethod
    def _not_found(task_id: str) -> Result:
        return Result.failure(TaskError.NOT_FOUND, f"Task with ID {task_id} not found.")

    def _mutate(
        self, action: str, task_id: str, change: Callable[[Task], None]
    ) -> Result[Task]:
        try:
            tasks = self._load()
            idx = _find_index(tasks, task_id)
            if idx == -1:
                logger.info("%s: no task id=%s", action, task_id)
                return self._not_found(task_id)

            task = tasks[idx]
            change(task)
            task.updated_at = self._clock()
            self._repo.save(tasks)
        except TaskStorageError as exc:
            return self._io_failure(action, exc)

        logger.info("%s id=%s status=%s", action, task.id, task.status.value)
        return Result.success(task)

    # ---- public API ----

    def add(self, description: str) -> Result[Task]:
        try:
            tasks = self._load()
            task = Task(
                id=self._new_id(),
                description=description,
                status=TaskStatus.PENDING,
                created_at=self._clock(),
                updated_at=None,
            )
            tasks.append(task)
            self._repo.save(tasks)
        except TaskStorageError as exc:
            return self._io_failure("add task", exc)

        logger.info("Task added id=%s", task.id)
        return Result.success(task)

    def update(self, task_id: str, description: str) -> Result[Task]:
        def change(task: Task) -> None:
            task.description = description

        return self._mutate("update task", task_id, change)

    def set_status(self, task_id: str, status: TaskStatus) -> Result[Task]:
        def change(task: Task) -> None:
            task.status = status

        return self._mutate("set status", task_id, change)

    def mark_in_progress(self, task_id: str) -> Result[Task]:
        return self.set_status(task_id, TaskStatus.IN_PROGRESS)

    def mark_done(self, task_id: str) -> Result[Task]:
        return self.set_status(task_id, TaskStatus.DONE)

    def delete(self, task_id: str) -> Result[Task]:
        try:
            tasks = self._load()
            idx = _find_index(tasks, task_id)
            if idx == -1:
                logger.info("delete task: no task id=%s", task_id)
                return self._not_found(task_id)
            removed = tasks.pop(idx)
            self._repo.save(tasks)
        except TaskStorageError as exc:
            return self._io_failure("delete task", exc)

        logger.info("Task deleted id=%s", removed.id)
        return Result.success(removed)

    def list(self, status: TaskStatus | str | None = ALL) -> Result[list[Task]]:
        """
        Tasks matching the filter, in insertion order.

        An empty list is a successful result; callers decide how to
        report "no tasks".
        """
        if status is None or status == ALL:
            wanted = None
        else:
            try:
                wanted = TaskStatus.parse(str(status))
            except ValueError as exc:
                return Result.failure(TaskError.INVALID_ARGUMENT, str(exc))

        try:
            tasks = self._load()
        except TaskStorageError as exc:
            return self._io_failure("list tasks", exc)

        if wanted is not None:
            tasks = [t for t in tasks if t.status == wanted]
        return Result.success(tasks)
