# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStorageError(Exception):
    """Reading, parsing or writing the task file failed."""


class JsonTaskStore:
    """
    JSON file task store.

    The file holds the whole collection as a JSON array and is rewritten in
    full on every save. There is no locking: two processes writing at the
    same time race, and the last writer wins.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self._path.write_text("[]", "utf-8")
            logger.info("Created empty task file %s", self._path)

    def load(self) -> list[Task]:
        try:
            self._ensure_file()
            raw = self._path.read_bytes()
        except OSError as exc:
            raise TaskStorageError(f"Cannot read {self._path}: {exc}") from exc

        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise TaskStorageError(f"{self._path} is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise TaskStorageError(f"{self._path} is not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise TaskStorageError(
                f"{self._path} must contain a JSON array, got {type(data).__name__}"
            )

        tasks: list[Task] = []
        for i, item in enumerate(data):
            try:
                tasks.append(Task.from_dict(item))
            except (TypeError, ValueError, OverflowError) as exc:
                raise TaskStorageError(f"{self._path}: bad task record #{i}: {exc}") from exc

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStorageError(f"Cannot write {self._path}: {exc}") from exc

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
