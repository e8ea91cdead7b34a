# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task service.

The service depends on a Protocol instead of the JSON file store,
so tests can run it against an in-memory repository.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection storage: load everything, save everything."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> None: ...
