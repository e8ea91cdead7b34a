# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - The pending state is stored as "todo"; that is what existing task files contain.
    - Any status may be set from any other, there is no transition table.
    """

    PENDING = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        value = (raw or "").strip()
        if value == "pending":
            return cls.PENDING
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid status: {raw!r}") from None

    @classmethod
    def choices(cls) -> list[str]:
        return [s.value for s in cls]


class TaskError(StrEnum):
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    IO_FAILURE = "io_failure"


def _epoch_ms(value: Any, field: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be integer epoch milliseconds, got {value!r}")
    return value


@dataclass(slots=True)
class Task:
    id: str
    description: str
    status: TaskStatus
    created_at: int  # epoch milliseconds
    updated_at: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        missing = [k for k in ("id", "description", "status", "created_at") if k not in raw]
        if missing:
            raise ValueError(f"task record is missing {', '.join(missing)}")

        for key in ("id", "description", "status"):
            if not isinstance(raw[key], str):
                raise ValueError(f"{key} must be a string, got {type(raw[key]).__name__}")

        updated_at = raw.get("updated_at")
        return cls(
            id=raw["id"],
            description=raw["description"],
            status=TaskStatus.parse(raw["status"]),
            created_at=_epoch_ms(raw["created_at"], "created_at"),
            updated_at=_epoch_ms(updated_at, "updated_at") if updated_at is not None else None,
        )


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a task operation: either a value or a typed error."""

    value: T | None = None
    error: TaskError | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TaskError, message: str = "") -> Result[T]:
        return cls(error=error, message=message)
