# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..core.colors import green, purple, red, yellow
from ..tasks.task_models import Result, TaskError, TaskStatus
from ..tasks.task_service import ALL, TaskService
from ..tasks.task_table import render_task_table

Emit = Callable[[str], None]
CommandHandler = Callable[[TaskService, list[str], Emit], int]

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_STORAGE = 2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    usage: str
    help_text: str


class CommandRegistry:
    """Maps `task-tracker <command> ...` names to handlers returning an exit code."""

    def __init__(self, prog: str = "task-tracker") -> None:
        self.prog = prog
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        *,
        usage: str = "",
        help_text: str = "",
    ) -> None:
        self._commands[name.lower()] = _Command(handler, usage, help_text)

    def names(self) -> list[str]:
        return list(self._commands)

    def dispatch(
        self,
        service: TaskService,
        argv: Sequence[str],
        emit: Emit = print,
    ) -> int:
        """Run one command line (without the program name) and return its exit code."""
        if not argv:
            emit(red("❌ No command given", bold=True))
            self.print_usage(emit)
            return EXIT_USAGE

        name, args = argv[0], list(argv[1:])
        command = self._commands.get(name)
        if command is None:
            logger.debug("Unknown command %r", name)
            emit(red(f"❌ Unknown command: {name}", bold=True))
            self.print_usage(emit)
            return EXIT_USAGE

        return command.handler(service, args, emit)

    def print_usage(self, emit: Emit = print) -> None:
        emit(purple(f"Usage: {self.prog} <command> [args]", bold=True))
        emit(green("Commands:", bold=True))
        for name, command in self._commands.items():
            line = f"  {name} {command.usage}".rstrip()
            if command.help_text:
                line = f"{line:<36} {command.help_text}"
            emit(green(line, bold=True))


registry = CommandRegistry()


def _require_id(args: list[str], emit: Emit) -> str | None:
    if not args or not args[0]:
        emit(red("❌ Please provide a task ID", bold=True))
        return None
    return args[0]


def _report(result: Result, emit: Emit, success: str, failed_action: str) -> int:
    if result.ok:
        emit(green(success, bold=True))
        return EXIT_OK
    if result.error is TaskError.NOT_FOUND:
        emit(red(f"❌ {result.message}", bold=True))
        return EXIT_OK
    emit(red(f"❌ Failed to {failed_action}", bold=True))
    if result.message:
        emit(red(result.message))
    return EXIT_STORAGE


def cmd_add(service: TaskService, args: list[str], emit: Emit) -> int:
    result = service.add(" ".join(args))
    task_id = result.value.id if result.ok and result.value else ""
    return _report(result, emit, f"✅ Task added (ID: {task_id})", "add task")


def cmd_update(service: TaskService, args: list[str], emit: Emit) -> int:
    task_id = _require_id(args, emit)
    if task_id is None:
        return EXIT_USAGE
    result = service.update(task_id, " ".join(args[1:]))
    return _report(result, emit, f"✅ Task updated (ID: {task_id})", "update task")


def cmd_delete(service: TaskService, args: list[str], emit: Emit) -> int:
    task_id = _require_id(args, emit)
    if task_id is None:
        return EXIT_USAGE
    result = service.delete(task_id)
    return _report(result, emit, f"✅ Task deleted (ID: {task_id})", "delete task")


def cmd_mark_in_progress(service: TaskService, args: list[str], emit: Emit) -> int:
    task_id = _require_id(args, emit)
    if task_id is None:
        return EXIT_USAGE
    result = service.mark_in_progress(task_id)
    return _report(
        result,
        emit,
        f"✅ Task marked as in-progress (ID: {task_id})",
        "mark task as in-progress",
    )


def cmd_mark_done(service: TaskService, args: list[str], emit: Emit) -> int:
    task_id = _require_id(args, emit)
    if task_id is None:
        return EXIT_USAGE
    result = service.mark_done(task_id)
    return _report(result, emit, f"✅ Task marked as done (ID: {task_id})", "mark task as done")


def cmd_list(service: TaskService, args: list[str], emit: Emit) -> int:
    """
    list          -> every task
    list all      -> every task
    list <status> -> only tasks with that status (todo | in-progress | done)
    """
    raw = args[0] if args else ALL
    if raw == ALL:
        status_filter: TaskStatus | str = ALL
    else:
        try:
            status_filter = TaskStatus.parse(raw)
        except ValueError:
            emit(red(f"❌ Invalid status: {raw}", bold=True))
            emit(purple(f"Valid statuses are: {ALL}, {', '.join(TaskStatus.choices())}", bold=True))
            return EXIT_USAGE

    result = service.list(status_filter)
    if not result.ok:
        emit(red("❌ Failed to list tasks", bold=True))
        if result.message:
            emit(red(result.message))
        return EXIT_STORAGE

    tasks = result.value or []
    if not tasks:
        emit(yellow("⚠️ No tasks found.", bold=True))
        return EXIT_OK

    emit(purple(f"📋 Task List {status_filter}", bold=True))
    emit(render_task_table(tasks))
    return EXIT_OK


def cmd_help(service: TaskService, args: list[str], emit: Emit) -> int:
    registry.print_usage(emit)
    return EXIT_OK


registry.register("add", cmd_add, usage="<description>", help_text="Add a new task")
registry.register(
    "update", cmd_update, usage="<id> <new description>", help_text="Change a task's description"
)
registry.register("delete", cmd_delete, usage="<id>", help_text="Delete a task")
registry.register(
    "mark-in-progress", cmd_mark_in_progress, usage="<id>", help_text="Set status to in-progress"
)
registry.register("mark-done", cmd_mark_done, usage="<id>", help_text="Set status to done")
registry.register("list", cmd_list, usage="[status]", help_text="List tasks (all, todo, in-progress, done)")
registry.register("help", cmd_help, help_text="Show this help")
