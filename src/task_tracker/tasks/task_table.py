# src/task_tracker/tasks/task_table.py

"""Box-drawn task table for `list` output."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from ..core import colors
from .task_models import Task, TaskStatus

HEADERS = ("ID", "Description", "Status", "Created At", "Updated At")

STATUS_COLOR: dict[TaskStatus, Callable[[str], str]] = {
    TaskStatus.PENDING: colors.yellow,
    TaskStatus.IN_PROGRESS: colors.purple,
    TaskStatus.DONE: colors.green,
}


def format_timestamp(ms: int | None) -> str:
    if ms is None:
        return "-"
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M:%S")


def task_row(task: Task) -> list[str]:
    paint = STATUS_COLOR.get(task.status, str)
    return [
        task.id,
        task.description,
        paint(task.status.value),
        format_timestamp(task.created_at),
        format_timestamp(task.updated_at),
    ]


def _pad(cell: str, width: int) -> str:
    return cell + " " * max(0, width - colors.visible_len(cell))


def _border(widths: Sequence[int], left: str, fill: str, mid: str, right: str) -> str:
    return left + mid.join(fill * (w + 2) for w in widths) + right


def render_table(rows: Sequence[Sequence[str]]) -> str:
    """Render rows (first row is the header) with a separator line between every row."""
    if not rows:
        return ""

    ncols = max(len(r) for r in rows)
    cells = [list(r) + [""] * (ncols - len(r)) for r in rows]
    widths = [max(colors.visible_len(r[c]) for r in cells) for c in range(ncols)]

    lines = [_border(widths, "╔", "═", "╤", "╗")]
    for i, row in enumerate(cells):
        lines.append("║ " + " │ ".join(_pad(c, w) for c, w in zip(row, widths)) + " ║")
        if i < len(cells) - 1:
            lines.append(_border(widths, "╟", "─", "┼", "╢"))
    lines.append(_border(widths, "╚", "═", "╧", "╝"))
    return "\n".join(lines)


def render_task_table(tasks: Sequence[Task]) -> str:
    return render_table([list(HEADERS), *(task_row(t) for t in tasks)])
