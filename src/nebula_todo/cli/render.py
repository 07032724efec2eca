# src/nebula_todo/cli/render.py

"""Plain-text table rendering for the console (colorama for colours)."""

from __future__ import annotations

from collections.abc import Sequence

from colorama import Fore, Style

from ..tasks.task_models import Task, TaskStatus

HEADERS = ("ID", "Title", "Description", "Status")
HEADER_COLORS = (Fore.GREEN, Fore.CYAN, Fore.YELLOW, Fore.RED)

STATUS_COLORS = {
    TaskStatus.TODO: Fore.YELLOW,
    TaskStatus.IN_PROGRESS: Fore.BLUE,
    TaskStatus.DONE: Fore.GREEN,
}


def _one_line(text: str) -> str:
    return " ".join(text.split())


def _paint(text: str, code: str, color: bool, *, bold: bool = False) -> str:
    if not color:
        return text
    prefix = (Style.BRIGHT if bold else "") + code
    return f"{prefix}{text}{Style.RESET_ALL}"


def render_status(status: TaskStatus, *, color: bool = True) -> str:
    return _paint(status.label, STATUS_COLORS[status], color)


def render_task_table(tasks: Sequence[Task], *, color: bool = True) -> str:
    """
    Render tasks as a boxed table:

        +----+-----------+-------------+--------+
        | ID | Title     | Description | Status |
        +----+-----------+-------------+--------+
        | 1  | Buy milk  |             | Todo   |
        +----+-----------+-------------+--------+

    Widths are computed on plain text; colour codes wrap the padded cells.
    """
    rows = [
        (str(t.id), _one_line(t.title), _one_line(t.description), t.status.label)
        for t in tasks
    ]
    widths = [max([len(h)] + [len(r[i]) for r in rows]) for i, h in enumerate(HEADERS)]
    sep = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    header_cells = [
        _paint(h.ljust(w), code, color, bold=True)
        for h, w, code in zip(HEADERS, widths, HEADER_COLORS)
    ]
    lines = [sep, "| " + " | ".join(header_cells) + " |", sep]

    for task, row in zip(tasks, rows):
        cells = [cell.ljust(w) for cell, w in zip(row, widths)]
        cells[3] = _paint(cells[3], STATUS_COLORS[task.status], color)
        lines.append("| " + " | ".join(cells) + " |")

    lines.append(sep)
    return "\n".join(lines)


def render_task_line(task: Task, *, color: bool = True) -> str:
    """Compact one-line form: '#2   Done         Write report'."""
    status = render_status(task.status, color=color)
    pad = " " * max(0, 12 - len(task.status.label))
    return f"#{task.id:<3} {status}{pad} {task.title}"
