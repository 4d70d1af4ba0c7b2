"""Data file locations, deadline sweeps and the weekly report file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .dates import compare_dates, format_date
from .history import TaskHistory
from .pqueue import TaskQueue
from .task import Task

_REPORT_TITLE = "\n$\n\n\t      --- Weekly Report ---\n\n"
_REPORT_END = "\n\n\t      ---------------------\n\n$\n"
_BLOCK_MARK = "$"

_LAYOUTS = {
    "Data": Path("./Data"),
    "test": Path("./test/output"),
}


@dataclass(frozen=True)
class DataPaths:
    """Where the planner keeps its task files and its report file."""

    progress: Path
    completed: Path
    expired: Path
    report: Path


def data_paths(folder: str = "Data") -> DataPaths:
    """File locations for the named layout, ``"Data"`` or ``"test"``."""
    try:
        base = _LAYOUTS[folder]
    except KeyError:
        raise ValueError(f"unknown data folder: {folder!r}") from None
    return DataPaths(
        progress=base / "progress.txt",
        completed=base / "completed.txt",
        expired=base / "expired.txt",
        report=base / "report.txt",
    )


def move_expired(queue: TaskQueue, expired: TaskHistory, today: str) -> list[Task]:
    """Move every task whose deadline is before ``today`` to ``expired``.

    Returns the moved tasks in the order they were moved.
    """
    moved: list[Task] = []
    index = 0
    while index < len(queue):
        task = queue[index]
        if compare_dates(task.deadline, today) < 0:
            expired.push(queue.remove(task))
            moved.append(task)
        else:
            index += 1
    return moved


def _count_line(count: int, kind: str) -> str:
    return f"* There are {count if count else 'no'} {kind} task"


def _completed_section(completed: TaskHistory, today: str, monday: str) -> str:
    lines = [
        f"- {task.title} ({task.course}) Completed on: "
        f"{format_date(task.completion_date)}\n"
        for task in completed
        if compare_dates(task.completion_date, monday) >= 0
        and compare_dates(task.completion_date, today) <= 0
    ]
    return "\n+ Completed tasks:\n" + "".join(lines) + _count_line(len(lines), "completed")


def _progress_section(in_progress: TaskQueue, today: str) -> str:
    lines = []
    for task in in_progress:
        if compare_dates(task.deadline, today) == 0:
            lines.append(f"- {task.title} ({task.course}) ! Due today !\n")
        else:
            lines.append(
                f"- {task.title} ({task.course}) Deadline: "
                f"{format_date(task.deadline)}\n"
            )
    return (
        "\n\n+ Tasks in progress:\n"
        + "".join(lines)
        + _count_line(len(lines), "in progress")
    )


def _expired_section(expired: TaskHistory, today: str, monday: str) -> str:
    lines = [
        f"- {task.title} ({task.course}) Expired on: {format_date(task.deadline)}\n"
        for task in expired
        if compare_dates(task.deadline, monday) >= 0
        and compare_dates(task.deadline, today) < 0
    ]
    return "\n\n+ Expired tasks:\n" + "".join(lines) + _count_line(len(lines), "expired")


def write_weekly_report(
    path: str | os.PathLike[str],
    completed: TaskHistory,
    in_progress: TaskQueue,
    expired: TaskHistory,
    today: str,
    monday: str,
) -> str:
    """Append a report covering ``monday`` to ``today`` and return its text."""
    parts = [today, _REPORT_TITLE]
    if completed:
        parts.append(_completed_section(completed, today, monday))
    parts.append(_progress_section(in_progress, today))
    if expired:
        parts.append(_expired_section(expired, today, monday))
    parts.append(_REPORT_END)
    text = "".join(parts)
    with open(path, "a", encoding="utf-8") as stream:
        stream.write(text)
    return text


def find_report(path: str | os.PathLike[str], start_date: str) -> str | None:
    """Body of the report dated ``start_date``, or None if there is none.

    The body is every line between the two ``$`` markers that follow the
    date line, each ending in a newline.
    """
    with open(path, encoding="utf-8") as stream:
        lines = (line.rstrip("\n") for line in stream)
        for line in lines:
            if line == start_date:
                break
        else:
            return None
        for line in lines:
            if line.startswith(_BLOCK_MARK):
                break
        else:
            return ""
        body = []
        for line in lines:
            if line.startswith(_BLOCK_MARK):
                break
            body.append(line + "\n")
        return "".join(body)


def report_exists(path: str | os.PathLike[str], start_date: str) -> bool:
    """True when the report file holds a report dated ``start_date``."""
    try:
        return find_report(path, start_date) is not None
    except FileNotFoundError:
        return False