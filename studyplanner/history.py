"""Completed and expired tasks kept newest-first."""

from __future__ import annotations

import os
from collections import deque
from typing import Iterable, Iterator

from .task import Task, format_task, read_tasks

_RULE = "\n\t***************************\n"
_COMPLETED_HEADER = "\n\t    - completed tasks: -    \n\n"
_EXPIRED_HEADER = "\n\t    - expired tasks: -    \n\n"


class TaskHistory:
    """A sequence of tasks where new entries go to the front."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: deque[Task] = deque(tasks or ())

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)

    def push(self, task: Task) -> None:
        """Put ``task`` at the front."""
        self._tasks.appendleft(task)

    def first(self) -> Task | None:
        """The front task, or None when empty."""
        return self._tasks[0] if self._tasks else None

    def find(self, title: str) -> Task | None:
        """The first task with exactly this title, or None."""
        return next((task for task in self._tasks if task.title == title), None)

    def remove(self, task: Task) -> Task:
        """Remove this very task object and return it."""
        for position, item in enumerate(self._tasks):
            if item is task:
                del self._tasks[position]
                return item
        raise ValueError(f"task {task.title!r} is not in the history")

    def remove_by_title(self, title: str) -> Task:
        """Remove the first task with this title and return it."""
        task = self.find(title)
        if task is None:
            raise KeyError(f"Element not found: {title!r}")
        return self.remove(task)

    def clear(self) -> None:
        self._tasks.clear()

    def render(self, today: str) -> str:
        """Numbered summaries under a completed or expired heading."""
        if not self._tasks:
            return ""
        first = self._tasks[0]
        header = (
            _COMPLETED_HEADER
            if first.completion_percentage == 100.0
            else _EXPIRED_HEADER
        )
        body = "".join(
            f"Task {number} {task.summary(today)}"
            for number, task in enumerate(self._tasks, 1)
        )
        return f"{_RULE}{header}{body}{_RULE}\n"

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write one record per task, front first."""
        with open(path, "w", encoding="utf-8") as stream:
            stream.writelines(format_task(task) for task in self._tasks)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "TaskHistory":
        """Read records from ``path``; each one is pushed to the front in turn.

        A missing file gives an empty history.
        """
        history = cls()
        try:
            with open(path, encoding="utf-8") as stream:
                for task in read_tasks(stream):
                    history.push(task)
        except FileNotFoundError:
            pass
        return history