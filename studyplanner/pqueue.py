"""Tasks in progress, held in a binary max-heap ordered by priority."""

from __future__ import annotations

import os
from typing import Iterable, Iterator

from .task import Task, format_task, read_tasks

_RULE = "\n\t***************************\n"
_HEADER = "\n\t   - Tasks in progress: -    \n\n"


class TaskQueue:
    """Max-heap of tasks; iteration follows the heap's array order."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._heap: list[Task] = []
        for task in tasks or ():
            self.push(task)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._heap)

    def __getitem__(self, index: int) -> Task:
        if not 0 <= index < len(self._heap):
            raise IndexError(f"queue index out of range: {index}")
        return self._heap[index]

    def __bool__(self) -> bool:
        return bool(self._heap)

    def _sift_up(self) -> None:
        heap = self._heap
        pos = len(heap) - 1
        while pos > 0:
            parent = (pos - 1) // 2
            if heap[pos].priority <= heap[parent].priority:
                break
            heap[pos], heap[parent] = heap[parent], heap[pos]
            pos = parent

    def _sift_down(self, pos: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = pos
            for child in (2 * pos + 1, 2 * pos + 2):
                if child < size and heap[child].priority > heap[largest].priority:
                    largest = child
            if largest == pos:
                return
            heap[pos], heap[largest] = heap[largest], heap[pos]
            pos = largest

    def push(self, task: Task) -> None:
        self._heap.append(task)
        self._sift_up()

    def peek(self) -> Task:
        """The highest-priority task."""
        if not self._heap:
            raise IndexError("peek from an empty queue")
        return self._heap[0]

    def pop_max(self) -> Task:
        """Remove and return the highest-priority task."""
        if not self._heap:
            raise IndexError("pop from an empty queue")
        return self.remove_at(0)

    def find(self, title: str) -> Task | None:
        """The first task in array order with this title, or None."""
        return next((task for task in self._heap if task.title == title), None)

    def index_of(self, task: Task) -> int:
        """Position of this very task object in the heap array."""
        for position, item in enumerate(self._heap):
            if item is task:
                return position
        raise ValueError(f"task {task.title!r} not found in queue")

    def remove(self, task: Task) -> Task:
        """Remove this very task object and return it."""
        return self.remove_at(self.index_of(task))

    def remove_at(self, index: int) -> Task:
        """Remove the task at ``index``, fill the gap with the last one, sift down."""
        if not 0 <= index < len(self._heap):
            raise IndexError(f"queue index out of range: {index}")
        removed = self._heap[index]
        last = self._heap.pop()
        if index < len(self._heap):
            self._heap[index] = last
            self._sift_down(index)
        return removed

    def render(self, today: str) -> str:
        """Numbered summaries of every task in progress."""
        if not self._heap:
            return ""
        body = "".join(
            f"Task {number} {task.summary(today)}"
            for number, task in enumerate(self._heap, 1)
        )
        return f"{_RULE}{_HEADER}{body}{_RULE}\n"

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write one record per task in array order."""
        with open(path, "w", encoding="utf-8") as stream:
            stream.writelines(format_task(task) for task in self._heap)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "TaskQueue":
        """Push every record of ``path``; a missing file gives an empty queue."""
        queue = cls()
        try:
            with open(path, encoding="utf-8") as stream:
                for task in read_tasks(stream):
                    queue.push(task)
        except FileNotFoundError:
            pass
        return queue