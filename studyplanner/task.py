"""Study tasks and their tab-separated file records."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator

from .console import Console
from .dates import compare_dates, format_date, is_valid_date

NO_COMPLETION_DATE = "00000000"
TITLE_MAX = 20
DESCRIPTION_MAX = 255
COURSE_MAX = 50
DATE_MAX = 8
PRIORITY_CHOICES = ("low", "medium", "high")


class Priority(enum.IntEnum):
    UNDEFINED = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


def parse_priority(text: str) -> Priority:
    """Map 'low', 'medium' or 'high' to a priority; anything else is UNDEFINED."""
    return {
        "low": Priority.LOW,
        "medium": Priority.MEDIUM,
        "high": Priority.HIGH,
    }.get(text, Priority.UNDEFINED)


def _check_length(name: str, value: str, limit: int) -> None:
    if len(value) > limit:
        raise ValueError(f"{name} longer than {limit} characters: {value!r}")


@dataclass
class Task:
    title: str
    description: str = ""
    course: str = ""
    estimated_time: int = 0
    start_date: str = NO_COMPLETION_DATE
    deadline: str = NO_COMPLETION_DATE
    priority: Priority = Priority.UNDEFINED
    completion_percentage: float = 0.0
    completion_date: str = NO_COMPLETION_DATE

    def __post_init__(self) -> None:
        _check_length("title", self.title, TITLE_MAX)
        _check_length("description", self.description, DESCRIPTION_MAX)
        _check_length("course", self.course, COURSE_MAX)
        for name in ("start_date", "deadline", "completion_date"):
            _check_length(name, getattr(self, name), DATE_MAX)
        try:
            self.priority = Priority(self.priority)
        except ValueError:
            self.priority = Priority.UNDEFINED

    def set_title(self, title: str) -> None:
        _check_length("title", title, TITLE_MAX)
        self.title = title

    def set_deadline(self, date: str, today: str | None) -> None:
        if not is_valid_date(date, today):
            raise ValueError(f"invalid date: {date!r}")
        self.deadline = date

    def set_completion_date(self, date: str, today: str | None) -> None:
        if not is_valid_date(date, today):
            raise ValueError(f"invalid date: {date!r}")
        self.completion_date = date

    def set_completion_percentage(self, percentage: float) -> None:
        if percentage < 0.0 or percentage > 100.0:
            raise ValueError("invalid percentage. Must be between 0 and 100.")
        self.completion_percentage = percentage

    def restart(self, today: str) -> None:
        """Start the task over from ``today`` with no progress."""
        self.completion_percentage = 0.0
        self.start_date = today

    def details(self) -> str:
        """Multi-line description of every field."""
        completed = (
            "Not completed"
            if self.completion_date == NO_COMPLETION_DATE
            else format_date(self.completion_date)
        )
        return (
            f"\n\tTitle: {self.title}"
            f"\n\tDescription: {self.description}"
            f"\n\tCourse: {self.course}"
            f"\n\tEstimated Time: {self.estimated_time} minutes"
            f"\n\tStart Date: {format_date(self.start_date)}"
            f"\n\tDeadline: {format_date(self.deadline)}"
            f"\n\tCompletion Date: {completed}"
            f"\n\tCompletion Percentage: {self.completion_percentage:.2f}%"
            f"\n\tPriority: {self.priority.label}"
        )

    def summary(self, today: str) -> str:
        """One-line status: completed, expired, due today or pending."""
        head = f"- {self.title} ({self.course})"
        if self.completion_percentage == 100.0:
            return f"{head} Completed on: {format_date(self.completion_date)}\n"
        remaining = compare_dates(self.deadline, today)
        if remaining < 0:
            return f"{head} Expired on: {format_date(self.deadline)}\n"
        if remaining == 0:
            return f"{head} ! Due today !\n"
        return f"{head} Deadline: {format_date(self.deadline)}\n"


def format_task(task: Task) -> str:
    """Serialise a task as one tab-separated line."""
    return (
        f"{task.title}\t{task.description}\t{task.course}\t{task.estimated_time}\t"
        f"{task.start_date}\t{task.deadline}\t{task.completion_percentage:.2f}\t"
        f"{task.completion_date}\t{int(task.priority)}\n"
    )


def parse_task(line: str) -> Task:
    """Parse one tab-separated line; raise ValueError if it is malformed."""
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) != 9:
        raise ValueError(f"malformed task record: {line!r}")
    title, description, course, estimated, start, deadline, percent, completed, priority = fields
    try:
        estimated_time = int(estimated)
        percentage = float(percent)
        priority_value = int(priority)
    except ValueError as exc:
        raise ValueError(f"malformed task record: {line!r}") from exc
    return Task(
        title=title,
        description=description,
        course=course,
        estimated_time=estimated_time,
        start_date=start.strip(),
        deadline=deadline.strip(),
        priority=priority_value,
        completion_percentage=percentage,
        completion_date=completed.strip(),
    )


def read_tasks(stream: Iterable[str]) -> Iterator[Task]:
    """Yield tasks from the lines of ``stream``, stopping at the first bad record."""
    for line in stream:
        if not line.strip():
            continue
        try:
            task = parse_task(line)
        except ValueError:
            return
        yield task


def new_task(console: Console, today: str) -> Task:
    """Ask the user for every field of a new task."""
    title = console.prompt("\nEnter title (max 20): ", TITLE_MAX)
    description = console.prompt("\nEnter description (max 255): ", DESCRIPTION_MAX)
    course = console.prompt("\nEnter course name (max 50): ", COURSE_MAX)

    while True:
        estimated_time = console.read_int("\nEnter estimated time (in minutes): ")
        if estimated_time >= 0:
            break
        console.write("\nError: estimated time cannot be negative.")

    while True:
        deadline = console.prompt("\nEnter deadline (format ddmmyyyy): ", DATE_MAX)
        if is_valid_date(deadline, today):
            break
        console.write("\n!! Invalid date !! Try again !!")

    while True:
        text = console.prompt("\nEnter priority level (low/medium/high): ", 6)
        if text in PRIORITY_CHOICES:
            priority = parse_priority(text)
            break
        console.write("\n!! Error, try again !!")

    task = Task(
        title=title,
        description=description,
        course=course,
        estimated_time=estimated_time,
        start_date=today,
        deadline=deadline,
        priority=priority,
    )
    console.clear()
    console.write("\nNew data added:\n")
    console.write(task.details())
    return task