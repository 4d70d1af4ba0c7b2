"""The study planner: tasks in progress, completed and expired, and its menus."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .console import Console
from .dates import (
    compare_dates,
    format_date,
    is_valid_date,
    last_week_date,
    previous_monday,
)
from .history import TaskHistory
from .pqueue import TaskQueue
from .report import (
    DataPaths,
    find_report,
    move_expired,
    report_exists,
    write_weekly_report,
)
from .task import (
    COURSE_MAX,
    DATE_MAX,
    DESCRIPTION_MAX,
    NO_COMPLETION_DATE,
    PRIORITY_CHOICES,
    TITLE_MAX,
    Task,
    new_task,
    parse_priority,
)

_PRIORITY_INPUT_MAX = 6

_MODIFY_MENU = (
    "\n\n\t      --- Modification Menu ---\n\n"
    "1. Change title\n"
    "2. Change description\n"
    "3. Change course\n"
    "4. Change estimated time\n"
    "5. Change deadline\n"
    "6. Change priority\n"
    "7. Change completion percentage\n"
    "8. See the changes made\n"
    "0. Return to main menu\n"
)


def _ensure_parent(path: str | os.PathLike[str]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


@dataclass
class Planner:
    """Everything the user is studying, split by state."""

    paths: DataPaths
    today: str
    console: Console
    in_progress: TaskQueue = field(default_factory=TaskQueue)
    completed: TaskHistory = field(default_factory=TaskHistory)
    expired: TaskHistory = field(default_factory=TaskHistory)

    @classmethod
    def open(
        cls, paths: DataPaths, today: str, console: Console | None = None
    ) -> "Planner":
        """Load the data files, expire overdue tasks and write Monday's report."""
        planner = cls(
            paths=paths,
            today=today,
            console=console if console is not None else Console(),
            in_progress=TaskQueue.load(paths.progress),
            completed=TaskHistory.load(paths.completed),
            expired=TaskHistory.load(paths.expired),
        )
        planner._check_expired()
        if compare_dates(today, previous_monday(today)) == 0 and not report_exists(
            paths.report, today
        ):
            _ensure_parent(paths.report)
            write_weekly_report(
                paths.report,
                planner.completed,
                planner.in_progress,
                planner.expired,
                today,
                last_week_date(today),
            )
        return planner

    def _check_expired(self) -> list[Task]:
        out = self.console
        if not self.in_progress:
            out.write("\nThe queue is empty or non-existent.\n")
            return []
        moved = move_expired(self.in_progress, self.expired, self.today)
        for task in moved:
            out.write(f"\nTask '{task.title}' expired")
        if not self.in_progress:
            out.write("\nAll tasks have expired.\n")
        else:
            out.write("\nDeadline check completed\n")
        return moved

    def close(self) -> None:
        """Write every collection back to its data file."""
        for path in (self.paths.progress, self.paths.completed, self.paths.expired):
            _ensure_parent(path)
        self.in_progress.save(self.paths.progress)
        self.completed.save(self.paths.completed)
        self.expired.save(self.paths.expired)
        self.console.clear()
        self.console.write("\n--- Study session ended ---\n")

    def insert(self) -> Task:
        """Ask for a new task and queue it."""
        task = new_task(self.console, self.today)
        self.in_progress.push(task)
        self.console.write("\n\nTask successfully added to the in-progress queue.\n")
        self.console.wait_for_x()
        return task

    def _select_task(self, action: str) -> Task | None:
        out = self.console
        while True:
            title = out.prompt(f"\nEnter the title of the task to {action}: ", TITLE_MAX)
            task = self.in_progress.find(title)
            out.write("\nThe selected task is: \n\n")
            if task is None:
                out.write("\nError: task is NULL or does not exist\n")
            else:
                out.write(task.details())
            answer = out.read_char("\n\nWould you pick another task? (y/n) ")
            if answer == "n":
                return task

    def _ask_priority(self) -> str:
        while True:
            text = self.console.prompt(
                "\nEnter priority level (low/medium/high): ", _PRIORITY_INPUT_MAX
            )
            if text in PRIORITY_CHOICES:
                return text
            self.console.write("\n!! Error: Invalid input, please try again !!")

    def _ask_deadline(self) -> str:
        while True:
            date = self.console.prompt(
                "\nEnter the new deadline (format ddmmyyyy): ", DATE_MAX
            )
            if is_valid_date(date, self.today):
                return date
            self.console.write("\n!! Invalid date !! Please try again !!")

    def modify_task(self) -> Task | None:
        """Pick a task in progress and edit it through the modification menu."""
        out = self.console
        task = self._select_task("modify")
        if task is None:
            out.write("\nError: task not found.\n")
            return None
        title = task.title

        while True:
            out.clear()
            out.write(_MODIFY_MENU)
            choice = out.read_int("Choose an option: ")
            if choice == 0:
                return task
            if choice == 1:
                title = out.prompt("\nEnter the new title (max 20): ", TITLE_MAX)
                task.set_title(title)
                out.write(f"\nTitle successfully changed to '{title}'.\n")
            elif choice == 2:
                task.description = out.prompt(
                    "\nEnter the new description (max 255): ", DESCRIPTION_MAX
                )
                out.write(f"\nDescription successfully changed for task '{title}'.\n")
            elif choice == 3:
                task.course = out.prompt("\nEnter the new course (max 50): ", COURSE_MAX)
                out.write(f"\nCourse successfully changed for task '{title}'.\n")
            elif choice == 4:
                while True:
                    minutes = out.read_int("\nEnter the new estimated time (in minutes): ")
                    if minutes >= 0:
                        break
                    out.write("\nError: estimated time cannot be negative.")
                task.estimated_time = minutes
                out.write(f"\nEstimated time successfully changed for task '{title}'.\n")
            elif choice == 5:
                task.set_deadline(self._ask_deadline(), self.today)
                out.write(f"\nDeadline successfully changed for task '{title}'.\n")
            elif choice == 6:
                task.priority = parse_priority(self._ask_priority())
                out.write(f"\nPriority successfully changed for task '{title}'.\n")
            elif choice == 7:
                while True:
                    percentage = out.read_float(
                        "\nEnter the new completion percentage (0-100): "
                    )
                    if 0 <= percentage <= 100:
                        break
                    out.write("\nError: The percentage must be between 0 and 100.\n")
                if percentage == 100.0:
                    out.write("\nGreat job, the task is complete\n")
                    self.set_completed(task)
                else:
                    task.set_completion_percentage(percentage)
                    out.write(
                        f"\nCompletion percentage successfully changed for task '{title}'.\n"
                    )
            elif choice == 8:
                out.write(task.details())
                out.wait_for_x()
            else:
                out.write("Invalid choice, please try again.\n")

    def delete_task(self) -> Task | None:
        """Pick a task in progress and drop it."""
        task = self._select_task("delete")
        if task is None:
            self.console.write("\nError: task not found.\n")
            return None
        return self.in_progress.remove(task)

    def restore_expired_task(self) -> Task | None:
        """Move an expired task back into progress with a new priority and deadline."""
        out = self.console
        if not self.expired:
            out.write("\nError: the queue or the list is empty or non-existent\n")
            return None
        title = out.prompt("\nEnter the title of the task to restore: ", TITLE_MAX)
        out.clear()
        out.write("\n\n      --- Restore Expired Task ---\n\n")
        task = self.expired.find(title)
        if task is None:
            out.write(f"\nTask with title '{title}' not found in the expired list.\n")
            return None
        task.restart(self.today)
        task.priority = parse_priority(self._ask_priority())
        task.set_deadline(self._ask_deadline(), self.today)
        self.in_progress.push(self.expired.remove(task))
        out.write(f"\nTask '{title}' successfully restored.\n")
        return task

    def set_completed(self, task: Task) -> bool:
        """Mark ``task`` done today and move it to the completed history.

        Returns False when the task was already completed.
        """
        if task.completion_date != NO_COMPLETION_DATE:
            self.console.write("\nTask is already completed.\n")
            return False
        task.set_completion_percentage(100.0)
        task.set_completion_date(self.today, self.today)
        self.completed.push(self.in_progress.remove(task))
        self.console.write(f"\nTask '{task.title}' successfully completed.\n")
        return True

    def print_planner(self) -> None:
        out = self.console
        out.clear()
        out.write("\n\n\t      --- Planner ---\n\n")
        out.write(self.completed.render(self.today))
        out.write(self.in_progress.render(self.today))
        out.write(self.expired.render(self.today))
        out.wait_for_x()

    def delete_history(self) -> None:
        """Forget every completed and expired task."""
        self.completed.clear()
        self.expired.clear()

    def show_task_progress(self) -> list[tuple[Task, float]]:
        """Show completion against elapsed time; return (task, time %) pairs."""
        out = self.console
        if not self.in_progress:
            out.write("\nThere are no tasks in progress at the moment.\n")
            return []
        out.clear()
        out.write("\n\n\t      --- Task Progress ---\n\n")
        rows: list[tuple[Task, float]] = []
        for number, task in enumerate(self.in_progress, 1):
            total = compare_dates(task.deadline, task.start_date)
            spent = compare_dates(self.today, task.start_date)
            if total < 0:
                out.write("\nError: start and deadline dates are not valid.\n")
                continue
            time_percentage = 100.0 if total == 0 else spent / total * 100.0
            rows.append((task, time_percentage))
            out.write(
                f"\nTask {number}: {task.title}\n"
                f"- Completion: {task.completion_percentage:.2f}%\n"
                f"- Time Progress: {time_percentage:.2f}%\n"
            )
        out.wait_for_x()
        return rows

    def weekly_report(self) -> bool:
        """Show this week's report; return whether one was found."""
        out = self.console
        monday = previous_monday(self.today)
        try:
            body = find_report(self.paths.report, monday)
        except FileNotFoundError:
            out.write("\nError: Unable to open file.\n")
            body = None
        if body is None:
            out.write("\nError: Report not available. not found.")
        else:
            out.clear()
            out.write(f"\nReport generated on date: {format_date(monday)}\n")
            out.write(body)
        out.wait_for_x()
        return body is not None