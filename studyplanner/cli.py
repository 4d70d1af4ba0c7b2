"""Command-line entry point with the planner's navigation menu."""

from __future__ import annotations

import argparse

from .console import Console
from .dates import DATE_LENGTH, format_date, is_valid_date
from .planner import Planner
from .report import data_paths

_MENU = (
    "1. Add a new task\n"
    "2. Update a task\n"
    "3. Delete a task\n"
    "4. Restore a task\n"
    "5. View the planner\n"
    "6. Clear the history\n"
    "7. View your progress\n"
    "8. View your weekly report\n"
    "0. Close the planner\n"
    "\n\n\t      -----------------------\n\n"
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="studyplanner", description="Study planner.")
    parser.add_argument(
        "--data",
        choices=("Data", "test"),
        default="Data",
        help="which data folder layout to use",
    )
    parser.add_argument("--today", help="the current date as ddmmyyyy")
    parser.add_argument(
        "--no-clear", action="store_true", help="do not clear the screen"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    console = Console(clear_command="" if args.no_clear else None)

    try:
        today = args.today
        if today is None:
            today = console.prompt("Enter the date (format ddmmyyyy): ", DATE_LENGTH)
        if not is_valid_date(today):
            console.write("Error.\n")
            return 1
        planner = Planner.open(data_paths(args.data), today, console)
    except (OSError, EOFError):
        console.write("Error.\n")
        return 1

    actions = {
        1: planner.insert,
        2: planner.modify_task,
        3: planner.delete_task,
        4: planner.restore_expired_task,
        5: planner.print_planner,
        6: planner.delete_history,
        7: planner.show_task_progress,
        8: planner.weekly_report,
    }

    try:
        while True:
            console.clear()
            console.write("\n\n\t      --- Navigation menu ---\n")
            console.write(f"\n\t        --- {format_date(today)} ---\n\n")
            console.write(_MENU)
            choice = console.read_int("Choose an option: ")
            if choice == 0:
                break
            action = actions.get(choice)
            if action is None:
                console.write("Invalid choice. retry\n")
            else:
                action()
    except EOFError:
        pass

    planner.close()
    return 0