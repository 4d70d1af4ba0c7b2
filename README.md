# studyplanner

A small interactive planner for study tasks, used from the terminal.

Each task has a title (up to 20 characters), a description (up to 255), a
course (up to 50), an estimated time in minutes, a start date, a deadline, a
priority (low, medium or high) and a completion percentage. Tasks live in
one of three places:

- **in progress**: a max-heap ordered by priority, highest first;
- **completed**: tasks brought to 100%, with the date they were finished;
- **expired**: tasks whose deadline passed before they were finished.

All dates are typed and stored as `ddmmyyyy` (for example `09062025`) and
shown as `dd/mm/yyyy`.

## Installing

```
pip install .
```

## Running

```
studyplanner
```

Options:

| Option           | Meaning                                                         |
|------------------|-----------------------------------------------------------------|
| `--today DATE`   | use `DATE` (`ddmmyyyy`) as today instead of asking for it       |
| `--data LAYOUT`  | `Data` (default) keeps files in `./Data`, `test` in `./test/output` |
| `--no-clear`     | never clear the screen                                          |

Without `--today` the planner asks for the date. If the date is not a real
calendar date it prints `Error.` and exits with status 1.

On start it loads its data files, moves every task in progress whose
deadline is before today to the expired list and, when today is a Monday
and no report dated today exists yet, appends a weekly report to the report
file. That report lists the completed tasks finished in the last seven
days, every task in progress, and the tasks that expired in the last seven
days. Then it shows the menu:

```
1. Add a new task
2. Update a task
3. Delete a task
4. Restore a task
5. View the planner
6. Clear the history
7. View your progress
8. View your weekly report
0. Close the planner
```

- **Add a new task** asks for every field; the deadline must be today or
  later, and the task starts today.
- **Update a task** picks a task in progress by title and changes its
  title, description, course, estimated time, deadline, priority or
  completion percentage. Setting the percentage to 100 marks it completed
  today and moves it to the completed list.
- **Delete a task** picks a task in progress by title and drops it.
- **Restore a task** brings an expired task back into progress with a new
  priority and a new deadline, starting again from today at 0%.
- **View the planner** lists completed, in-progress and expired tasks.
- **Clear the history** empties the completed and expired lists.
- **View your progress** shows, for each task in progress, its completion
  next to the share of its time between start and deadline that has gone.
- **View your weekly report** shows the report dated this week's Monday.

Choosing `0`, or reaching the end of input, saves everything and ends the
session.

## Data files

With the default layout the planner keeps its data in `./Data`; the
directory is created when files are written. Missing files are treated as
empty.

| File            | Holds                          |
|-----------------|--------------------------------|
| `progress.txt`  | tasks in progress              |
| `completed.txt` | completed tasks                |
| `expired.txt`   | expired tasks                  |
| `report.txt`    | the weekly reports, appended   |

Task files hold one task per line, fields separated by tabs: title,
description, course, estimated time, start date, deadline, completion
percentage (two decimals), completion date (`00000000` while unfinished)
and priority (1 low, 2 medium, 3 high). Reading stops at the first
malformed line.

Each report in `report.txt` starts with a line holding its date, followed
by a body enclosed between two lines starting with `$`.

## Using it from Python

- `studyplanner.dates`: `is_valid_date`, `compare_dates`, `parse_date`,
  `format_date`, `days_in_month`, `total_days`, `previous_monday`,
  `last_week_date`, `current_date`.
- `studyplanner.task`: the `Task` dataclass and `Priority` enum,
  `parse_priority`, `format_task` and `parse_task` for the file format,
  `read_tasks` and the interactive `new_task`.
- `studyplanner.pqueue.TaskQueue` and `studyplanner.history.TaskHistory`:
  the in-progress heap and the newest-first history, each with `save` and
  `load`.
- `studyplanner.report`: `data_paths`, `move_expired`,
  `write_weekly_report`, `find_report` and `report_exists`.
- `studyplanner.planner.Planner.open(paths, today, console)` puts them
  together around a `studyplanner.console.Console`, which reads from and
  writes to any pair of text streams.

## Running the tests

```
pip install .[test]
pytest
```