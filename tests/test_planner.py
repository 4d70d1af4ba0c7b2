import io

import pytest

from studyplanner.console import Console
from studyplanner.history import TaskHistory
from studyplanner.planner import Planner
from studyplanner.pqueue import TaskQueue
from studyplanner.report import DataPaths
from studyplanner.task import NO_COMPLETION_DATE, Priority, Task, format_task

TODAY = "10062025"
MONDAY = "09062025"


def make_console(*lines):
    out = io.StringIO()
    text = "".join(line + "\n" for line in lines)
    return Console(stdin=io.StringIO(text), stdout=out, clear_command=""), out


@pytest.fixture
def paths(tmp_path):
    return DataPaths(
        progress=tmp_path / "progress.txt",
        completed=tmp_path / "completed.txt",
        expired=tmp_path / "expired.txt",
        report=tmp_path / "report.txt",
    )


def sample(title="Read", deadline="20062025", start=TODAY, priority=Priority.MEDIUM):
    return Task(
        title=title,
        description="chapter one",
        course="History",
        estimated_time=30,
        start_date=start,
        deadline=deadline,
        priority=priority,
    )


def direct(paths, *lines, tasks=(), expired=()):
    console, out = make_console(*lines)
    planner = Planner(
        paths=paths,
        today=TODAY,
        console=console,
        in_progress=TaskQueue(tasks),
        expired=TaskHistory(expired),
    )
    return planner, out


def test_open_without_files_is_empty(paths):
    console, out = make_console()
    planner = Planner.open(paths, TODAY, console)
    assert len(planner.in_progress) == 0
    assert not planner.completed and not planner.expired
    assert "The queue is empty or non-existent." in out.getvalue()


def test_open_moves_overdue_tasks(paths):
    paths.progress.write_text(format_task(sample(deadline="05062025", start="01062025")))
    console, out = make_console()
    planner = Planner.open(paths, TODAY, console)
    assert len(planner.in_progress) == 0
    assert [t.title for t in planner.expired] == ["Read"]
    assert "Task 'Read' expired" in out.getvalue()
    assert "All tasks have expired." in out.getvalue()


def test_insert_then_close_and_reopen(paths):
    console, _ = make_console("Read", "chapter one", "History", "30", "20062025", "high", "x")
    planner = Planner.open(paths, TODAY, console)
    task = planner.insert()
    assert task.priority is Priority.HIGH
    assert task.start_date == TODAY
    assert planner.in_progress.peek() is task
    planner.close()

    again = Planner.open(paths, TODAY, make_console()[0])
    assert [t.title for t in again.in_progress] == ["Read"]
    assert again.in_progress[0].deadline == "20062025"


def test_set_completed_moves_task(paths):
    task = sample()
    planner, _ = direct(paths, tasks=[task])
    assert planner.set_completed(task) is True
    assert task.completion_percentage == 100.0
    assert task.completion_date == TODAY
    assert planner.completed.first() is task
    assert len(planner.in_progress) == 0
    assert planner.set_completed(task) is False


def test_modify_task_changes_fields(paths):
    task = sample()
    planner, _ = direct(
        paths, "Read", "n", "1", "Write", "5", "30062025", "6", "low", "4", "45", "0",
        tasks=[task],
    )
    result = planner.modify_task()
    assert result is task
    assert task.title == "Write"
    assert task.deadline == "30062025"
    assert task.priority is Priority.LOW
    assert task.estimated_time == 45


def test_modify_rejects_invalid_deadline_then_accepts(paths):
    task = sample()
    planner, out = direct(paths, "Read", "n", "5", "01012020", "25062025", "0", tasks=[task])
    planner.modify_task()
    assert task.deadline == "25062025"
    assert "!! Invalid date !!" in out.getvalue()


def test_modify_full_percentage_completes(paths):
    task = sample()
    planner, _ = direct(paths, "Read", "n", "7", "150", "100", "0", tasks=[task])
    planner.modify_task()
    assert task in list(planner.completed)
    assert len(planner.in_progress) == 0


def test_modify_partial_percentage(paths):
    task = sample()
    planner, _ = direct(paths, "Read", "n", "7", "40", "0", tasks=[task])
    planner.modify_task()
    assert task.completion_percentage == 40.0
    assert task.completion_date == NO_COMPLETION_DATE


def test_modify_unknown_title(paths):
    planner, out = direct(paths, "Missing", "n", tasks=[sample()])
    assert planner.modify_task() is None
    assert "task not found" in out.getvalue()


def test_delete_task(paths):
    keep, drop = sample("Keep"), sample("Drop")
    planner, _ = direct(paths, "Drop", "n", tasks=[keep, drop])
    assert planner.delete_task() is drop
    assert list(planner.in_progress) == [keep]


def test_restore_expired_task(paths):
    old = sample(deadline="05062025", start="01062025")
    old.completion_percentage = 20.0
    planner, _ = direct(paths, "Read", "medium", "25062025", expired=[old])
    restored = planner.restore_expired_task()
    assert restored is old
    assert old.start_date == TODAY
    assert old.completion_percentage == 0.0
    assert old.deadline == "25062025"
    assert list(planner.in_progress) == [old]
    assert not planner.expired


def test_restore_unknown_title(paths):
    old = sample(deadline="05062025", start="01062025")
    planner, out = direct(paths, "Other", expired=[old])
    assert planner.restore_expired_task() is None
    assert list(planner.expired) == [old]
    assert "not found in the expired list" in out.getvalue()


def test_delete_history(paths):
    planner, _ = direct(paths, expired=[sample("A"), sample("B")])
    planner.completed.push(sample("C"))
    planner.delete_history()
    assert len(planner.completed) == 0
    assert len(planner.expired) == 0


def test_show_task_progress(paths):
    due_today = sample("Now", deadline=TODAY, start=TODAY)
    later = sample("Later", deadline="20062025", start="01062025")
    planner, out = direct(paths, "x", tasks=[due_today, later])
    rows = dict((task.title, pct) for task, pct in planner.show_task_progress())
    assert rows["Now"] == 100.0
    assert 0.0 < rows["Later"] < 100.0
    assert "Time Progress" in out.getvalue()


def test_show_task_progress_empty(paths):
    planner, out = direct(paths)
    assert planner.show_task_progress() == []
    assert "no tasks in progress" in out.getvalue()


def test_monday_report_written_once_and_shown(paths):
    paths.progress.write_text(format_task(sample(start="01062025")))
    Planner.open(paths, MONDAY, make_console()[0]).close()
    Planner.open(paths, MONDAY, make_console()[0])
    lines = paths.report.read_text().splitlines()
    assert lines.count(MONDAY) == 1

    console, out = make_console("x")
    planner = Planner.open(paths, MONDAY, console)
    assert planner.weekly_report() is True
    shown = out.getvalue()
    assert "Report generated on date: 09/06/2025" in shown
    assert "- Read (History) Deadline: 20/06/2025" in shown


def test_weekly_report_missing(paths):
    planner, out = direct(paths, "x")
    assert planner.weekly_report() is False
    assert "Report not available" in out.getvalue()


def test_print_planner_lists_sections(paths):
    planner, out = direct(
        paths, "x", tasks=[sample()], expired=[sample("Old", deadline="05062025")]
    )
    planner.print_planner()
    text = out.getvalue()
    assert "Tasks in progress" in text
    assert "expired tasks" in text
    assert "- Old (History) Expired on: 05/06/2025" in text