import io

import pytest

from studyplanner.console import Console
from studyplanner.dates import format_date
from studyplanner.task import (
    NO_COMPLETION_DATE,
    Priority,
    Task,
    format_task,
    new_task,
    parse_priority,
    parse_task,
    read_tasks,
)

TODAY = "01062025"


def _sample(**overrides):
    values = dict(
        title="Essay",
        description="Write",
        course="History",
        estimated_time=90,
        start_date="01062025",
        deadline="10062025",
        priority=Priority.MEDIUM,
    )
    values.update(overrides)
    return Task(**values)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("low", Priority.LOW),
        ("medium", Priority.MEDIUM),
        ("high", Priority.HIGH),
        ("urgent", Priority.UNDEFINED),
    ],
)
def test_parse_priority(text, expected):
    assert parse_priority(text) is expected


def test_priority_order_and_labels():
    high = parse_priority("high")
    medium = parse_priority("medium")
    low = parse_priority("low")
    undefined = parse_priority("urgent")
    assert high > medium > low > undefined
    assert low.label == "Low"
    assert undefined.label == "Undefined"


def test_format_task_line():
    assert format_task(_sample()) == (
        "Essay\tWrite\tHistory\t90\t01062025\t10062025\t0.00\t00000000\t2\n"
    )


def test_format_parse_round_trip():
    task = _sample(completion_percentage=42.5, completion_date="05062025")
    assert parse_task(format_task(task)) == task


@pytest.mark.parametrize(
    "line",
    [
        "Essay\tWrite\tHistory\t90\n",
        "Essay\tWrite\tHistory\tninety\t01062025\t10062025\t0.00\t00000000\t2\n",
        "A" * 21 + "\tWrite\tHistory\t90\t01062025\t10062025\t0.00\t00000000\t2\n",
    ],
)
def test_parse_task_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_task(line)


def test_read_tasks_skips_blanks_and_stops_at_bad_record():
    first = _sample(title="One")
    second = _sample(title="Two")
    third = _sample(title="Three")
    stream = io.StringIO(
        format_task(first) + "\n" + format_task(second) + "garbage\n" + format_task(third)
    )
    assert list(read_tasks(stream)) == [first, second]


def test_set_title_length_limit():
    task = _sample()
    task.set_title("B" * 20)
    assert task.title == "B" * 20
    with pytest.raises(ValueError):
        task.set_title("B" * 21)


def test_set_deadline():
    task = _sample()
    task.set_deadline("20062025", TODAY)
    assert task.deadline == "20062025"
    with pytest.raises(ValueError):
        task.set_deadline("31052025", TODAY)
    assert task.deadline == "20062025"


def test_set_completion_date():
    task = _sample()
    task.set_completion_date(TODAY, TODAY)
    assert task.completion_date == TODAY
    with pytest.raises(ValueError):
        task.set_completion_date("32062025", TODAY)


def test_set_completion_percentage_bounds():
    task = _sample()
    task.set_completion_percentage(100.0)
    assert task.completion_percentage == 100.0
    for bad in (-1.0, 100.5):
        with pytest.raises(ValueError):
            task.set_completion_percentage(bad)
    assert task.completion_percentage == 100.0


def test_restart():
    task = _sample(completion_percentage=60.0, start_date="01052025")
    task.restart(TODAY)
    assert task.start_date == TODAY
    assert task.completion_percentage == 0.0


def test_details_uncompleted():
    text = _sample().details()
    assert "Completion Date: Not completed" in text
    assert "Priority: Medium" in text
    assert f"Deadline: {format_date('10062025')}" in text


def test_details_completed_shows_date():
    text = _sample(completion_date="05062025").details()
    assert f"Completion Date: {format_date('05062025')}" in text
    assert "Not completed" not in text


def test_summary_states():
    done = _sample(completion_percentage=100.0, completion_date="05062025")
    assert done.summary(TODAY) == f"- Essay (History) Completed on: {format_date('05062025')}\n"
    expired = _sample(deadline="31052025")
    assert expired.summary(TODAY) == f"- Essay (History) Expired on: {format_date('31052025')}\n"
    due = _sample(deadline=TODAY)
    assert due.summary(TODAY) == "- Essay (History) ! Due today !\n"
    pending = _sample()
    assert pending.summary(TODAY) == f"- Essay (History) Deadline: {format_date('10062025')}\n"


def test_new_task_from_console():
    script = "\n".join(
        [
            "A" * 25,
            "Write the essay",
            "History",
            "-5",
            "90",
            "31132025",
            "31052025",
            "10062025",
            "urgent",
            "medium",
        ]
    ) + "\n"
    out = io.StringIO()
    console = Console(stdin=io.StringIO(script), stdout=out, clear_command="")
    task = new_task(console, TODAY)
    assert task.title == "A" * 20
    assert task.description == "Write the essay"
    assert task.course == "History"
    assert task.estimated_time == 90
    assert task.deadline == "10062025"
    assert task.priority is Priority.MEDIUM
    assert task.start_date == TODAY
    assert task.completion_date == NO_COMPLETION_DATE
    assert task.completion_percentage == 0.0
    output = out.getvalue()
    assert output.count("!! Invalid date !! Try again !!") == 2
    assert "estimated time cannot be negative" in output
    assert "!! Error, try again !!" in output
    assert output.endswith(task.details())