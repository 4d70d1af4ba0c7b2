"""Calendar helpers for dates written as ``ddmmyyyy`` strings."""

from __future__ import annotations

import datetime as _dt
import re

DATE_LENGTH = 8

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def is_only_digits(text: str) -> bool:
    """Return True when every character of ``text`` is an ASCII digit."""
    return all("0" <= char <= "9" for char in text)


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if month == 2 and _is_leap(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_date(date: str) -> tuple[int, int, int]:
    """Split a ``ddmmyyyy`` string into ``(day, month, year)``."""
    return _atoi(date[0:2]), _atoi(date[2:4]), _atoi(date[4:8])


def _to_string(day: int, month: int, year: int) -> str:
    return f"{day:02d}{month:02d}{year:04d}"


def is_valid_date(date: str, today: str | None = None) -> bool:
    """Check that ``date`` is a real ``ddmmyyyy`` date, not earlier than ``today``."""
    if len(date) != DATE_LENGTH or not is_only_digits(date):
        return False
    day, month, year = parse_date(date)
    if month < 1 or month > 12 or day < 1:
        return False
    if day > days_in_month(month, year):
        return False
    if today is not None:
        if len(today) != DATE_LENGTH or not is_only_digits(today):
            return False
        t_day, t_month, t_year = parse_date(today)
        if (year, month, day) < (t_year, t_month, t_day):
            return False
    return True


def format_date(date: str) -> str:
    """Render a ``ddmmyyyy`` string as ``dd/mm/yyyy``."""
    return f"{date[0:2]}/{date[2:4]}/{date[4:8]}"


def _leap_years_before(year: int) -> int:
    if year <= 0:
        return 0
    last = year - 1
    # Year 0 counts as a leap year.
    return last // 4 - last // 100 + last // 400 + 1


def total_days(day: int, month: int, year: int) -> int:
    """Days elapsed from 01/01/0000 up to and including the given date."""
    days = 365 * year + _leap_years_before(year)
    days += sum(days_in_month(m, year) for m in range(1, month))
    return days + day


def compare_dates(date1: str, date2: str) -> int:
    """Signed difference in days, ``date1 - date2``."""
    return total_days(*parse_date(date1)) - total_days(*parse_date(date2))


def previous_monday(today: str) -> str:
    """The Monday on or before ``today``, as ``ddmmyyyy``."""
    day, month, year = parse_date(today)
    current = _dt.date(year, month, day)
    monday = current - _dt.timedelta(days=current.weekday())
    return _to_string(monday.day, monday.month, monday.year)


def last_week_date(today: str) -> str:
    """The date seven days before ``today``, as ``ddmmyyyy``."""
    day, month, year = parse_date(today)
    day -= 7
    if day <= 0:
        month -= 1
        if month <= 0:
            month = 12
            year -= 1
        day += days_in_month(month, year)
    return _to_string(day, month, year)


def current_date() -> str:
    """Today's local date as ``ddmmyyyy``."""
    now = _dt.date.today()
    return _to_string(now.day, now.month, now.year)