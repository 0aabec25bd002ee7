"""Calendar arithmetic over local wall-clock dates."""

import calendar
from datetime import date, datetime, time, timedelta

from diet_reports.domain.calendar import (
    DECEMBER_INDEX,
    CalendarCursor,
    DayCursor,
    MonthCursor,
    WeekCursor,
)

DAYS_PER_WEEK = 7


def start_of_day(instant: datetime) -> datetime:
    """Return midnight of the instant's calendar date."""
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(instant: datetime) -> datetime:
    """Return midnight of the next calendar date (exclusive upper bound)."""
    return start_of_day(instant) + timedelta(days=1)


def start_of_week(instant: datetime) -> datetime:
    """Return midnight of the Monday that starts the instant's week."""
    # Sunday-zero numbering: Sunday belongs to the week that began six days earlier.
    day_of_week = instant.isoweekday() % DAYS_PER_WEEK
    offset = -6 if day_of_week == 0 else 1 - day_of_week
    return start_of_day(instant) + timedelta(days=offset)


def days_in_month(year: int, month_index: int) -> int:
    """Return the number of days in a month; ``month_index`` is 0-based."""
    return calendar.monthrange(year, month_index + 1)[1]


def day_key(instant: datetime | date) -> date:
    """Return the calendar-day grouping key for an instant."""
    if isinstance(instant, datetime):
        return instant.date()
    return instant


def day_key_string(instant: datetime | date) -> str:
    """Return the stable ``YYYY-MM-DD`` key for an instant's day."""
    key = day_key(instant)
    return f"{key.year:04d}-{key.month:02d}-{key.day:02d}"


def advance(cursor: CalendarCursor, step: int) -> CalendarCursor:
    """Move a cursor forward (+1) or back (-1) by exactly one period."""
    if step not in {-1, 1}:
        raise ValueError(f"Cursor step must be +1 or -1, got {step}")
    if isinstance(cursor, DayCursor):
        return DayCursor(cursor.day + timedelta(days=step))
    if isinstance(cursor, WeekCursor):
        return WeekCursor(cursor.week_start + timedelta(days=DAYS_PER_WEEK * step))
    if isinstance(cursor, MonthCursor):
        month_index = cursor.month_index + step
        if month_index < 0:
            return MonthCursor(year=cursor.year - 1, month_index=DECEMBER_INDEX)
        if month_index > DECEMBER_INDEX:
            return MonthCursor(year=cursor.year + 1, month_index=0)
        return MonthCursor(year=cursor.year, month_index=month_index)
    raise TypeError(f"Unsupported cursor: {cursor!r}")


def period_days(cursor: CalendarCursor) -> list[date]:
    """Return the ordered calendar days covered by a cursor."""
    if isinstance(cursor, DayCursor):
        return [cursor.day]
    if isinstance(cursor, WeekCursor):
        return [
            cursor.week_start + timedelta(days=offset)
            for offset in range(DAYS_PER_WEEK)
        ]
    if isinstance(cursor, MonthCursor):
        first = cursor.first_day
        return [
            first + timedelta(days=offset)
            for offset in range(days_in_month(cursor.year, cursor.month_index))
        ]
    raise TypeError(f"Unsupported cursor: {cursor!r}")


def period_bounds(cursor: CalendarCursor) -> tuple[datetime, datetime]:
    """Return the half-open ``[start, end)`` window covered by a cursor."""
    days = period_days(cursor)
    start = datetime.combine(days[0], time.min)
    return start, end_of_day(datetime.combine(days[-1], time.min))
