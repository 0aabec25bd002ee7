"""Calendar cursor models for report navigation."""

from dataclasses import dataclass
from datetime import date, timedelta

MONDAY = 0
DECEMBER_INDEX = 11


@dataclass(frozen=True)
class DayCursor:
    """Cursor pointing at a single calendar day."""

    day: date

    @classmethod
    def today(cls, today: date | None = None) -> "DayCursor":
        """Return a cursor for today."""
        return cls(today or date.today())


@dataclass(frozen=True)
class WeekCursor:
    """Cursor pointing at a Monday-start week."""

    week_start: date

    def __post_init__(self) -> None:
        if self.week_start.weekday() != MONDAY:
            raise ValueError(f"Week must start on a Monday, got {self.week_start}")

    @classmethod
    def containing(cls, day: date) -> "WeekCursor":
        """Return the cursor for the week that contains ``day``."""
        return cls(day - timedelta(days=day.weekday()))

    @classmethod
    def this_week(cls, today: date | None = None) -> "WeekCursor":
        """Return a cursor for the current week."""
        return cls.containing(today or date.today())


@dataclass(frozen=True)
class MonthCursor:
    """Cursor pointing at a calendar month; ``month_index`` is 0-based."""

    year: int
    month_index: int

    def __post_init__(self) -> None:
        if not 0 <= self.month_index <= DECEMBER_INDEX:
            raise ValueError(f"Month index must be 0-11, got {self.month_index}")

    @classmethod
    def containing(cls, day: date) -> "MonthCursor":
        """Return the cursor for the month that contains ``day``."""
        return cls(year=day.year, month_index=day.month - 1)

    @classmethod
    def this_month(cls, today: date | None = None) -> "MonthCursor":
        """Return a cursor for the current month."""
        return cls.containing(today or date.today())

    @property
    def first_day(self) -> date:
        return date(self.year, self.month_index + 1, 1)


CalendarCursor = DayCursor | WeekCursor | MonthCursor
