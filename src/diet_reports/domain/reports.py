"""Domain models for nutrition reports."""

from dataclasses import dataclass
from datetime import date

from diet_reports.domain.calendar import DayCursor, MonthCursor, WeekCursor
from diet_reports.domain.meals import MealLogEntry


@dataclass(frozen=True)
class DayAggregate:
    """Nutrition totals for one calendar day; ``None`` macros are unknown."""

    day: date
    kcal: int
    protein: float | None
    carbs: float | None
    fat: float | None


@dataclass(frozen=True)
class PeriodAggregate:
    """Calorie total and per-day average for a week or month."""

    total: int
    average: float
    period_length: int
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


@dataclass(frozen=True)
class CalorieShare:
    """One entry's share of the day's calories."""

    id: str
    name: str
    kcal: int
    percent_of_day_total: float


@dataclass(frozen=True)
class DailyView:
    """What the daily report displays for the selected day."""

    cursor: DayCursor
    entries: tuple[MealLogEntry, ...]
    totals: DayAggregate
    consumed: int
    goal: int
    remaining: int
    progress_percent: int
    calorie_share: tuple[CalorieShare, ...]


@dataclass(frozen=True)
class PeriodView:
    """What the weekly or monthly report displays."""

    cursor: WeekCursor | MonthCursor
    days: tuple[DayAggregate, ...]
    summary: PeriodAggregate
    goal: int
    chart_max: int
