"""Folding meal log entries into day and period nutrition totals."""

from collections.abc import Iterable, Sequence
from datetime import date

from diet_reports.domain.meals import MealLogEntry
from diet_reports.domain.reports import CalorieShare, DayAggregate, PeriodAggregate
from diet_reports.services.calendar import day_key


class UnresolvedCaloriesError(ValueError):
    """Raised when an entry with unknown calories reaches aggregation."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Meal log {entry_id} has no calorie value")
        self.entry_id = entry_id


def index_by_day(entries: Iterable[MealLogEntry]) -> dict[date, list[MealLogEntry]]:
    """Group entries by the calendar date of their timestamp."""
    index: dict[date, list[MealLogEntry]] = {}
    for entry in entries:
        index.setdefault(day_key(entry.timestamp), []).append(entry)
    return index


def day_aggregate(day: date, entries: Iterable[MealLogEntry]) -> DayAggregate:
    """Sum calories and macros for the entries logged on ``day``.

    A macro stays ``None`` only when every entry leaves it unknown; otherwise
    unknown contributions count as zero.
    """
    entries = list(entries)
    return DayAggregate(
        day=day,
        kcal=sum(_calories(entry) for entry in entries),
        protein=_sum_known(entry.protein for entry in entries),
        carbs=_sum_known(entry.carbs for entry in entries),
        fat=_sum_known(entry.fat for entry in entries),
    )


def period_aggregate(
    days: Sequence[DayAggregate], period_length: int | None = None
) -> PeriodAggregate:
    """Roll day totals up into a period total and per-day average.

    ``period_length`` is the full length of the period (7 for a week, the
    month's day count for a month), not the number of days with data.
    """
    length = len(days) if period_length is None else period_length
    total = sum(day.kcal for day in days)
    return PeriodAggregate(
        total=total,
        average=total / length if length > 0 else 0.0,
        period_length=length,
        protein=_sum_known(day.protein for day in days),
        carbs=_sum_known(day.carbs for day in days),
        fat=_sum_known(day.fat for day in days),
    )


def calorie_share(entries: Iterable[MealLogEntry]) -> list[CalorieShare]:
    """Return each entry's share of the day total, largest first."""
    entries = list(entries)
    day_total = sum(_calories(entry) for entry in entries)
    rows = [
        CalorieShare(
            id=entry.id,
            name=entry.name,
            kcal=_calories(entry),
            percent_of_day_total=(
                _calories(entry) / day_total * 100 if day_total else 0.0
            ),
        )
        for entry in entries
    ]
    return sorted(rows, key=lambda row: row.kcal, reverse=True)


def _calories(entry: MealLogEntry) -> int:
    if entry.calories is None:
        raise UnresolvedCaloriesError(entry.id)
    return entry.calories


def _sum_known(values: Iterable[float | None]) -> float | None:
    total: float | None = None
    for value in values:
        if value is None:
            continue
        total = value if total is None else total + value
    return total
