"""Report views for the selected day, week, or month."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import IntEnum

from diet_reports.domain.calendar import (
    CalendarCursor,
    DayCursor,
    MonthCursor,
    WeekCursor,
)
from diet_reports.domain.meals import MealLogEntry
from diet_reports.domain.reports import DailyView, PeriodView
from diet_reports.services.aggregation import (
    calorie_share,
    day_aggregate,
    index_by_day,
    period_aggregate,
)
from diet_reports.services.calendar import advance, period_bounds, period_days
from diet_reports.services.meal_logs import MealLogService

MAX_PROGRESS_PERCENT = 100


class Direction(IntEnum):
    """Navigation direction for report cursors."""

    PREVIOUS = -1
    NEXT = 1


def daily_view(
    entries: Iterable[MealLogEntry], cursor: DayCursor, goal: int
) -> DailyView:
    """Build the daily report for the cursor's day."""
    start, end = period_bounds(cursor)
    day_entries = tuple(
        sorted(
            (entry for entry in entries if start <= entry.timestamp < end),
            key=lambda entry: entry.timestamp,
        )
    )
    totals = day_aggregate(cursor.day, day_entries)
    consumed = totals.kcal
    return DailyView(
        cursor=cursor,
        entries=day_entries,
        totals=totals,
        consumed=consumed,
        goal=goal,
        remaining=max(goal - consumed, 0),
        progress_percent=progress_percent(consumed, goal),
        calorie_share=tuple(calorie_share(day_entries)),
    )


def weekly_view(
    entries: Iterable[MealLogEntry], cursor: WeekCursor, goal: int
) -> PeriodView:
    """Build the Monday-to-Sunday report for the cursor's week."""
    return _period_view(entries, cursor, goal)


def monthly_view(
    entries: Iterable[MealLogEntry], cursor: MonthCursor, goal: int
) -> PeriodView:
    """Build the day-by-day report for the cursor's month."""
    return _period_view(entries, cursor, goal)


def navigate(cursor: CalendarCursor, direction: Direction | int) -> CalendarCursor:
    """Move a report cursor one period in ``direction``."""
    return advance(cursor, int(direction))


def progress_percent(consumed: int, goal: int) -> int:
    """Return goal progress as a percentage clamped to 100."""
    if goal <= 0:
        return 0
    return min(MAX_PROGRESS_PERCENT, _round_half_up(consumed / goal * 100))


@dataclass(frozen=True)
class ReportSelection:
    """Cursor plus the day selected for drill-down within its period."""

    cursor: CalendarCursor
    selected_index: int | None = None

    def navigate(self, direction: Direction | int) -> "ReportSelection":
        """Move to the adjacent period, clearing the drill-down selection."""
        return ReportSelection(cursor=navigate(self.cursor, direction))

    def toggle(self, index: int) -> "ReportSelection":
        """Select a day, or clear the selection if it is already selected."""
        if self.selected_index == index:
            return replace(self, selected_index=None)
        return replace(self, selected_index=index)


@dataclass
class ReportService:
    """Fetches a user's meal logs and goal, then builds report views."""

    meal_log_service: MealLogService
    default_goal: int

    async def get_daily(self, user_id: str, cursor: DayCursor) -> DailyView:
        """Return the daily report for a user."""
        entries, goal = await self._load(user_id)
        return daily_view(entries, cursor, goal)

    async def get_weekly(self, user_id: str, cursor: WeekCursor) -> PeriodView:
        """Return the weekly report for a user."""
        entries, goal = await self._load(user_id)
        return weekly_view(entries, cursor, goal)

    async def get_monthly(self, user_id: str, cursor: MonthCursor) -> PeriodView:
        """Return the monthly report for a user."""
        entries, goal = await self._load(user_id)
        return monthly_view(entries, cursor, goal)

    async def _load(self, user_id: str) -> tuple[list[MealLogEntry], int]:
        entries = await self.meal_log_service.list_entries(user_id)
        goal = await self.meal_log_service.get_daily_goal(user_id)
        return entries, goal or self.default_goal


def _period_view(
    entries: Iterable[MealLogEntry], cursor: WeekCursor | MonthCursor, goal: int
) -> PeriodView:
    index = index_by_day(entries)
    days = tuple(
        day_aggregate(day, index.get(day, [])) for day in period_days(cursor)
    )
    return PeriodView(
        cursor=cursor,
        days=days,
        summary=period_aggregate(days, period_length=len(days)),
        goal=goal,
        chart_max=max(goal, *(day.kcal for day in days), 1),
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
