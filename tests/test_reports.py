"""Tests for report views."""

from dataclasses import replace
from datetime import date, datetime

import pytest

from diet_reports.domain.calendar import DayCursor, MonthCursor, WeekCursor
from diet_reports.services.reports import (
    Direction,
    ReportSelection,
    daily_view,
    monthly_view,
    navigate,
    progress_percent,
    weekly_view,
)
from tests.conftest import make_entry

ENTRIES = [
    make_entry("late", "2024-03-10T19:30:00", 700),
    make_entry("early", "2024-03-10T08:00:00", 500),
    make_entry("next", "2024-03-11T08:00:00", 300),
]


def test_daily_view_scenario() -> None:
    view = daily_view(ENTRIES, DayCursor(date(2024, 3, 10)), goal=2000)

    assert view.consumed == 1200
    assert [entry.id for entry in view.entries] == ["early", "late"]
    assert view.progress_percent == 60
    assert view.remaining == 800
    assert [row.id for row in view.calorie_share] == ["late", "early"]


def test_daily_view_excludes_next_midnight() -> None:
    entries = [
        make_entry("start", "2024-03-10T00:00:00", 100),
        make_entry("midnight", "2024-03-11T00:00:00", 900),
    ]

    view = daily_view(entries, DayCursor(date(2024, 3, 10)), goal=2000)

    assert [entry.id for entry in view.entries] == ["start"]


def test_daily_view_clamps_progress_but_keeps_consumed() -> None:
    entries = [make_entry("big", "2024-03-10T12:00:00", 2500)]

    view = daily_view(entries, DayCursor(date(2024, 3, 10)), goal=2000)

    assert view.progress_percent == 100
    assert view.consumed == 2500
    assert view.remaining == 0


def test_daily_view_keeps_unknown_macros() -> None:
    entries = [make_entry("a", "2024-03-10T12:00:00", 400, carbs=30)]

    view = daily_view(entries, DayCursor(date(2024, 3, 10)), goal=2000)

    assert view.totals.carbs == 30
    assert view.totals.protein is None


def test_progress_percent_rounds_half_up() -> None:
    assert progress_percent(1, 200) == 1
    assert progress_percent(0, 2000) == 0
    assert progress_percent(500, 0) == 0


def test_weekly_view_scenario() -> None:
    view = weekly_view(ENTRIES, WeekCursor(date(2024, 3, 4)), goal=2000)

    assert [day.day for day in view.days][0] == date(2024, 3, 4)
    assert [day.kcal for day in view.days] == [0, 0, 0, 0, 0, 0, 1200]
    assert view.summary.total == 1200
    assert view.chart_max == 2000

    following = weekly_view(ENTRIES, WeekCursor(date(2024, 3, 11)), goal=2000)

    assert [day.kcal for day in following.days] == [300, 0, 0, 0, 0, 0, 0]
    assert following.summary.total == 300


def test_weekly_view_spanning_both_days() -> None:
    entries = [
        make_entry("a", "2024-03-11T08:00:00", 500),
        make_entry("b", "2024-03-11T19:30:00", 700),
        make_entry("c", "2024-03-12T08:00:00", 300),
    ]

    view = weekly_view(entries, WeekCursor(date(2024, 3, 11)), goal=2000)

    assert len(view.days) == 7
    assert view.days[0].kcal == 1200
    assert view.days[1].kcal == 300
    assert all(day.kcal == 0 for day in view.days[2:])
    assert view.summary.total == 1500
    assert round(view.summary.average) == 214


def test_chart_max_floors() -> None:
    over_goal = weekly_view(
        [make_entry("a", "2024-03-05T08:00:00", 3100)],
        WeekCursor(date(2024, 3, 4)),
        goal=2000,
    )
    empty = weekly_view([], WeekCursor(date(2024, 3, 4)), goal=0)

    assert over_goal.chart_max == 3100
    assert empty.chart_max == 1


def test_monthly_view_covers_every_day() -> None:
    view = monthly_view(ENTRIES, MonthCursor(2024, 2), goal=2000)

    assert len(view.days) == 31
    assert view.days[9].kcal == 1200
    assert view.days[10].kcal == 300
    assert view.summary.total == 1500
    assert view.summary.period_length == 31
    assert view.summary.average == pytest.approx(1500 / 31)


def test_monthly_view_leap_february() -> None:
    view = monthly_view([], MonthCursor(2024, 1), goal=1800)

    assert len(view.days) == 29
    assert view.days[-1].day == date(2024, 2, 29)
    assert view.chart_max == 1800


def test_views_do_not_mutate_entries() -> None:
    entries = list(ENTRIES)

    daily_view(entries, DayCursor(date(2024, 3, 10)), goal=2000)
    weekly_view(entries, WeekCursor(date(2024, 3, 4)), goal=2000)

    assert entries == ENTRIES
    assert entries[0].timestamp == datetime(2024, 3, 10, 19, 30)


def test_views_hold_immutable_sequences() -> None:
    daily = daily_view(ENTRIES, DayCursor(date(2024, 3, 10)), goal=2000)
    weekly = weekly_view(ENTRIES, WeekCursor(date(2024, 3, 4)), goal=2000)
    monthly = monthly_view(ENTRIES, MonthCursor(2024, 2), goal=2000)

    assert isinstance(daily.entries, tuple)
    assert isinstance(daily.calorie_share, tuple)
    assert isinstance(weekly.days, tuple)
    assert isinstance(monthly.days, tuple)
    with pytest.raises(AttributeError):
        daily.entries.append(ENTRIES[0])  # type: ignore[attr-defined]
    assert hash(daily) == hash(replace(daily))
    assert hash(weekly) == hash(replace(weekly))


def test_navigate_moves_one_period() -> None:
    assert navigate(MonthCursor(2024, 11), Direction.NEXT) == MonthCursor(2025, 0)
    assert navigate(WeekCursor(date(2024, 3, 4)), Direction.PREVIOUS) == WeekCursor(
        date(2024, 2, 26)
    )


def test_selection_resets_on_navigation() -> None:
    selection = ReportSelection(cursor=WeekCursor(date(2024, 3, 4))).toggle(3)

    moved = selection.navigate(Direction.NEXT)

    assert selection.selected_index == 3
    assert moved.selected_index is None
    assert moved.cursor == WeekCursor(date(2024, 3, 11))


def test_selection_toggle_clears_same_index() -> None:
    selection = ReportSelection(cursor=MonthCursor(2024, 2))

    assert selection.toggle(4).toggle(4).selected_index is None
    assert selection.toggle(4).toggle(5).selected_index == 5
