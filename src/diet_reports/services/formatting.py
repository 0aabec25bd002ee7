"""Plain-text formatting for report views."""

from datetime import date, timedelta

from diet_reports.domain.calendar import MonthCursor, WeekCursor
from diet_reports.domain.reports import DailyView, PeriodView

MISSING_VALUE = "–"

_WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def day_title(day: date) -> str:
    """Return e.g. ``10 Mar 2024 (Sun)``."""
    return f"{_day_short(day)} {day.year} ({_WEEKDAYS[day.weekday()]})"


def week_title(cursor: WeekCursor) -> str:
    """Return the week's date range, collapsing a shared month and year."""
    start = cursor.week_start
    end = start + timedelta(days=6)
    if (start.year, start.month) == (end.year, end.month):
        return f"{_day_short(start)} – {_day_short(end)} {end.year}"
    return f"{_day_short(start)} {start.year} – {_day_short(end)} {end.year}"


def month_title(cursor: MonthCursor) -> str:
    """Return e.g. ``Mar 2024``."""
    return f"{_MONTHS[cursor.month_index]} {cursor.year}"


def format_macro(value: float | None) -> str:
    """Format a macro in whole grams, or a placeholder when unknown."""
    if value is None:
        return MISSING_VALUE
    return f"{round(value)} g"


def format_daily_report(view: DailyView) -> str:
    """Format the daily report as text."""
    lines = [
        day_title(view.cursor.day),
        f"Consumed: {view.consumed} kcal",
        f"Goal: {view.goal} kcal ({view.progress_percent}% of goal)",
        f"Protein: {format_macro(view.totals.protein)}",
        f"Carbs: {format_macro(view.totals.carbs)}",
        f"Fat: {format_macro(view.totals.fat)}",
    ]
    if view.entries:
        lines.append("Meals:")
        for entry in view.entries:
            line = (
                f"- {entry.timestamp.strftime('%H:%M')} {entry.name}: "
                f"{entry.calories} kcal"
            )
            if entry.remarks:
                line = f"{line} ({entry.remarks})"
            lines.append(line)
    return "\n".join(lines)


def format_period_report(title: str, view: PeriodView) -> str:
    """Format a weekly or monthly report as text."""
    summary = view.summary
    lines = [
        title,
        f"Total: {summary.total} kcal",
        f"Daily average: {round(summary.average)} kcal",
        f"Protein: {format_macro(summary.protein)}",
        f"Carbs: {format_macro(summary.carbs)}",
        f"Fat: {format_macro(summary.fat)}",
        "Daily totals:",
    ]
    for day in view.days:
        lines.append(f"- {_day_short(day.day)}: {day.kcal} kcal")
    return "\n".join(lines)


def _day_short(day: date) -> str:
    return f"{day.day:02d} {_MONTHS[day.month - 1]}"
